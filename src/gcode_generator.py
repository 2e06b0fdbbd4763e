"""G-code generation for wasteboard hole grids.

Each hole is cut in four stages, all with the same tool:
- helical plunge through the relief depth
- relief pocket grown out to seat a plate or washer
- second helical plunge for the hole itself
- brim cleanup around the pocket wall

Holes are visited in serpentine order.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from .models import PlanParameters
from .pattern_expander import plan_visits
from .program import ToolpathProgram
from .utils.brim import brim_cleanup
from .utils.gcode_format import generate_header, generate_rapid_move
from .utils.helix import helix_plunge
from .utils.relief import grow_relief
from .utils.validators import validate_plan

logger = logging.getLogger(__name__)

# Diameter reduction of the first plunge, leaving clearance to the relief wall
CLEARANCE_ALLOWANCE = 0.1

# Z drop per helix revolution (mm), independent of the configured feed
HELIX_FEED_STEP = 1

DEFAULT_FILENAME = 'wasteboard.nc'


@dataclass
class GenerationResult:
    """Result of G-code generation."""
    program: ToolpathProgram
    hole_count: int
    warnings: List[str] = field(default_factory=list)
    filename: str = DEFAULT_FILENAME

    @property
    def gcode(self) -> str:
        return self.program.to_text()


def generate_hole(program: ToolpathProgram, params: PlanParameters, x: float, y: float) -> None:
    """
    Append the full cutting sequence for one hole centered at (x, y).

    Starts and ends at safe Z with absolute positioning.

    Args:
        program: Program to append to
        params: Plan parameters
        x: Hole center X
        y: Hole center Y
    """
    tool = params.tool_diameter

    program.emit(generate_rapid_move(x=x, y=y))

    # Relief plunge, from safe Z down to the plate seat
    helix_plunge(
        program,
        tool - CLEARANCE_ALLOWANCE,
        HELIX_FEED_STEP,
        params.plate_depth + params.safe_z,
    )

    # Make room for the plate, starting one tool diameter out
    grow_relief(
        program,
        tool - CLEARANCE_ALLOWANCE + tool,
        params.plate_diameter - tool,
        tool,
    )

    # The hole itself, below the relief floor
    helix_plunge(
        program,
        params.hole_diameter - tool,
        HELIX_FEED_STEP,
        params.hole_depth - params.plate_depth,
    )

    program.emit(generate_rapid_move(z=0))
    brim_cleanup(program, params.plate_diameter)
    program.emit(generate_rapid_move(z=params.safe_z))


def build_program(params: PlanParameters) -> ToolpathProgram:
    """
    Build the complete program for a hole grid.

    Performs no validation. Most malformed plans still produce a
    well-formed program that may be geometrically meaningless; the cases
    that cannot be emitted at all raise.

    Args:
        params: Plan parameters

    Returns:
        ToolpathProgram with the header followed by one block per hole

    Raises:
        PreconditionError: If a hole block cannot be cut at all, e.g. a
            tool_diameter of 0 leaves the relief pocket unable to grow, or a
            depth is not finite
        ValueError: If a position or diameter to be written is not finite
    """
    program = ToolpathProgram()
    program.extend(generate_header(params.fast_feed, params.feed, params.safe_z))

    hole_count = 0
    for column, row in plan_visits(params.columns, params.rows):
        x = column * params.column_spacing
        y = row * params.row_spacing
        logger.debug("Hole %d at column %d row %d (X%s Y%s)", hole_count + 1, column, row, x, y)
        generate_hole(program, params, x, y)
        hole_count += 1

    logger.info("Generated %d holes in %d lines", hole_count, len(program))
    return program


def generate(params: PlanParameters, filename: str = DEFAULT_FILENAME) -> GenerationResult:
    """
    Build a program and collect validation warnings for it.

    Validation errors are reported as warnings here; callers that must refuse
    invalid plans check validate_plan() first.

    Args:
        params: Plan parameters
        filename: Suggested file name for export

    Returns:
        GenerationResult
    """
    errors, warnings = validate_plan(params)
    program = build_program(params)
    return GenerationResult(
        program=program,
        hole_count=params.hole_count,
        warnings=errors + warnings,
        filename=filename,
    )
