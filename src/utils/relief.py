"""Relief pocket growth: concentric full circles widening a pocket."""
import math
from typing import List

from ..errors import PreconditionError
from .arc_utils import emit_arc_pair
from .gcode_format import generate_linear_move


def calculate_relief_diameters(
    diameter_start: float,
    diameter_end: float,
    increment: float
) -> List[float]:
    """
    Calculate the pass diameters of a relief pocket.

    The first pass is at diameter_start. Each further pass is one increment
    wider, and the last step is truncated so the final pass lands exactly on
    diameter_end. A start at or beyond the end gives a single pass.

    Args:
        diameter_start: First pass diameter
        diameter_end: Final pass diameter
        increment: Diameter growth per pass

    Returns:
        List of pass diameters in cutting order

    Raises:
        PreconditionError: If the growth would never reach diameter_end
    """
    if not (math.isfinite(diameter_start) and math.isfinite(diameter_end)):
        raise PreconditionError(
            f"Relief diameters must be finite, got {diameter_start} and {diameter_end}"
        )
    if diameter_start < diameter_end and not increment > 0:
        raise PreconditionError(f"Relief increment must be positive, got {increment}")

    diameters = [diameter_start]
    d = diameter_start
    while d < diameter_end:
        d += increment
        if d > diameter_end:
            d = diameter_end
        diameters.append(d)
    return diameters


def grow_relief(program, diameter_start: float, diameter_end: float, increment: float) -> None:
    """
    Widen a pocket from diameter_start to diameter_end.

    Each pass is a pair of opposing half-circles; between passes the tool
    steps outward by half the diameter change. Ends back at center with
    absolute positioning restored.

    Args:
        program: ToolpathProgram to append to
        diameter_start: First pass diameter
        diameter_end: Final pass diameter
        increment: Diameter growth per pass

    Raises:
        PreconditionError: If increment is not positive while the pocket
            still has to grow
    """
    diameters = calculate_relief_diameters(diameter_start, diameter_end, increment)

    with program.relative():
        program.emit(generate_linear_move(x=diameter_start / 2))

        previous = None
        for d in diameters:
            if previous is not None:
                program.emit(generate_linear_move(x=(d - previous) / 2))
            emit_arc_pair(program, d, -1)
            previous = d

        program.emit(generate_linear_move(x=-diameter_end / 2))
