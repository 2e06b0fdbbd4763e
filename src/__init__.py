"""G-code generation for wasteboard hole grids."""

from .errors import (
    ToolpathError,
    PreconditionError,
    PositioningModeError,
    ParameterError
)
from .models import PlanParameters
from .program import ToolpathProgram
from .gcode_generator import (
    build_program,
    generate,
    generate_hole,
    GenerationResult
)
from .pattern_expander import (
    plan_visits,
    expand_hole_centers,
    travel_distance
)

__all__ = [
    # Errors
    'ToolpathError',
    'PreconditionError',
    'PositioningModeError',
    'ParameterError',
    # Data
    'PlanParameters',
    'ToolpathProgram',
    # Main generator
    'build_program',
    'generate',
    'generate_hole',
    'GenerationResult',
    # Hole planning
    'plan_visits',
    'expand_hole_centers',
    'travel_distance',
]
