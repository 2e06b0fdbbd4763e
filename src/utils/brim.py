"""Brim cleanup: re-cut the seam left where circular passes start and end."""
from .arc_utils import emit_arc_pair
from .gcode_format import generate_linear_move


def brim_cleanup(program, diameter: float) -> None:
    """
    Trace one full circle at diameter from the current center.

    The tool is left on the circle wall, not back at center.

    Args:
        program: ToolpathProgram to append to
        diameter: Diameter of the pocket wall to clean up
    """
    with program.relative():
        program.emit(generate_linear_move(x=diameter / 2))
        emit_arc_pair(program, diameter, -1)
