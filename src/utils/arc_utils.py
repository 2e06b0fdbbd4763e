"""Full-circle arc pair emission shared by the hole generators."""
from .gcode_format import generate_arc_move


def calculate_arc_pair(diameter: float, direction: int):
    """
    Calculate the two half-circle moves that trace one full circle.

    The tool sits on the circle wall. The first half-circle crosses the
    diameter in ``direction`` and the second crosses back, so the tool ends
    where it started. I is the signed offset from the current position to
    the arc center.

    Args:
        diameter: Circle diameter
        direction: +1 or -1, the X sign of the first half-circle

    Returns:
        Tuple of two (x, i) relative moves
    """
    first = (direction * diameter, direction * diameter / 2)
    second = (-direction * diameter, -direction * diameter / 2)
    return first, second


def emit_arc_pair(program, diameter: float, direction: int) -> None:
    """
    Emit two opposing G02 half-circles at the current diameter.

    Must be called inside a relative positioning scope.

    Args:
        program: ToolpathProgram to append to
        diameter: Circle diameter
        direction: +1 or -1, the X sign of the first half-circle
    """
    for x, i in calculate_arc_pair(diameter, direction):
        program.emit(generate_arc_move(x, i))
