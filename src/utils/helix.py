"""Helical plunge generation.

The tool descends on alternating half-circle arcs instead of plunging
straight down, which keeps the radial load on the cutter low.
"""
import math
from typing import Iterator, Tuple

from ..errors import PreconditionError
from .arc_utils import emit_arc_pair
from .gcode_format import generate_arc_move, generate_linear_move, generate_rapid_move


def iter_half_turns(feed_step: float, depth: float) -> Iterator[Tuple[int, float]]:
    """
    Iterate over the half-turns of a helical descent.

    Each half-turn descends by feed_step / 2. The last one is truncated so the
    descent lands exactly on depth.

    Args:
        feed_step: Z drop per full revolution
        depth: Total depth to descend (positive)

    Yields:
        Tuple of (toggle, delta): the X sign of the half-turn and the
        (negative) Z change it makes
    """
    z = 0
    toggle = -1
    while z < depth:
        z_old = z
        z += feed_step / 2
        if z > depth:
            z = depth
        yield toggle, z_old - z
        toggle *= -1


def helix_plunge(program, diameter: float, feed_step: float, depth: float) -> None:
    """
    Cut a circular hole down to depth with a helical plunge.

    Starts at the hole center, steps out to the wall, spirals down in
    half-turns, trues up the bottom with two closing half-circles and returns
    to center. All moves are relative; positioning is absolute again on return.

    Args:
        program: ToolpathProgram to append to
        diameter: Centerline diameter of the helix
        feed_step: Z drop per full revolution (must be positive)
        depth: Depth below the current Z

    Raises:
        PreconditionError: If feed_step is not positive or depth is not finite
    """
    if not feed_step > 0:
        raise PreconditionError(f"Helix feed step must be positive, got {feed_step}")
    if not math.isfinite(depth):
        raise PreconditionError(f"Helix depth must be finite, got {depth}")

    with program.relative():
        program.emit(generate_rapid_move(x=diameter / 2))

        toggle = -1
        for toggle, delta in iter_half_turns(feed_step, depth):
            program.emit(generate_arc_move(toggle * diameter, toggle * diameter / 2, z=delta))
            toggle *= -1

        emit_arc_pair(program, diameter, toggle)
        program.emit(generate_linear_move(x=toggle * diameter / 2))
