"""G-code formatting utilities.

Numbers are written as the shortest decimal that round-trips to the same
float, with no fixed precision. Integral values carry no decimal point and
negative zero prints as ``0``.
"""
import math
from decimal import Decimal
from typing import List, Optional

ABSOLUTE_POSITIONING = "G90"
RELATIVE_POSITIONING = "G91"
MILLIMETER_UNITS = "G21"
XY_PLANE = "G17"


def format_number(value: float) -> str:
    """
    Format a numeric field value.

    Args:
        value: The value to print

    Returns:
        Plain decimal representation (e.g. ``6``, ``5.9``, ``-2.95``)

    Raises:
        ValueError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")

    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))

    text = repr(float(value))
    if 'e' in text or 'E' in text:
        # repr switches to exponent notation for very small/large values
        text = format(Decimal(text), 'f')
    return text


def generate_header(fast_feed: float, feed: float, safe_z: float) -> List[str]:
    """
    Generate the program header lines.

    Sets absolute positioning, millimeter units and the XY plane, then the
    rapid and cutting feed rates, and retracts to the safe height.

    Args:
        fast_feed: Rapid feed rate (mm/min)
        feed: Cutting feed rate (mm/min)
        safe_z: Safe retract height (mm)

    Returns:
        List of G-code header lines
    """
    return [
        ABSOLUTE_POSITIONING,
        MILLIMETER_UNITS,
        XY_PLANE,
        f"G0 F{format_number(fast_feed)}",
        f"G1 F{format_number(feed)}",
        f"G0 Z{format_number(safe_z)}",
    ]


def _move(
    command: str,
    x: Optional[float],
    y: Optional[float],
    z: Optional[float],
    feed: Optional[float] = None
) -> str:
    parts = [command]
    if x is not None:
        parts.append(f"X{format_number(x)}")
    if y is not None:
        parts.append(f"Y{format_number(y)}")
    if z is not None:
        parts.append(f"Z{format_number(z)}")
    if feed is not None:
        parts.append(f"F{format_number(feed)}")
    return " ".join(parts)


def generate_rapid_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None
) -> str:
    """
    Generate a G0 rapid move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)

    Returns:
        G0 command string
    """
    return _move("G0", x, y, z)


def generate_linear_move(
    x: Optional[float] = None,
    y: Optional[float] = None,
    z: Optional[float] = None,
    feed: Optional[float] = None
) -> str:
    """
    Generate a G1 linear move command.

    Args:
        x: X coordinate (optional)
        y: Y coordinate (optional)
        z: Z coordinate (optional)
        feed: Feed rate (optional)

    Returns:
        G1 command string
    """
    return _move("G1", x, y, z, feed)


def generate_arc_move(x: float, i: float, z: Optional[float] = None) -> str:
    """
    Generate a clockwise G02 arc move along X.

    Supports helical interpolation when Z is provided. The arc center lies on
    the X axis, so only the I offset is written.

    Args:
        x: X destination (relative or absolute depending on mode)
        i: Signed X offset from the current position to the arc center
        z: Z destination (optional, for helical interpolation)

    Returns:
        G02 command string
    """
    parts = ["G02", f"X{format_number(x)}"]
    if z is not None:
        parts.append(f"Z{format_number(z)}")
    parts.append(f"I{format_number(i)}")
    return " ".join(parts)
