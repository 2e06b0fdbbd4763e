"""Plan parameter validation utilities.

Generation itself never validates; these checks run at the boundary (CLI
and API) before a program is built.
"""
import math
from typing import List, Tuple


def validate_values(params) -> List[str]:
    """
    Check every parameter is a finite, non-negative number.

    Args:
        params: PlanParameters

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    for name, value in vars(params).items():
        try:
            finite = math.isfinite(value)
        except OverflowError:
            # integers past float range
            errors.append(f"{name} is too large")
            continue
        if not finite:
            errors.append(f"{name} must be a finite number, got {value}")
        elif value < 0:
            errors.append(f"{name} must not be negative, got {value}")
    return errors


def validate_geometry(params) -> List[str]:
    """
    Check the tool, hole and plate dimensions fit inside each other.

    Requires tool_diameter < hole_diameter <= plate_diameter and
    plate_depth <= hole_depth.

    Args:
        params: PlanParameters

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if params.tool_diameter <= 0:
        errors.append("Tool diameter must be greater than 0")
    if params.hole_diameter <= params.tool_diameter:
        errors.append(
            f"Hole diameter ({params.hole_diameter} mm) must be larger than "
            f"tool diameter ({params.tool_diameter} mm)"
        )
    if params.plate_diameter < params.hole_diameter:
        errors.append(
            f"Plate diameter ({params.plate_diameter} mm) must not be smaller than "
            f"hole diameter ({params.hole_diameter} mm)"
        )
    if params.plate_depth > params.hole_depth:
        errors.append(
            f"Plate depth ({params.plate_depth} mm) must not exceed "
            f"hole depth ({params.hole_depth} mm)"
        )

    return errors


def validate_feed_rates(feed: float, fast_feed: float) -> Tuple[List[str], List[str]]:
    """
    Validate cutting and rapid feed rates.

    Args:
        feed: Cutting feed rate (mm/min)
        fast_feed: Rapid feed rate (mm/min)

    Returns:
        Tuple of (errors, warnings) lists
    """
    errors = []
    warnings = []

    if feed <= 0:
        errors.append("Feed must be greater than 0")
    if fast_feed <= 0:
        errors.append("Fast feed must be greater than 0")
    if 0 < fast_feed < feed:
        warnings.append(
            f"Fast feed ({fast_feed} mm/min) is lower than feed ({feed} mm/min). "
            f"Verify this is intentional."
        )

    return errors, warnings


def validate_spacing(params) -> List[str]:
    """
    Warn when neighbouring relief pockets would overlap.

    Args:
        params: PlanParameters

    Returns:
        List of warning messages
    """
    warnings = []

    if params.columns > 1 and params.column_spacing < params.plate_diameter:
        warnings.append(
            f"Column spacing ({params.column_spacing} mm) is smaller than plate "
            f"diameter ({params.plate_diameter} mm); relief pockets will overlap"
        )
    if params.rows > 1 and params.row_spacing < params.plate_diameter:
        warnings.append(
            f"Row spacing ({params.row_spacing} mm) is smaller than plate "
            f"diameter ({params.plate_diameter} mm); relief pockets will overlap"
        )

    return warnings


def validate_plan(params) -> Tuple[List[str], List[str]]:
    """
    Validate a complete plan.

    Errors mean the program would be geometrically invalid. Warnings flag
    plans that generate fine but are probably not what was intended.

    Args:
        params: PlanParameters

    Returns:
        Tuple of (errors, warnings) lists
    """
    errors = validate_values(params)
    if errors:
        return errors, []

    warnings = []
    errors.extend(validate_geometry(params))

    feed_errors, feed_warnings = validate_feed_rates(params.feed, params.fast_feed)
    errors.extend(feed_errors)
    warnings.extend(feed_warnings)

    if params.columns == 0 or params.rows == 0:
        warnings.append("Grid has no holes; the program will only contain the header")

    warnings.extend(validate_spacing(params))

    return errors, warnings


def validate_hole_count(params, max_holes: int) -> List[str]:
    """
    Check the grid does not exceed a hole limit.

    Args:
        params: PlanParameters
        max_holes: Largest allowed columns * rows

    Returns:
        List of error messages (empty if valid)
    """
    if params.hole_count > max_holes:
        return [f"Grid has {params.hole_count} holes, the limit is {max_holes}"]
    return []
