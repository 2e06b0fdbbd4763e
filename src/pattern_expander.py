"""Hole grid expansion for G-code generation.

Expands a rows x columns grid into hole positions in serpentine order.
"""
import math
from typing import Iterator, List, Tuple


def plan_visits(columns: int, rows: int) -> Iterator[Tuple[int, int]]:
    """
    Iterate over grid cells in serpentine (boustrophedon) order.

    Even rows run left to right and odd rows right to left, so the tool never
    travels back across the whole grid between rows.

    Args:
        columns: Number of columns
        rows: Number of rows

    Yields:
        (column, row) index pairs, columns * rows of them
    """
    for row in range(rows):
        if row % 2 == 0:
            column_order = range(columns)
        else:
            column_order = range(columns - 1, -1, -1)
        for column in column_order:
            yield column, row


def expand_hole_centers(params) -> List[Tuple[float, float]]:
    """
    Expand plan parameters into absolute hole centers in visit order.

    Args:
        params: PlanParameters

    Returns:
        List of (x, y) coordinate tuples
    """
    return [
        (column * params.column_spacing, row * params.row_spacing)
        for column, row in plan_visits(params.columns, params.rows)
    ]


def travel_distance(points: List[Tuple[float, float]]) -> float:
    """
    Total straight-line travel between consecutive points.

    Args:
        points: List of (x, y) coordinate tuples

    Returns:
        Sum of distances, 0 for fewer than two points
    """
    total = 0.0
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        total += math.hypot(x2 - x1, y2 - y1)
    return total
