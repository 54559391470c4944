"""
Geometric utility functions for graph search.

This module provides the distance measures used as search heuristics. Both
are computed from plane positions, so they only need the coordinates of the
node being scored and of the goal.
"""

from typing import Callable, Dict, Tuple

import numpy as np

Point = Tuple[float, float]


def euclidean_distance(A: Point, B: Point) -> float:
    """
    Straight-line distance between two points.

    Admissible and consistent whenever every edge weight is at least the
    straight-line distance between its endpoints.

    Args:
        A: First point (x, y)
        B: Second point (x, y)

    Returns:
        Euclidean distance between A and B

    Example:
        >>> euclidean_distance((0, 0), (3, 4))
        5.0
    """
    dx = B[0] - A[0]
    dy = B[1] - A[1]
    return float(np.sqrt(dx**2 + dy**2))


def manhattan_distance(A: Point, B: Point) -> float:
    """
    Sum of the absolute coordinate differences between two points.

    Only admissible when edges cannot cut diagonally across the plane.

    Args:
        A: First point (x, y)
        B: Second point (x, y)

    Returns:
        Manhattan (L1) distance between A and B

    Example:
        >>> manhattan_distance((0, 0), (3, 4))
        7.0
    """
    return float(np.abs(B[0] - A[0]) + np.abs(B[1] - A[1]))


HEURISTICS: Dict[str, Callable[[Point, Point], float]] = {
    'euclidean': euclidean_distance,
    'manhattan': manhattan_distance,
}
