"""Small geometric helpers used by the simulator."""

from __future__ import annotations

import math

Point = tuple[float, float, float]


def distance_between_points(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points in 3D space."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)