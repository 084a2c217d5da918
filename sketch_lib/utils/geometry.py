"""Geometric utility functions.

This module provides small helpers shared by the analysis modules. They
supplement the methods on the domain objects (Point, Segment, etc.) with
operations over point sequences.

The module provides the following functions:
    point_distance: Euclidean distance between two points.
    point_distance_squared: Squared distance, for comparisons.
    is_effectively_zero: Compare a value against the shared tolerance.
    remove_coordinate_duplicates: Drop consecutive points at the same position.
    remove_time_duplicates: Drop consecutive points with the same timestamp.
    unwrap_angle: Shift an angle by 2*pi to within pi of a reference.

Example usage:
    Cleaning a stroke before angle computations::

        from sketch_lib.utils.geometry import remove_coordinate_duplicates
        from sketch_lib.domain import Point

        points = [Point(0, 0), Point(0, 0), Point(5, 0)]
        cleaned = remove_coordinate_duplicates(points)  # 2 points
"""

from __future__ import annotations

import math
from typing import Sequence

from ..config import EPSILON
from ..domain.geometry import Point


def point_distance_squared(p1: Point, p2: Point) -> float:
    """Squared distance between the coordinates of two points.

    Timestamps are ignored. Orders pairs the same way point_distance does.
    """
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return dx * dx + dy * dy


def point_distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points, ignoring timestamps.

    Symmetric, and 0 whenever the coordinates match.
    """
    return math.sqrt(point_distance_squared(p1, p2))


def is_effectively_zero(value: float, tolerance: float = EPSILON) -> bool:
    """True when |value| is below the tolerance."""
    return abs(value) < tolerance


def remove_coordinate_duplicates(points: Sequence[Point]) -> list[Point]:
    """Drop points whose coordinates equal those of the previous point.

    Only consecutive duplicates are removed; a stroke that returns to an
    earlier position keeps both visits. The input is not modified.

    Args:
        points: Ordered point sequence.

    Returns:
        New list with consecutive coordinate duplicates removed. Empty for
        empty input.
    """
    result: list[Point] = []
    for p in points:
        if result and result[-1].same_position(p):
            continue
        result.append(p)
    return result


def remove_time_duplicates(points: Sequence[Point]) -> list[Point]:
    """Drop points whose timestamp equals that of the previous kept point.

    Args:
        points: Ordered point sequence.

    Returns:
        New list keeping the first point of every run of equal timestamps.
    """
    result: list[Point] = []
    for p in points:
        if result and result[-1].time == p.time:
            continue
        result.append(p)
    return result


def unwrap_angle(angle: float, reference: float) -> float:
    """Shift angle by multiples of 2*pi into (reference - pi, reference + pi].

    Args:
        angle: Angle in radians, typically from atan2.
        reference: Previously unwrapped angle to stay close to.

    Returns:
        The equivalent angle closest to the reference.
    """
    while angle - reference > math.pi:
        angle -= 2 * math.pi
    while reference - angle >= math.pi:
        angle += 2 * math.pi
    return angle
