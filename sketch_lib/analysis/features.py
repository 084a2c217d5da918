"""Per-stroke feature extraction.

This module derives scalar descriptors from a stroke's ordered points for
use by gesture and shape classifiers. Several of them follow Rubine's
classic feature set (start angle, end angle, rotation, speed).

Every function accepts any sequence of Point objects (a list or a Stroke),
never modifies it, and never raises on degenerate input: undefined values
are reported as NaN so callers can tell "undefined" apart from a real zero.

The module provides:
    start_angle_cosine / start_angle_sine: Initial drawing direction.
    end_angle_cosine / end_angle_sine: Direction from first to last point.
    stroke_length: Path length.
    euclidean_distance: Straight-line distance from first to last point.
    line_confidence / is_line: How straight the stroke is.
    total_time: Duration of the stroke.
    max_squared_speed: Peak squared displacement over squared time.
    unwrapped_headings: Direction angle at each interior point.
    rotation_sum / rotation_absolute / rotation_squared: Summed headings.
    curviness: Accumulated small headings.
    endpoint_segment: Segment from the first to the last point.
    stroke_features: All of the above as a StrokeFeatures record.

Example usage:
    Computing a feature vector::

        from sketch_lib.domain import Point
        from sketch_lib.analysis.features import stroke_features

        points = [Point(0, 0, 0), Point(10, 0, 100), Point(10, 10, 200)]
        features = stroke_features(points)
        print(features.line_confidence)  # ~0.7071
        print(features.is_line)          # False
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Optional, Sequence

import numpy as np

from ..config import (
    CURVINESS_THRESHOLD,
    DEFAULT_START_ANGLE_POINT,
    LINE_CONFIDENCE_THRESHOLD,
)
from ..domain.geometry import Point, Segment
from ..utils.geometry import (
    point_distance,
    remove_coordinate_duplicates,
    remove_time_duplicates,
    unwrap_angle,
)

NAN = float('nan')


@dataclass(frozen=True)
class StrokeFeatures:
    """Named scalar features of a single stroke.

    Recomputed on demand from the stroke's points; never cached. Any field
    may be NaN when the stroke is too short or lacks timestamps.
    """
    start_angle_cosine: float
    start_angle_sine: float
    end_angle_cosine: float
    end_angle_sine: float
    stroke_length: float
    euclidean_distance: float
    line_confidence: float
    total_time: float
    max_squared_speed: float
    rotation_sum: float
    rotation_absolute: float
    rotation_squared: float
    curviness: float

    @property
    def is_line(self) -> bool:
        """True if line_confidence exceeds the line threshold."""
        return self.line_confidence > LINE_CONFIDENCE_THRESHOLD

    def to_dict(self) -> dict:
        """Convert to a flat dict, including is_line."""
        d = asdict(self)
        d['is_line'] = self.is_line
        return d


def _start_direction(points: Sequence[Point], second_point: int) -> Optional[tuple[float, float]]:
    # Shared by cosine and sine so both treat coincident points the same way
    n = len(points)
    if n < 2:
        return None
    index = min(max(second_point, 1), n - 1)
    start = points[0]
    while index < n and points[index].same_position(start):
        index += 1
    if index >= n:
        return None
    dx = points[index].x - start.x
    dy = points[index].y - start.y
    hypotenuse = math.sqrt(dx * dx + dy * dy)
    return (dx / hypotenuse, dy / hypotenuse)


def start_angle_cosine(points: Sequence[Point],
                       second_point: int = DEFAULT_START_ANGLE_POINT) -> float:
    """Cosine of the initial drawing direction.

    Measures the direction from point 0 to point ``second_point`` (or the
    last point if the stroke is shorter). If that point coincides with the
    first, later points are tried until one differs.

    Args:
        points: Ordered stroke points.
        second_point: Index of the point that defines the direction.

    Returns:
        Cosine of the start angle, or NaN for fewer than two points or if
        no later point differs from the first.
    """
    direction = _start_direction(points, second_point)
    return NAN if direction is None else direction[0]


def start_angle_sine(points: Sequence[Point],
                     second_point: int = DEFAULT_START_ANGLE_POINT) -> float:
    """Sine of the initial drawing direction. See start_angle_cosine."""
    direction = _start_direction(points, second_point)
    return NAN if direction is None else direction[1]


def euclidean_distance(points: Sequence[Point]) -> float:
    """Straight-line distance from the first to the last point (0 if empty)."""
    if len(points) == 0:
        return 0.0
    return point_distance(points[0], points[-1])


def end_angle_cosine(points: Sequence[Point]) -> float:
    """Cosine of the angle from the first to the last point.

    Returns:
        NaN for one point or fewer, or when the endpoints coincide.
    """
    if len(points) <= 1:
        return NAN
    dist = euclidean_distance(points)
    if dist == 0:
        return NAN
    return (points[-1].x - points[0].x) / dist


def end_angle_sine(points: Sequence[Point]) -> float:
    """Sine of the angle from the first to the last point."""
    if len(points) <= 1:
        return NAN
    dist = euclidean_distance(points)
    if dist == 0:
        return NAN
    return (points[-1].y - points[0].y) / dist


def _coordinates(points: Sequence[Point]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def stroke_length(points: Sequence[Point]) -> float:
    """Path length: sum of distances between consecutive points."""
    if len(points) < 2:
        return 0.0
    deltas = np.diff(_coordinates(points), axis=0)
    return float(np.sum(np.hypot(deltas[:, 0], deltas[:, 1])))


def line_confidence(points: Sequence[Point]) -> float:
    """Euclidean distance divided by path length.

    Near 1.0 the stroke is effectively straight.

    Returns:
        Ratio in [0, 1], or NaN when the path length is zero.
    """
    length = stroke_length(points)
    if length == 0:
        return NAN
    return euclidean_distance(points) / length


def is_line(points: Sequence[Point]) -> bool:
    """True if line_confidence exceeds LINE_CONFIDENCE_THRESHOLD (0.95)."""
    return line_confidence(points) > LINE_CONFIDENCE_THRESHOLD


def total_time(points: Sequence[Point]) -> float:
    """Time between the first and last point.

    Returns:
        Duration in the points' time unit, or NaN when the stroke is empty
        or the endpoints carry no timestamps.
    """
    if len(points) == 0:
        return NAN
    first, last = points[0], points[-1]
    if first.time is None or last.time is None:
        return NAN
    return float(last.time - first.time)


def max_squared_speed(points: Sequence[Point]) -> float:
    """Largest squared displacement over squared time between samples.

    This is (dx^2 + dy^2) / dt^2 for consecutive points after dropping
    points that repeat the previous timestamp. It is the square of the
    peak speed, kept in this form for compatibility with trained
    classifiers.

    Returns:
        The maximum, 0.0 if fewer than two distinct timestamps remain, or
        NaN for an empty stroke or missing timestamps.
    """
    if len(points) == 0:
        return NAN
    if any(p.time is None for p in points):
        return NAN
    kept = remove_time_duplicates(points)
    if len(kept) < 2:
        return 0.0
    samples = np.array([(p.x, p.y, p.time) for p in kept], dtype=np.float64)
    deltas = np.diff(samples, axis=0)
    speeds = (deltas[:, 0] ** 2 + deltas[:, 1] ** 2) / deltas[:, 2] ** 2
    return float(max(0.0, np.max(speeds)))


def unwrapped_headings(points: Sequence[Point]) -> Optional[list[float]]:
    """Unwrapped direction angle at each interior point.

    Consecutive duplicate positions are removed first. At every interior
    index i the heading is atan2 of the step from point i to point i + 1.
    Each heading is shifted by multiples of 2*pi to lie within pi of the
    previous unwrapped heading; the first heading is its own reference.

    Returns:
        List with one heading per interior point (empty for two-point
        strokes), or None for fewer than two points.
    """
    if len(points) < 2:
        return None
    cleaned = remove_coordinate_duplicates(points)
    headings = []
    previous = None
    for a, b in zip(cleaned[1:-1], cleaned[2:]):
        heading = math.atan2(b.y - a.y, b.x - a.x)
        if previous is None:
            previous = heading
        heading = unwrap_angle(heading, previous)
        headings.append(heading)
        previous = heading
    return headings


def rotation_sum(points: Sequence[Point]) -> float:
    """Signed sum of the unwrapped interior headings, NaN for < 2 points."""
    headings = unwrapped_headings(points)
    return NAN if headings is None else float(sum(headings))


def rotation_absolute(points: Sequence[Point]) -> float:
    """Sum of absolute unwrapped interior headings, NaN for < 2 points."""
    headings = unwrapped_headings(points)
    return NAN if headings is None else float(sum(abs(h) for h in headings))


def rotation_squared(points: Sequence[Point]) -> float:
    """Sum of squared unwrapped interior headings, NaN for < 2 points."""
    headings = unwrapped_headings(points)
    return NAN if headings is None else float(sum(h * h for h in headings))


def _curviness_of(headings: list[float]) -> float:
    return float(sum(h for h in headings if h < CURVINESS_THRESHOLD))


def curviness(points: Sequence[Point]) -> float:
    """Sum of the unwrapped headings below CURVINESS_THRESHOLD (0.331 rad).

    Uses the same headings as the rotation features. Headings at or above
    the threshold are left out, so signed values below it (including
    negative ones) accumulate.
    """
    headings = unwrapped_headings(points)
    return NAN if headings is None else _curviness_of(headings)


def endpoint_segment(points: Sequence[Point]) -> Optional[Segment]:
    """Segment from the first to the last point, None for an empty stroke."""
    if len(points) == 0:
        return None
    return Segment(points[0], points[-1])


def stroke_features(points: Sequence[Point],
                    second_point: int = DEFAULT_START_ANGLE_POINT) -> StrokeFeatures:
    """Compute every feature of a stroke.

    Args:
        points: Ordered stroke points (list or Stroke).
        second_point: Index used for the start angle.

    Returns:
        StrokeFeatures with NaN for any feature undefined on this stroke.
    """
    direction = _start_direction(points, second_point)
    headings = unwrapped_headings(points)
    if headings is None:
        rot_sum = rot_abs = rot_sq = curv = NAN
    else:
        rot_sum = float(sum(headings))
        rot_abs = float(sum(abs(h) for h in headings))
        rot_sq = float(sum(h * h for h in headings))
        curv = _curviness_of(headings)

    return StrokeFeatures(
        start_angle_cosine=NAN if direction is None else direction[0],
        start_angle_sine=NAN if direction is None else direction[1],
        end_angle_cosine=end_angle_cosine(points),
        end_angle_sine=end_angle_sine(points),
        stroke_length=stroke_length(points),
        euclidean_distance=euclidean_distance(points),
        line_confidence=line_confidence(points),
        total_time=total_time(points),
        max_squared_speed=max_squared_speed(points),
        rotation_sum=rot_sum,
        rotation_absolute=rot_abs,
        rotation_squared=rot_sq,
        curviness=curv,
    )
