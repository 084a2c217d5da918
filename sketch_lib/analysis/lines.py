"""Line and segment algebra.

This module provides the geometric relationships between points and line
segments that recognizers need: implicit line equations, infinite-line
intersection, perpendiculars, parallelism, and point/segment distances.

Lines are handled in implicit form a*x + b*y = c so vertical lines need no
special slope handling. The representation is normalized:
    - vertical lines use (1, 0, x)
    - horizontal lines use (0, 1, y)
    - all other lines use (-slope, 1, y_intercept)

Degenerate (zero-length) segments are special-cased everywhere instead of
being divided through.

Example usage:
    Intersection and distance::

        from sketch_lib.domain import Point, Segment
        from sketch_lib.analysis.lines import intersect, distance_point_to_segment

        a = Segment(Point(0, 0), Point(10, 10))
        b = Segment(Point(0, 10), Point(10, 0))
        crossing = intersect(a, b)  # Point(5.0, 5.0)

        d = distance_point_to_segment(Point(5, 0), b)
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

from ..config import (
    EPSILON,
    PARALLEL_TOLERANCE,
    PARAMETRIC_EPSILON,
    PERPENDICULAR_LENGTH,
    TOUCH_TOLERANCE,
)
from ..domain.geometry import ImplicitLine, Point, Segment
from ..exceptions import InvalidArgumentError, InvalidGeometryError
from ..utils.geometry import is_effectively_zero, point_distance

_logger = logging.getLogger(__name__)


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return point_distance(p1, p2)


def slope(p1: Point, p2: Point) -> float:
    """Slope dy/dx of the line through two points.

    Raises:
        InvalidGeometryError: If the line is vertical.
    """
    dx = p2.x - p1.x
    if dx == 0:
        raise InvalidGeometryError(f"vertical line through {p1} and {p2} has no slope")
    return (p2.y - p1.y) / dx


def y_intercept(p1: Point, p2: Point) -> float:
    """The b in y = m*x + b for the line through two points."""
    return p1.y - slope(p1, p2) * p1.x


def to_implicit(p1: Point, p2: Point) -> ImplicitLine:
    """Convert the line through two points to implicit form.

    Args:
        p1: First point on the line.
        p2: Second point on the line.

    Returns:
        ImplicitLine (a, b, c) with a*x + b*y = c for both points.

    Raises:
        InvalidGeometryError: If either endpoint misses the computed
            equation by EPSILON or more.
    """
    if is_effectively_zero(p2.x - p1.x):
        line = ImplicitLine(1.0, 0.0, p1.x)
    elif is_effectively_zero(p2.y - p1.y):
        line = ImplicitLine(0.0, 1.0, p1.y)
    else:
        line = ImplicitLine(-slope(p1, p2), 1.0, y_intercept(p1, p2))

    if not (line.contains(p1) and line.contains(p2)):
        _logger.debug("to_implicit: %s does not pass through %s and %s", line, p1, p2)
        raise InvalidGeometryError(
            f"implicit line {line} does not satisfy endpoints {p1}, {p2}")
    return line


def _point_on_line(line: ImplicitLine) -> Point:
    if is_effectively_zero(line.b):
        return Point(line.c / line.a, 0.0)
    return Point(0.0, line.c / line.b)


def solve_implicit(line1: ImplicitLine, line2: ImplicitLine) -> Optional[Point]:
    """Solve two implicit line equations for their common point.

    Uses Cramer's rule on the 2x2 system after settling the degenerate
    cases:
        - both equations degenerate (a = b = 0): no solution
        - one degenerate with non-zero c (0 = c): contradiction, no solution
        - one equation null (0 = 0): every point of the other line solves
          the system; a canonical point on that line is returned
        - determinant within EPSILON of zero: parallel or coincident lines

    Args:
        line1: First equation.
        line2: Second equation.

    Returns:
        The unique solution, a canonical point for the null-equation case,
        or None when there is no unique intersection.
    """
    if line1.is_degenerate and line2.is_degenerate:
        return None
    if line1.is_null:
        return _point_on_line(line2)
    if line2.is_null:
        return _point_on_line(line1)
    if line1.is_degenerate or line2.is_degenerate:
        return None

    det = line1.a * line2.b - line2.a * line1.b
    if is_effectively_zero(det):
        return None

    x = (line1.c * line2.b - line2.c * line1.b) / det
    y = (line1.a * line2.c - line2.a * line1.c) / det
    return Point(x, y)


def intersect(seg_a: Segment, seg_b: Segment) -> Optional[Point]:
    """Intersection of the infinite lines through two segments.

    A zero-length segment has no direction, so it is treated as the null
    equation: the result is then a canonical point of the other line rather
    than a true crossing. Two zero-length segments at the same position
    intersect at seg_a.p1, timestamp included.

    Args:
        seg_a: First segment.
        seg_b: Second segment.

    Returns:
        Intersection point, or None if the lines are parallel, coincident,
        or otherwise have no unique intersection.
    """
    if seg_a.is_degenerate and seg_b.is_degenerate:
        if seg_a.p1.same_position(seg_b.p1):
            return seg_a.p1
        return None

    line_a = ImplicitLine.NULL if seg_a.is_degenerate else to_implicit(seg_a.p1, seg_a.p2)
    line_b = ImplicitLine.NULL if seg_b.is_degenerate else to_implicit(seg_b.p1, seg_b.p2)
    return solve_implicit(line_a, line_b)


def perpendicular_segment(point: Point, length: float, reference: Segment) -> Segment:
    """Segment starting at point, perpendicular to reference.

    Args:
        point: Start of the new segment.
        length: Length of the new segment.
        reference: Segment whose direction angle is rotated by +90 degrees.

    Returns:
        Segment from point to point + length * (cos, sin) of the new angle.
    """
    angle = reference.angle + math.pi / 2
    end = Point(point.x + math.cos(angle) * length, point.y + math.sin(angle) * length)
    return Segment(point, end)


def is_on_bounding_box(point: Point, segment: Segment) -> bool:
    """True if point lies within the rectangle spanned by the segment (inclusive)."""
    if point.x > segment.p1.x and point.x > segment.p2.x:
        return False
    if point.x < segment.p1.x and point.x < segment.p2.x:
        return False
    if point.y > segment.p1.y and point.y > segment.p2.y:
        return False
    if point.y < segment.p1.y and point.y < segment.p2.y:
        return False
    return True


def is_parallel(seg_a: Segment, seg_b: Segment, percent_threshold: float) -> bool:
    """Check whether two segments are parallel within a threshold.

    The threshold is a fraction of pi/2: 0 accepts only exactly parallel
    segments, 0.5 accepts directions within 45 degrees, and 1 accepts
    everything. Direction is ignored, so opposite segments are parallel.

    Args:
        seg_a: First segment.
        seg_b: Second segment.
        percent_threshold: Fraction in [0, 1].

    Returns:
        True if the angle difference, reduced into [0, pi), is within the
        threshold of 0 or of pi.

    Raises:
        InvalidArgumentError: If percent_threshold is outside [0, 1].
    """
    if not 0.0 <= percent_threshold <= 1.0:
        raise InvalidArgumentError(
            f"percent_threshold must be within [0, 1], got {percent_threshold}")
    threshold = percent_threshold * math.pi / 2
    diff = (seg_a.angle - seg_b.angle) % math.pi
    return diff <= threshold or diff >= math.pi - threshold


def distance_point_to_segment(point: Point, segment: Segment) -> float:
    """Distance from a point to the closest point of a segment.

    Drops a perpendicular from the point onto the segment's infinite line.
    If its foot lies within the segment's bounding box the perpendicular
    distance is returned, otherwise the distance to the nearer endpoint.

    Args:
        point: The point to measure from.
        segment: Target segment; a zero-length segment acts as a point.

    Returns:
        Non-negative distance.
    """
    if segment.is_degenerate:
        return point_distance(point, segment.p1)

    normal = perpendicular_segment(point, PERPENDICULAR_LENGTH, segment)
    foot = intersect(segment, normal)
    if foot is not None and is_on_bounding_box(foot, segment):
        return point_distance(point, foot)
    return min(point_distance(point, segment.p1), point_distance(point, segment.p2))


def distance_segment_to_segment(seg_a: Segment, seg_b: Segment) -> float:
    """Heuristic distance between two segments.

    The reference point is the crossing of the two infinite lines, or the
    first endpoint of seg_b when the segments are parallel or have no
    unique crossing. The result is the smallest of:
        - the larger of the reference point's distances to each segment
        - the distances from each endpoint of seg_b to seg_a

    Note:
        This is not the true closest-approach distance between two
        segments: only seg_b's endpoints are measured against seg_a, never
        seg_a's endpoints against seg_b. Crossing segments report 0.

    Args:
        seg_a: First segment.
        seg_b: Second segment.

    Returns:
        Non-negative distance estimate.
    """
    if seg_a.is_degenerate:
        return distance_point_to_segment(seg_a.p1, seg_b)
    if seg_b.is_degenerate:
        return distance_point_to_segment(seg_b.p1, seg_a)

    reference = None
    if not is_parallel(seg_a, seg_b, PARALLEL_TOLERANCE):
        reference = intersect(seg_a, seg_b)
    if reference is None:
        reference = seg_b.p1

    through_reference = max(distance_point_to_segment(reference, seg_b),
                            distance_point_to_segment(reference, seg_a))
    d1 = distance_point_to_segment(seg_b.p1, seg_a)
    d2 = distance_point_to_segment(seg_b.p2, seg_a)
    return min(through_reference, d1, d2)


def segment_intersection_params(seg_a: Segment, seg_b: Segment) -> Optional[Tuple[float, float]]:
    """Parametric position of the line crossing along each segment.

    ua is 0 if the crossing is at seg_a.p1 and 1 if it is at seg_a.p2, so
    0.333 means a third of the way along. ub works the same for seg_b.

    Args:
        seg_a: First segment.
        seg_b: Second segment.

    Returns:
        (ua, ub), or None if the segments are (nearly) parallel.
    """
    x1, y1 = seg_a.p1.x, seg_a.p1.y
    x2, y2 = seg_a.p2.x, seg_a.p2.y
    x3, y3 = seg_b.p1.x, seg_b.p1.y
    x4, y4 = seg_b.p2.x, seg_b.p2.y

    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if abs(denom) < PARAMETRIC_EPSILON:
        return None

    ua = (x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)
    ub = (x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)
    return (ua / denom, ub / denom)


def segments_cross(seg_a: Segment, seg_b: Segment) -> bool:
    """True if the two bounded segments cross each other."""
    params = segment_intersection_params(seg_a, seg_b)
    if params is None:
        return False
    ua, ub = params
    return 0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0


def segments_touch(seg_a: Segment, seg_b: Segment,
                   tolerance: float = TOUCH_TOLERANCE) -> bool:
    """True if the heuristic segment distance is below tolerance."""
    return distance_segment_to_segment(seg_a, seg_b) < tolerance
