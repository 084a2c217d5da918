"""Arc-length resampling of strokes.

Pen input arrives at the device's sampling rate, so point density varies
with drawing speed. Resampling produces a new point sequence with roughly
uniform spacing along the path, scaled to the stroke's size: the spacing
is the bounding-box diagonal divided by a threshold count.

Example usage:
    Resample before computing features::

        from sketch_lib.analysis.resampling import resample
        from sketch_lib.analysis.features import stroke_features

        even = resample(stroke.points, diagonal_threshold=20)
        features = stroke_features(even)
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Optional, Sequence

from ..config import DEFAULT_DIAGONAL_THRESHOLD, MAX_RESAMPLED_POINTS
from ..domain.geometry import BBox, Point
from ..exceptions import InvalidArgumentError
from ..utils.geometry import point_distance

_logger = logging.getLogger(__name__)


def _interpolate(start: Point, end: Point, fraction: float) -> Point:
    x = start.x + fraction * (end.x - start.x)
    y = start.y + fraction * (end.y - start.y)
    if start.time is None or end.time is None:
        return Point(x, y)
    t = start.time + int(round(fraction * (end.time - start.time)))
    return Point(x, y, t)


def resample(points: Sequence[Point],
             diagonal_threshold: int = DEFAULT_DIAGONAL_THRESHOLD,
             diagonal: Optional[float] = None) -> list[Point]:
    """Resample a stroke to near-uniform arc-length spacing.

    Walks the original points accumulating path distance. Whenever the
    accumulated distance exceeds the target spacing, a point is inserted
    between the reference point and the next original point at the
    fraction spacing / accumulated, becomes the new reference point, and
    the spacing is subtracted from the accumulator. The remainder carries
    into the next original segment.

    Args:
        points: Ordered stroke points. Not modified.
        diagonal_threshold: Number of spacings along the bounding-box
            diagonal. Higher values produce denser output. Default is 20.
        diagonal: Diagonal length to use instead of the one computed from
            the points, e.g. when the caller already caches it. Must be
            finite and non-negative.

    Returns:
        New list that starts with the original first point and ends with
        the original last point. Inputs with fewer than two points are
        returned as a copy.

    Raises:
        InvalidArgumentError: If diagonal_threshold is not a positive
            integer, diagonal is negative or not finite, or the spacing
            would insert more than MAX_RESAMPLED_POINTS points.
    """
    if (isinstance(diagonal_threshold, bool)
            or not isinstance(diagonal_threshold, numbers.Integral)
            or diagonal_threshold <= 0):
        raise InvalidArgumentError(
            f"diagonal_threshold must be a positive integer, got {diagonal_threshold!r}")
    if diagonal is not None and (isinstance(diagonal, bool)
                                 or not isinstance(diagonal, numbers.Real)
                                 or not math.isfinite(diagonal)
                                 or diagonal < 0):
        raise InvalidArgumentError(
            f"diagonal must be a finite non-negative number, got {diagonal!r}")

    if len(points) < 2:
        return list(points)

    if diagonal is None:
        diagonal = BBox.from_points(points).diagonal_length
    spacing = diagonal / diagonal_threshold
    _logger.debug("resample: %d points, diagonal=%.3f spacing=%.3f",
                  len(points), diagonal, spacing)

    resampled = [points[0]]
    if spacing <= 0:
        resampled.append(points[-1])
        return resampled

    path_length = sum(point_distance(points[i - 1], points[i]) for i in range(1, len(points)))
    if path_length / spacing > MAX_RESAMPLED_POINTS:
        raise InvalidArgumentError(
            f"spacing {spacing!r} over path length {path_length:.3f} exceeds "
            f"{MAX_RESAMPLED_POINTS} resampled points")

    accumulated = 0.0
    current = points[0]
    for p in points:
        accumulated += point_distance(current, p)
        while accumulated > spacing:
            current = _interpolate(current, p, spacing / accumulated)
            resampled.append(current)
            accumulated -= spacing
        current = p

    resampled.append(points[-1])
    return resampled
