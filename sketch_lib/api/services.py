"""Service layer for stroke geometry and features.

This module provides high-level service classes for callers that work
with plain JSON-style data (dicts and nested lists) rather than the
domain objects. Invalid input is logged and reported as None so one bad
stroke does not abort a batch.

The module contains two service classes:
    FeatureService: Feature vectors and resampling for raw strokes.
    GeometryService: Distances and relationships between raw segments.

Raw point formats accepted everywhere:
    - dict: {'x': 1.0, 'y': 2.0, 'time': 15}  ('time' or 't' optional)
    - list: [x, y] or [x, y, time]

Example usage:
    FeatureService operations::

        from sketch_lib.api.services import FeatureService

        service = FeatureService(resample_first=True)
        features = service.extract([[0, 0, 0], [10, 0, 100], [10, 10, 200]])
        print(features['line_confidence'])

    GeometryService operations::

        from sketch_lib.api.services import GeometryService

        geometry = GeometryService()
        relation = geometry.segment_relation([[0, 0], [10, 10]], [[0, 10], [10, 0]])
        print(relation['intersection'])  # {'x': 5.0, 'y': 5.0}
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..analysis.features import stroke_features
from ..analysis.lines import (
    distance_point_to_segment,
    distance_segment_to_segment,
    intersect,
    is_parallel,
    segments_cross,
)
from ..analysis import resampling
from ..config import DEFAULT_DIAGONAL_THRESHOLD, DEFAULT_START_ANGLE_POINT
from ..domain.geometry import Point, Segment, Stroke
from ..exceptions import InsufficientPointsError, InvalidArgumentError

# Logger for rejected input
_logger = logging.getLogger(__name__)


def parse_point(raw: Any) -> Point:
    """Build a Point from a dict or a list/tuple.

    Raises:
        ValueError: If the value is not a recognised point format.
    """
    if isinstance(raw, Point):
        return raw
    if isinstance(raw, dict):
        try:
            return Point.from_dict(raw)
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid point {raw!r}: {e}") from e
    if isinstance(raw, (list, tuple)) and len(raw) in (2, 3):
        try:
            return Point.from_tuple(tuple(float(v) if i < 2 else v for i, v in enumerate(raw)))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid point {raw!r}: {e}") from e
    raise ValueError(f"Unknown point format: {raw!r}")


def parse_stroke(raw_points: Any) -> Stroke:
    """Build a Stroke from a list of raw points."""
    if isinstance(raw_points, Stroke):
        return raw_points
    if not isinstance(raw_points, (list, tuple)):
        raise ValueError(f"Stroke must be a list of points, got {type(raw_points).__name__}")
    return Stroke([parse_point(p) for p in raw_points])


def parse_segment(raw: Any) -> Segment:
    """Build a Segment from a pair of raw points.

    Raises:
        InsufficientPointsError: If fewer than two points are given.
        ValueError: If the points are malformed.
    """
    if isinstance(raw, Segment):
        return raw
    if not isinstance(raw, (list, tuple)) or len(raw) < 2:
        raise InsufficientPointsError(f"Segment needs two points, got {raw!r}")
    return Segment(parse_point(raw[0]), parse_point(raw[1]))


def _json_safe(value: float) -> Optional[float]:
    # NaN is not valid JSON; undefined features become null
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


@dataclass
class FeatureService:
    """Service for stroke feature extraction.

    Attributes:
        second_point: Index of the point used for the start angle.
        resample_first: If True, strokes are resampled before features are
            computed.
        diagonal_threshold: Resample density, spacings per bounding-box
            diagonal.

    Example:
        >>> service = FeatureService()
        >>> service.extract([[0, 0], [5, 0], [10, 0]])['is_line']
        True
    """
    second_point: int = DEFAULT_START_ANGLE_POINT
    resample_first: bool = False
    diagonal_threshold: int = DEFAULT_DIAGONAL_THRESHOLD

    def extract(self, raw_points: Any) -> Optional[Dict[str, Any]]:
        """Compute the feature vector of one raw stroke.

        Args:
            raw_points: List of raw points (dicts or lists).

        Returns:
            Dictionary of feature name to value, with undefined features as
            None and an 'is_line' flag. Returns None if the input cannot be
            parsed or resampled.
        """
        try:
            stroke = parse_stroke(raw_points)
            points = stroke.points
            if self.resample_first:
                points = resampling.resample(points, self.diagonal_threshold)
        except ValueError as e:
            _logger.warning("Rejected stroke for feature extraction: %s", e)
            return None

        features = stroke_features(points, self.second_point)
        return {k: _json_safe(v) for k, v in features.to_dict().items()}

    def extract_batch(self, raw_strokes: List[Any]) -> List[Optional[Dict[str, Any]]]:
        """Compute feature vectors for several strokes.

        Returns:
            One entry per input stroke, None where a stroke was rejected.
        """
        results = [self.extract(raw) for raw in raw_strokes]
        rejected = sum(1 for r in results if r is None)
        if rejected:
            _logger.warning("Rejected %d of %d strokes", rejected, len(results))
        return results

    def resample(self, raw_points: Any) -> Optional[List[Dict[str, Any]]]:
        """Resample a raw stroke and return the points as dicts.

        Returns:
            List of point dicts, or None if the input is invalid.
        """
        try:
            stroke = parse_stroke(raw_points)
            points = resampling.resample(stroke.points, self.diagonal_threshold)
        except ValueError as e:
            _logger.warning("Rejected stroke for resampling: %s", e)
            return None
        return [p.to_dict() for p in points]


class GeometryService:
    """Service for relationships between raw segments and points.

    Example:
        >>> geometry = GeometryService()
        >>> geometry.point_segment_distance([5, 5], [[0, 0], [10, 0]])
        5.0
    """

    def __init__(self, parallel_threshold: float = 0.05):
        """Initialize the geometry service.

        Args:
            parallel_threshold: Fraction of pi/2 within which two segments
                are reported as parallel. Default is 0.05 (4.5 degrees).

        Raises:
            InvalidArgumentError: If parallel_threshold is outside [0, 1].
        """
        if not 0.0 <= parallel_threshold <= 1.0:
            raise InvalidArgumentError(
                f"parallel_threshold must be within [0, 1], got {parallel_threshold}")
        self.parallel_threshold = parallel_threshold

    def point_segment_distance(self, raw_point: Any, raw_segment: Any) -> Optional[float]:
        """Distance from a raw point to a raw segment, None if invalid."""
        try:
            point = parse_point(raw_point)
            segment = parse_segment(raw_segment)
        except ValueError as e:
            _logger.warning("Rejected point/segment input: %s", e)
            return None
        return distance_point_to_segment(point, segment)

    def segment_relation(self, raw_a: Any, raw_b: Any) -> Optional[Dict[str, Any]]:
        """Describe how two raw segments relate.

        Returns:
            Dictionary containing:
                - 'distance' (float): heuristic segment distance
                - 'intersection' (dict or None): crossing of the infinite
                    lines
                - 'parallel' (bool): parallel within parallel_threshold
                - 'crosses' (bool): the bounded segments cross
            Returns None if either segment is invalid.
        """
        try:
            seg_a = parse_segment(raw_a)
            seg_b = parse_segment(raw_b)
            crossing = intersect(seg_a, seg_b)
        except ValueError as e:
            _logger.warning("Rejected segment input: %s", e)
            return None

        return {
            'distance': distance_segment_to_segment(seg_a, seg_b),
            'intersection': crossing.to_dict() if crossing is not None else None,
            'parallel': is_parallel(seg_a, seg_b, self.parallel_threshold),
            'crosses': segments_cross(seg_a, seg_b),
        }
