"""Geometry and feature analysis.

This module provides the algorithms of the engine:
    lines: Implicit lines, intersection, perpendiculars, parallelism and
        point/segment distances.
    resampling: Arc-length resampling of strokes.
    features: Scalar stroke descriptors and the StrokeFeatures record.

Example usage:
    Features of a resampled stroke::

        from sketch_lib.analysis import resample, stroke_features

        features = stroke_features(resample(points))
"""

from .features import StrokeFeatures, stroke_features
from .lines import (
    distance,
    distance_point_to_segment,
    distance_segment_to_segment,
    intersect,
    is_parallel,
    perpendicular_segment,
)
from .resampling import resample

__all__ = [
    'distance', 'distance_point_to_segment', 'distance_segment_to_segment',
    'intersect', 'is_parallel', 'perpendicular_segment',
    'resample',
    'StrokeFeatures', 'stroke_features',
]
