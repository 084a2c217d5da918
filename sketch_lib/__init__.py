"""Sketch geometry and stroke-feature engine.

A library for the geometric core of pen-input recognition: line and
segment algebra, arc-length resampling, and per-stroke feature extraction
for classifiers. Everything operates on immutable value objects and is
free of shared state, so strokes can be processed from any thread.

The package is organized into the following modules:
    domain: Value objects including Point, BBox, Segment, ImplicitLine and
        Stroke.
    analysis: Line algebra, resampling and feature extraction.
    utils: Distance and duplicate-filtering helpers.
    api: Service layer with JSON-friendly interfaces.
    config: Shared tolerances and thresholds.
    exceptions: Error types.

Example usage:
    Working with domain objects::

        from sketch_lib import Point, Segment, intersect

        a = Segment(Point(0, 0), Point(10, 10))
        b = Segment(Point(0, 10), Point(10, 0))
        print(intersect(a, b))

    Features of a stroke::

        from sketch_lib import Stroke, resample, stroke_features

        stroke = Stroke.from_list([[0, 0, 0], [10, 0, 100], [10, 10, 200]])
        features = stroke_features(resample(stroke.points))
        print(features.is_line)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import (
    StrokeFeatures,
    distance,
    distance_point_to_segment,
    distance_segment_to_segment,
    intersect,
    is_parallel,
    perpendicular_segment,
    resample,
    stroke_features,
)
from .api import FeatureService, GeometryService
from .domain import BBox, ImplicitLine, Point, Segment, Stroke
from .exceptions import (
    InsufficientPointsError,
    InvalidArgumentError,
    InvalidGeometryError,
    SketchGeometryError,
)

__all__ = [
    # Domain objects
    'Point', 'BBox', 'Segment', 'ImplicitLine', 'Stroke',
    # Geometry
    'distance', 'distance_point_to_segment', 'distance_segment_to_segment',
    'intersect', 'is_parallel', 'perpendicular_segment',
    # Strokes
    'resample', 'stroke_features', 'StrokeFeatures',
    # Services
    'FeatureService', 'GeometryService',
    # Errors
    'SketchGeometryError', 'InvalidGeometryError', 'InvalidArgumentError',
    'InsufficientPointsError',
]

__version__ = '1.0.0'
