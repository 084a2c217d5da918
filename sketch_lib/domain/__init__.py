"""Domain objects for ink geometry.

This module provides the value objects used throughout the package. They
represent the fundamental concepts in the domain: points captured by a
pen, the segments between them, and whole strokes.

The module exports the following classes:
    Point: Immutable 2D point with optional timestamp and vector operations.
    BBox: Immutable axis-aligned bounding box.
    Segment: Directed pair of points with angle helpers.
    ImplicitLine: Line in a*x + b*y = c form.
    Stroke: Time-ordered sequence of points.

Example usage:
    Working with geometry::

        from sketch_lib.domain import Point, Segment, Stroke

        p1 = Point(0, 0, time=0)
        p2 = Point(100, 100, time=40)
        distance = p1.distance_to(p2)

        seg = Segment(p1, p2)
        print(f"Angle: {seg.angle_degrees:.1f}")

        stroke = Stroke([p1, Point(50, 50, time=20), p2])
        print(f"Stroke length: {stroke.length()}")
"""

from .geometry import BBox, ImplicitLine, Point, Segment, Stroke

__all__ = ['Point', 'BBox', 'Segment', 'ImplicitLine', 'Stroke']
