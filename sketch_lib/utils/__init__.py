"""Utility functions shared by the analysis modules.

Geometry utilities:
    point_distance: Euclidean distance between two points.
    remove_coordinate_duplicates: Drop consecutive repeated positions.
    remove_time_duplicates: Drop consecutive repeated timestamps.
    unwrap_angle: Keep a heading within pi of the previous one.

Example usage:
    Cleaning a stroke::

        from sketch_lib.utils import remove_coordinate_duplicates

        cleaned = remove_coordinate_duplicates(stroke.points)
"""

from .geometry import (
    point_distance,
    point_distance_squared,
    remove_coordinate_duplicates,
    remove_time_duplicates,
    unwrap_angle,
)

__all__ = [
    'point_distance', 'point_distance_squared',
    'remove_coordinate_duplicates', 'remove_time_duplicates', 'unwrap_angle',
]
