"""Unit tests for geometry utility functions.

Tests the helpers in sketch_lib.utils.geometry:
    - point_distance / point_distance_squared
    - remove_coordinate_duplicates / remove_time_duplicates
    - unwrap_angle
"""

import math
import unittest

from sketch_lib.domain.geometry import Point
from sketch_lib.utils.geometry import (
    is_effectively_zero,
    point_distance,
    point_distance_squared,
    remove_coordinate_duplicates,
    remove_time_duplicates,
    unwrap_angle,
)


class TestPointDistance(unittest.TestCase):
    """Tests for point_distance and point_distance_squared."""

    def test_same_point_zero_distance(self):
        p = Point(10.0, 20.0)
        self.assertEqual(point_distance(p, p), 0.0)

    def test_diagonal_distance(self):
        """Distance along diagonal (3-4-5 triangle)."""
        self.assertEqual(point_distance(Point(0, 0), Point(3, 4)), 5.0)
        self.assertEqual(point_distance_squared(Point(0, 0), Point(3, 4)), 25.0)

    def test_symmetry(self):
        """Distance is symmetric: d(p1, p2) == d(p2, p1)."""
        p1 = Point(1.0, 2.0)
        p2 = Point(4.0, 6.0)
        self.assertEqual(point_distance(p1, p2), point_distance(p2, p1))

    def test_ignores_time(self):
        self.assertEqual(point_distance(Point(0, 0, 0), Point(0, 0, 500)), 0.0)


class TestEffectivelyZero(unittest.TestCase):

    def test_default_tolerance(self):
        self.assertTrue(is_effectively_zero(0.0009))
        self.assertTrue(is_effectively_zero(-0.0009))
        self.assertFalse(is_effectively_zero(0.001))

    def test_custom_tolerance(self):
        self.assertTrue(is_effectively_zero(0.05, tolerance=0.1))


class TestRemoveDuplicates(unittest.TestCase):
    """Tests for the consecutive-duplicate filters."""

    def test_coordinate_duplicates(self):
        """Only consecutive repeats are dropped."""
        points = [Point(0, 0), Point(0, 0, 5), Point(1, 0), Point(0, 0)]
        cleaned = remove_coordinate_duplicates(points)
        self.assertEqual(cleaned, [Point(0, 0), Point(1, 0), Point(0, 0)])

    def test_coordinate_duplicates_keep_first(self):
        """The first point of a run is kept with its timestamp."""
        points = [Point(2, 2, 1), Point(2, 2, 2)]
        self.assertEqual(remove_coordinate_duplicates(points), [Point(2, 2, 1)])

    def test_input_not_modified(self):
        points = [Point(0, 0), Point(0, 0)]
        remove_coordinate_duplicates(points)
        self.assertEqual(len(points), 2)

    def test_empty(self):
        self.assertEqual(remove_coordinate_duplicates([]), [])
        self.assertEqual(remove_time_duplicates([]), [])

    def test_time_duplicates(self):
        points = [Point(0, 0, 0), Point(1, 0, 0), Point(2, 0, 10), Point(3, 0, 10)]
        self.assertEqual(remove_time_duplicates(points), [Point(0, 0, 0), Point(2, 0, 10)])


class TestUnwrapAngle(unittest.TestCase):
    """Tests for unwrap_angle."""

    def test_within_range_unchanged(self):
        self.assertEqual(unwrap_angle(1.0, 0.5), 1.0)

    def test_wraps_down(self):
        """An angle more than pi above the reference moves down by 2*pi."""
        self.assertAlmostEqual(unwrap_angle(3.0, -3.0), 3.0 - 2 * math.pi)

    def test_wraps_up(self):
        self.assertAlmostEqual(unwrap_angle(-3.0, 3.0), -3.0 + 2 * math.pi)

    def test_multiple_turns(self):
        """References far from zero pull the angle several turns."""
        self.assertAlmostEqual(unwrap_angle(0.1, 4 * math.pi), 0.1 + 4 * math.pi)

    def test_half_turn_boundary(self):
        """Result lies in (reference - pi, reference + pi]."""
        self.assertAlmostEqual(unwrap_angle(-math.pi, 0.0), math.pi)
