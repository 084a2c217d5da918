"""Unit tests for the service layer.

Tests sketch_lib.api.services:
    - parse_point / parse_stroke / parse_segment: raw input formats
    - FeatureService: feature dicts, batches, resampling, rejected input
    - GeometryService: point/segment distance and segment relations
"""

import unittest

import pytest

from sketch_lib.analysis.features import rotation_sum
from sketch_lib.analysis.resampling import resample
from sketch_lib.api.services import (
    FeatureService,
    GeometryService,
    parse_point,
    parse_segment,
    parse_stroke,
)
from sketch_lib.domain.geometry import Point, Segment
from sketch_lib.exceptions import InsufficientPointsError, InvalidArgumentError

RIGHT_ANGLE = [[0, 0, 0], [10, 0, 100], [10, 10, 200]]


class TestParsing(unittest.TestCase):
    """Tests for the raw input parsers."""

    def test_point_from_list(self):
        self.assertEqual(parse_point([1, 2]), Point(1.0, 2.0))
        self.assertEqual(parse_point([1, 2, 30]).time, 30)

    def test_point_from_dict(self):
        self.assertEqual(parse_point({'x': 1, 'y': 2, 't': 4}), Point(1.0, 2.0, 4))

    def test_point_passthrough(self):
        p = Point(1, 2)
        self.assertIs(parse_point(p), p)

    def test_bad_points(self):
        for raw in ([1], [1, 2, 3, 4], {'x': 1}, 'point', ['a', 2]):
            with self.assertRaises(ValueError):
                parse_point(raw)

    def test_stroke(self):
        stroke = parse_stroke([[0, 0], {'x': 1, 'y': 1}])
        self.assertEqual(len(stroke), 2)

    def test_stroke_not_a_list(self):
        with self.assertRaises(ValueError):
            parse_stroke('0,0 1,1')

    def test_segment(self):
        self.assertEqual(parse_segment([[0, 0], [1, 1]]), Segment(Point(0, 0), Point(1, 1)))

    def test_segment_needs_two_points(self):
        with self.assertRaises(InsufficientPointsError):
            parse_segment([[0, 0]])


class TestFeatureService:
    """Tests for FeatureService."""

    def test_extract(self, feature_service):
        features = feature_service.extract(RIGHT_ANGLE)
        assert features['stroke_length'] == pytest.approx(20.0)
        assert features['line_confidence'] == pytest.approx(0.7071, abs=1e-4)
        assert features['total_time'] == 200.0
        assert features['is_line'] is False

    def test_undefined_features_are_none(self, feature_service):
        features = feature_service.extract([[1, 1]])
        assert features['start_angle_cosine'] is None
        assert features['rotation_sum'] is None
        assert features['total_time'] is None
        assert features['stroke_length'] == 0.0

    def test_extract_with_resampling(self):
        service = FeatureService(resample_first=True, diagonal_threshold=10)
        features = service.extract(RIGHT_ANGLE)
        # Resampled points skip the corner, shortening the path slightly
        assert 19.5 < features['stroke_length'] <= 20.0 + 1e-9
        expected = rotation_sum(resample(parse_stroke(RIGHT_ANGLE).points, 10))
        assert features['rotation_sum'] == pytest.approx(expected)
        assert features['rotation_sum'] > 0.0

    def test_rejects_bad_stroke(self, feature_service, caplog):
        with caplog.at_level('WARNING', logger='sketch_lib.api.services'):
            assert feature_service.extract('not a stroke') is None
        assert 'Rejected stroke' in caplog.text

    def test_rejects_bad_threshold(self):
        service = FeatureService(resample_first=True, diagonal_threshold=0)
        assert service.extract(RIGHT_ANGLE) is None

    def test_extract_batch(self, feature_service, caplog):
        with caplog.at_level('WARNING', logger='sketch_lib.api.services'):
            results = feature_service.extract_batch([RIGHT_ANGLE, [[0]], [[0, 0], [5, 0]]])
        assert len(results) == 3
        assert results[1] is None
        assert results[2]['is_line'] is True
        assert 'Rejected 1 of 3 strokes' in caplog.text

    def test_resample(self, feature_service):
        points = feature_service.resample([[0, 0, 0], [100, 0, 1000]])
        assert points[0] == {'x': 0.0, 'y': 0.0, 'time': 0}
        assert points[-1] == {'x': 100.0, 'y': 0.0, 'time': 1000}
        assert len(points) == 21

    def test_resample_invalid(self, feature_service):
        assert feature_service.resample(None) is None


class TestGeometryService:
    """Tests for GeometryService."""

    def test_point_segment_distance(self, geometry_service):
        assert geometry_service.point_segment_distance([5, 5], [[0, 0], [10, 0]]) == pytest.approx(5.0)

    def test_point_segment_distance_invalid(self, geometry_service):
        assert geometry_service.point_segment_distance([5], [[0, 0], [10, 0]]) is None
        assert geometry_service.point_segment_distance([5, 5], [[0, 0]]) is None

    def test_crossing_relation(self, geometry_service):
        relation = geometry_service.segment_relation([[0, 0], [10, 10]], [[0, 10], [10, 0]])
        assert relation['intersection'] == {'x': 5.0, 'y': 5.0}
        assert relation['distance'] == pytest.approx(0.0, abs=1e-9)
        assert relation['parallel'] is False
        assert relation['crosses'] is True

    def test_parallel_relation(self, geometry_service):
        relation = geometry_service.segment_relation([[0, 0], [10, 0]], [[0, 5], [10, 5]])
        assert relation['intersection'] is None
        assert relation['distance'] == pytest.approx(5.0)
        assert relation['parallel'] is True
        assert relation['crosses'] is False

    def test_relation_invalid(self, geometry_service):
        assert geometry_service.segment_relation([[0, 0]], [[0, 5], [10, 5]]) is None

    def test_threshold_validation(self):
        with pytest.raises(InvalidArgumentError):
            GeometryService(parallel_threshold=1.5)
