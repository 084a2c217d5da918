"""Shared pytest fixtures for the sketch_lib test suite.

Fixtures:
    straight_points: Three collinear points along the x axis
    right_angle_points: Timed L-shaped stroke turning 90 degrees
    timed_stroke: Stroke with regular timestamps
    feature_service: FeatureService with default settings
    geometry_service: GeometryService with default settings

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sketch_lib.api.services import FeatureService, GeometryService  # noqa: E402
from sketch_lib.domain.geometry import Point, Stroke  # noqa: E402


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )


# -----------------------------------------------------------------------------
# Stroke Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def straight_points():
    """Return three collinear points from (0, 0) to (10, 0).

    Returns:
        list[Point]: Untimed points with path length 10.
    """
    return [Point(0, 0), Point(5, 0), Point(10, 0)]


@pytest.fixture
def right_angle_points():
    """Return an L-shaped stroke turning 90 degrees at (10, 0).

    Returns:
        list[Point]: Points at t = 0, 100, 200 ms with path length 20.
    """
    return [Point(0, 0, 0), Point(10, 0, 100), Point(10, 10, 200)]


@pytest.fixture
def timed_stroke():
    """Return a five-point Stroke sampled every 10 ms."""
    return Stroke([Point(float(i * 3), float(i * 4), i * 10) for i in range(5)])


# -----------------------------------------------------------------------------
# Service Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def feature_service():
    """Return a FeatureService with default settings."""
    return FeatureService()


@pytest.fixture
def geometry_service():
    """Return a GeometryService with default settings."""
    return GeometryService()
