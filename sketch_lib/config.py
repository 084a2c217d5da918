"""Shared tolerances and thresholds for the geometry and feature engine.

This module centralizes the numeric constants used by:
    - analysis.lines (implicit lines, intersection, distances)
    - analysis.resampling (default resample density)
    - analysis.features (line confidence, curviness, start angle)

Having these values in one place keeps comparisons consistent across
modules and makes it easy to tune them globally.
"""

# Tolerance for "effectively zero" coordinate deltas and determinants
EPSILON = 0.001

# Angle tolerance (fraction of pi/2) below which two segments count as parallel
# when choosing the reference point for segment-to-segment distance
PARALLEL_TOLERANCE = 0.001

# Denominator cutoff for the parametric segment intersection
PARAMETRIC_EPSILON = 1e-5

# Segments closer than this are considered touching
TOUCH_TOLERANCE = 0.1

# Length of the perpendicular used in point-to-segment distance.
# Only the direction matters, the segment is intersected as an infinite line.
PERPENDICULAR_LENGTH = 10.0

# Euclidean distance / path length above which a stroke is a line
LINE_CONFIDENCE_THRESHOLD = 0.95

# Turning angles (radians) below this contribute to curviness
CURVINESS_THRESHOLD = 0.331

# Number of resampled points along the bounding-box diagonal
DEFAULT_DIAGONAL_THRESHOLD = 20

# Index of the point used with point 0 for the start angle (Rubine feature 1)
DEFAULT_START_ANGLE_POINT = 2

# Most points a single resample call may insert
MAX_RESAMPLED_POINTS = 100_000
