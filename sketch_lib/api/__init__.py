"""API layer for stroke geometry.

This module provides the service layer for callers that exchange plain
JSON-style data. The services wrap the analysis modules, parse raw points,
and turn undefined values into None.

The module exports two service classes:
    FeatureService: Feature vectors and resampling for raw strokes.
    GeometryService: Distances and relationships between raw segments.

Example usage:
    Extract features for a batch of strokes::

        from sketch_lib.api import FeatureService

        service = FeatureService()
        for features in service.extract_batch(strokes):
            if features:
                print(features['rotation_absolute'])
"""

from .services import FeatureService, GeometryService

__all__ = ['FeatureService', 'GeometryService']
