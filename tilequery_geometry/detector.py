"""
Containment Detector Module
===========================

Stateless detection logic - applies the reference polygon to candidates.

Design:
- Pure functions (no state)
- Explicit dispatch over the geometry union, default branch returns False
- Tile projection applied before testing (coordinates must match the polygon)
- Thread-safe (no mutations)
"""

from typing import Sequence

import numpy as np

from tilequery_geometry.predicates import point_in_polygon
from tilequery_geometry.projection import convert_geometry
from tilequery_geometry.shapes import Geometry, MultiPoint, Point, Polygon
from tilequery_geometry.tile import CanonicalTileID, FeatureType, GeometryTileFeature


class ContainmentDetector:
    """
    Stateless detector for testing candidate geometry against a polygon.

    Design Philosophy:
    - All methods are static (no instance state)
    - Only Point and MultiPoint candidates are evaluated
    - Other candidates are "not contained", never an error
    """

    @staticmethod
    def test_containment(candidate: Geometry, polygon: Polygon) -> bool:
        """
        Check whether a candidate geometry lies within a polygon.

        Args:
            candidate: Geometry already in the polygon's coordinate space
            polygon: Reference polygon

        Returns:
            Point: point_in_polygon result
            MultiPoint: True only if every point is contained (False if empty)
            anything else: False
        """
        if isinstance(candidate, Point):
            return point_in_polygon(candidate, polygon)

        elif isinstance(candidate, MultiPoint):
            if not candidate.points:
                return False
            for point in candidate.points:
                if not point_in_polygon(point, polygon):
                    return False
            return True

        else:
            return False

    @staticmethod
    def detect_features(
        features: Sequence[GeometryTileFeature],
        polygon: Polygon,
        tile_id: CanonicalTileID
    ) -> np.ndarray:
        """
        Detect which point features of a tile are inside a polygon.

        Args:
            features: Tile features (non-point features are never inside)
            polygon: Reference polygon in geographic coordinates
            tile_id: Tile the features were read from

        Returns:
            Boolean mask of shape (N,) where True = inside polygon
        """
        if len(features) == 0:
            return np.array([], dtype=bool)

        mask = np.array([
            feature.get_type() == FeatureType.POINT
            and ContainmentDetector.test_containment(
                convert_geometry(feature, tile_id), polygon
            )
            for feature in features
        ], dtype=bool)

        return mask
