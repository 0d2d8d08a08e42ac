"""
Geometry Layer
==============

Bounded Context: Pure geometric shapes and spatial queries.

Responsibilities:
- Shape representation (immutable tagged union)
- Point-in-polygon tests (winding number)
- Tile coordinate projection
- NO state, NO logging, NO expression parsing

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from tilequery_geometry.shapes import (
    GeometryType,
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
    Geometry,
)
from tilequery_geometry.predicates import is_left, point_in_polygon
from tilequery_geometry.tile import EXTENT, CanonicalTileID, FeatureType, GeometryTileFeature
from tilequery_geometry.projection import convert_geometry, classify_rings, tile_to_lnglat
from tilequery_geometry.detector import ContainmentDetector

__all__ = [
    # Shapes
    "GeometryType",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    # Predicates
    "is_left",
    "point_in_polygon",
    # Tiles
    "EXTENT",
    "CanonicalTileID",
    "FeatureType",
    "GeometryTileFeature",
    "convert_geometry",
    "classify_rings",
    "tile_to_lnglat",
    # Detection
    "ContainmentDetector",
]
