"""
Tile Projection Module
======================

Converts tile-local feature geometry into geographic coordinates.

Design:
- Pure functions (no state)
- Vectorized lon/lat conversion with numpy (one call per ring)
- Geometry shape follows the declared feature type:
  Point -> Point | MultiPoint, LineString -> LineString | MultiLineString,
  Polygon -> Polygon | MultiPolygon
"""

from typing import List, Sequence, Tuple

import numpy as np

from tilequery_geometry.shapes import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from tilequery_geometry.tile import (
    EXTENT,
    CanonicalTileID,
    FeatureType,
    GeometryTileFeature,
    TileRing,
)


def tile_to_lnglat(coords: Sequence[Tuple[float, float]], tile_id: CanonicalTileID) -> np.ndarray:
    """
    Project tile coordinates to (longitude, latitude).

    Args:
        coords: (x, y) pairs in tile units
        tile_id: Tile the coordinates belong to

    Returns:
        Nx2 float array of (lng, lat) in degrees
    """
    points = np.asarray(coords, dtype=np.float64).reshape(-1, 2)

    size = EXTENT * float(2 ** tile_id.z)
    x0 = EXTENT * float(tile_id.x)
    y0 = EXTENT * float(tile_id.y)

    lng = (points[:, 0] + x0) * 360.0 / size - 180.0
    y2 = 180.0 - (points[:, 1] + y0) * 360.0 / size
    lat = np.arctan(np.exp(y2 * np.pi / 180.0)) * 360.0 / np.pi - 90.0

    return np.column_stack((lng, lat))


def _to_points(ring: TileRing, tile_id: CanonicalTileID) -> Tuple[Point, ...]:
    if not ring:
        return ()
    return tuple(Point(x=float(lng), y=float(lat)) for lng, lat in tile_to_lnglat(ring, tile_id))


def signed_area(ring: TileRing) -> float:
    """Shoelace sum of a ring: twice its area, sign gives the winding direction."""
    total = 0.0
    n = len(ring)
    for i in range(n):
        x1, y1 = ring[i]
        x2, y2 = ring[(i + 1) % n]
        total += (x2 - x1) * (y1 + y2)
    return total


def classify_rings(rings: Sequence[TileRing]) -> List[List[TileRing]]:
    """
    Group rings into polygons.

    The first non-degenerate ring fixes the outer winding direction; every
    later ring with the same direction starts a new polygon, rings with the
    opposite direction are attached to the current one. Zero-area rings are
    dropped.
    """
    polygons: List[List[TileRing]] = []
    polygon: List[TileRing] = []
    ccw = None

    for ring in rings:
        area = signed_area(ring)
        if area == 0:
            continue
        if ccw is None:
            ccw = area < 0
        if ccw == (area < 0) and polygon:
            polygons.append(polygon)
            polygon = []
        polygon.append(ring)

    if polygon:
        polygons.append(polygon)
    return polygons


def convert_geometry(feature: GeometryTileFeature, tile_id: CanonicalTileID) -> Geometry:
    """
    Convert a tile feature into geographic geometry.

    Args:
        feature: Feature with tile-local geometry
        tile_id: Tile the feature was read from

    Returns:
        Geometry in (lng, lat) space, shaped by the feature type
    """
    feature_type = feature.get_type()
    geometries = feature.get_geometries()

    if feature_type == FeatureType.POINT:
        points = tuple(p for ring in geometries for p in _to_points(ring, tile_id))
        if len(points) == 1:
            return points[0]
        return MultiPoint(points=points)

    elif feature_type == FeatureType.LINE_STRING:
        lines = tuple(LineString(points=_to_points(ring, tile_id)) for ring in geometries)
        if len(lines) == 1:
            return lines[0]
        return MultiLineString(lines=lines)

    elif feature_type == FeatureType.POLYGON:
        polygons = tuple(
            Polygon(rings=tuple(_to_points(ring, tile_id) for ring in group))
            for group in classify_rings(geometries)
        )
        if len(polygons) == 1:
            return polygons[0]
        return MultiPolygon(polygons=polygons)

    else:
        return GeometryCollection()
