"""
GeoJSON Geometry Schema
=======================

Bounded Context: GeoJSON Data Structures

Structural parsing of GeoJSON geometry objects into immutable shapes, and
the reverse conversion to dicts / compact JSON text.

Design:
- Structural checks only (shape of "type"/"coordinates"), no ring closure
  or self-intersection validation
- GeoJSONError (ValueError) carries a human-readable message
- stringify() is canonical: compact separators, "type" before "coordinates"
"""

import json
import math
from numbers import Real
from typing import Any, Dict, List, Mapping

from tilequery_geometry.shapes import (
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


class GeoJSONError(ValueError):
    """GeoJSON value failed structural validation."""


def _position(value: Any) -> Point:
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        raise GeoJSONError(f"GeoJSON position must be an array of at least 2 numbers, got {value!r}")
    x, y = value[0], value[1]
    for coord in (x, y):
        if isinstance(coord, bool) or not isinstance(coord, Real):
            raise GeoJSONError(f"GeoJSON position coordinates must be numbers, got {value!r}")
    try:
        x, y = float(x), float(y)
    except OverflowError:
        raise GeoJSONError("GeoJSON position coordinates must be finite numbers")
    if not (math.isfinite(x) and math.isfinite(y)):
        raise GeoJSONError("GeoJSON position coordinates must be finite numbers")
    return Point(x=x, y=y)


def _array(value: Any, what: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise GeoJSONError(f"{what} must be an array, got {type(value).__name__}")
    return list(value)


def _positions(value: Any, what: str):
    return tuple(_position(p) for p in _array(value, what))


def _polygon(value: Any) -> Polygon:
    rings = _array(value, "Polygon coordinates")
    return Polygon(rings=tuple(_positions(ring, "Polygon ring") for ring in rings))


def parse_geojson(value: Any) -> Geometry:
    """
    Parse a GeoJSON geometry object.

    Args:
        value: Mapping such as {"type": "Polygon", "coordinates": [...]}

    Returns:
        Immutable geometry (no references to the input lists are kept)

    Raises:
        GeoJSONError: If the value is not a structurally valid geometry

    Example:
        >>> parse_geojson({"type": "Point", "coordinates": [1, 2]})
        Point(x=1.0, y=2.0)
    """
    if not isinstance(value, Mapping):
        raise GeoJSONError(f"GeoJSON geometry must be an object, got {type(value).__name__}")

    if "type" not in value:
        raise GeoJSONError("GeoJSON object must have a 'type' member")
    try:
        geometry_type = GeometryType(value["type"])
    except ValueError:
        raise GeoJSONError(f"Unknown GeoJSON geometry type: {value['type']!r}")

    if geometry_type == GeometryType.GEOMETRY_COLLECTION:
        if "geometries" not in value:
            raise GeoJSONError("GeometryCollection must have a 'geometries' member")
        members = _array(value["geometries"], "GeometryCollection geometries")
        return GeometryCollection(geometries=tuple(parse_geojson(g) for g in members))

    if "coordinates" not in value:
        raise GeoJSONError(f"{geometry_type.value} must have a 'coordinates' member")
    coords = value["coordinates"]

    if geometry_type == GeometryType.POINT:
        return _position(coords)
    elif geometry_type == GeometryType.MULTI_POINT:
        return MultiPoint(points=_positions(coords, "MultiPoint coordinates"))
    elif geometry_type == GeometryType.LINE_STRING:
        return LineString(points=_positions(coords, "LineString coordinates"))
    elif geometry_type == GeometryType.MULTI_LINE_STRING:
        lines = _array(coords, "MultiLineString coordinates")
        return MultiLineString(lines=tuple(
            LineString(points=_positions(line, "MultiLineString line")) for line in lines
        ))
    elif geometry_type == GeometryType.POLYGON:
        return _polygon(coords)
    else:
        polygons = _array(coords, "MultiPolygon coordinates")
        return MultiPolygon(polygons=tuple(_polygon(poly) for poly in polygons))


def to_geojson(geometry: Geometry) -> Dict[str, Any]:
    """Serialize geometry to a JSON-compatible dict."""
    if isinstance(geometry, GeometryCollection):
        return {
            'type': geometry.type.value,
            'geometries': [to_geojson(g) for g in geometry.geometries],
        }
    return {
        'type': geometry.type.value,
        'coordinates': _lists(geometry.coordinates()),
    }


def _lists(value):
    if isinstance(value, (list, tuple)):
        return [_lists(v) for v in value]
    return value


def stringify(geometry: Geometry) -> str:
    """
    Canonical compact GeoJSON text.

    Example:
        >>> stringify(Point(x=1.0, y=2.0))
        '{"type":"Point","coordinates":[1.0,2.0]}'
    """
    return json.dumps(to_geojson(geometry), separators=(",", ":"))
