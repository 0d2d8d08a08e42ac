"""
tilequery Schemas
=================

Bounded Context: Data Structures

Public API
----------
    GeoJSONError: Structural validation failure
    parse_geojson: GeoJSON object -> immutable geometry
    to_geojson: geometry -> JSON-compatible dict
    stringify: geometry -> canonical compact JSON text
"""

from .geojson import GeoJSONError, parse_geojson, to_geojson, stringify

__all__ = [
    'GeoJSONError',
    'parse_geojson',
    'to_geojson',
    'stringify',
]
