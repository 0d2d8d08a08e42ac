"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Tagged union: every shape carries its GeometryType
- Coordinates stored as tuples (no aliasing with caller lists)
- Thread-safe by design (immutability)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple, Union


class GeometryType(str, Enum):
    """GeoJSON geometry type tags."""
    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Coordinates are either tile-local or geographic (longitude, latitude),
    depending on the projection step that produced them.

    Attributes:
        x: Horizontal coordinate (longitude for geographic points)
        y: Vertical coordinate (latitude for geographic points)
    """
    x: float
    y: float

    type = GeometryType.POINT

    @classmethod
    def of(cls, coords: Sequence[float]) -> 'Point':
        """Build from an (x, y) pair, ignoring any extra members."""
        return cls(x=float(coords[0]), y=float(coords[1]))

    def coordinates(self) -> Tuple[float, float]:
        return (self.x, self.y)


Ring = Tuple[Point, ...]


def _points(coords: Iterable[Sequence[float]]) -> Tuple[Point, ...]:
    return tuple(p if isinstance(p, Point) else Point.of(p) for p in coords)


@dataclass(frozen=True)
class MultiPoint:
    """Unordered set of points (stored in input order)."""
    points: Tuple[Point, ...] = ()

    type = GeometryType.MULTI_POINT

    @classmethod
    def of(cls, coords: Iterable[Sequence[float]]) -> 'MultiPoint':
        return cls(points=_points(coords))

    def coordinates(self):
        return [p.coordinates() for p in self.points]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class LineString:
    """Ordered sequence of points forming a polyline."""
    points: Tuple[Point, ...] = ()

    type = GeometryType.LINE_STRING

    @classmethod
    def of(cls, coords: Iterable[Sequence[float]]) -> 'LineString':
        return cls(points=_points(coords))

    def coordinates(self):
        return [p.coordinates() for p in self.points]


@dataclass(frozen=True)
class MultiLineString:
    lines: Tuple[LineString, ...] = ()

    type = GeometryType.MULTI_LINE_STRING

    @classmethod
    def of(cls, coords: Iterable[Iterable[Sequence[float]]]) -> 'MultiLineString':
        return cls(lines=tuple(LineString.of(line) for line in coords))

    def coordinates(self):
        return [line.coordinates() for line in self.lines]


@dataclass(frozen=True)
class Polygon:
    """
    Immutable polygon as an ordered tuple of rings.

    Each ring is closed by convention (first point equals last point). Rings
    are not classified into shell and holes: containment treats every ring as
    an additional area (see predicates.point_in_polygon).

    Attributes:
        rings: Tuple of rings, each a tuple of Points
    """
    rings: Tuple[Ring, ...] = ()

    type = GeometryType.POLYGON

    @classmethod
    def of(cls, coords: Iterable[Iterable[Sequence[float]]]) -> 'Polygon':
        """
        Build from nested coordinate arrays.

        Args:
            coords: [[[x, y], ...], ...] rings as coordinate arrays

        Returns:
            Polygon owning a private copy of the coordinates
        """
        return cls(rings=tuple(_points(ring) for ring in coords))

    def coordinates(self):
        return [[p.coordinates() for p in ring] for ring in self.rings]


@dataclass(frozen=True)
class MultiPolygon:
    polygons: Tuple[Polygon, ...] = ()

    type = GeometryType.MULTI_POLYGON

    @classmethod
    def of(cls, coords) -> 'MultiPolygon':
        return cls(polygons=tuple(Polygon.of(poly) for poly in coords))

    def coordinates(self):
        return [poly.coordinates() for poly in self.polygons]


@dataclass(frozen=True)
class GeometryCollection:
    geometries: Tuple['Geometry', ...] = ()

    type = GeometryType.GEOMETRY_COLLECTION


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]
