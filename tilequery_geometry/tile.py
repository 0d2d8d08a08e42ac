"""
Tile Data Module
================

Tile addressing and tile-local feature representation.

Design:
- CanonicalTileID: validated (z, x, y) Web Mercator tile address
- GeometryTileFeature: feature geometry in tile units (0..EXTENT)
- Frozen dataclasses, to_dict()/from_dict() for YAML/JSON exchange
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple, Union

# Tile-local units along one tile edge
EXTENT = 8192

MAX_ZOOM = 32

TileCoordinate = Tuple[float, float]
TileRing = Tuple[TileCoordinate, ...]


class FeatureType(IntEnum):
    """Vector tile feature geometry type."""
    UNKNOWN = 0
    POINT = 1
    LINE_STRING = 2
    POLYGON = 3

    @classmethod
    def parse(cls, value: Union[int, str, 'FeatureType']) -> 'FeatureType':
        """
        Accept enum members, integer codes or names ("Point", "LineString").

        Raises:
            ValueError: If value names no feature type
        """
        if isinstance(value, FeatureType):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            normalized = value.replace("_", "").lower()
            for member in cls:
                if member.name.replace("_", "").lower() == normalized:
                    return member
        raise ValueError(f"Unknown feature type: {value!r}")


@dataclass(frozen=True)
class CanonicalTileID:
    """
    Immutable tile address.

    Attributes:
        z: Zoom level
        x: Column
        y: Row

    Invariants:
        - 0 <= z <= 32
        - 0 <= x < 2**z and 0 <= y < 2**z

    Example:
        >>> CanonicalTileID.from_string("3/4/2")
        CanonicalTileID(z=3, x=4, y=2)
    """
    z: int
    x: int
    y: int

    def __post_init__(self):
        """Validate invariants."""
        if not 0 <= self.z <= MAX_ZOOM:
            raise ValueError(f"Tile zoom must be in [0, {MAX_ZOOM}], got {self.z}")
        dim = 2 ** self.z
        if not 0 <= self.x < dim:
            raise ValueError(f"Tile x must be in [0, {dim}) at zoom {self.z}, got {self.x}")
        if not 0 <= self.y < dim:
            raise ValueError(f"Tile y must be in [0, {dim}) at zoom {self.z}, got {self.y}")

    @classmethod
    def from_string(cls, value: str) -> 'CanonicalTileID':
        """Parse a "z/x/y" tile address."""
        parts = value.strip().split("/")
        if len(parts) != 3:
            raise ValueError(f"Tile id must look like 'z/x/y', got {value!r}")
        try:
            z, x, y = (int(part) for part in parts)
        except ValueError as e:
            raise ValueError(f"Tile id must contain integers, got {value!r}") from e
        return cls(z=z, x=x, y=y)

    def __str__(self) -> str:
        return f"{self.z}/{self.x}/{self.y}"


@dataclass(frozen=True)
class GeometryTileFeature:
    """
    Feature geometry as stored in a vector tile.

    Attributes:
        type: Declared geometry type
        geometries: Tuple of rings/lines, each a tuple of (x, y) tile coordinates
        properties: Feature properties
        id: Optional feature identifier

    Example:
        >>> feature = GeometryTileFeature.from_dict(
        ...     {"id": 7, "type": "Point", "geometry": [[[4096, 4096]]]}
        ... )
        >>> feature.type
        <FeatureType.POINT: 1>
    """
    type: FeatureType
    geometries: Tuple[TileRing, ...] = ()
    properties: Dict[str, Any] = field(default_factory=dict, compare=False)
    id: Optional[Union[int, str]] = None

    def get_type(self) -> FeatureType:
        return self.type

    def get_geometries(self) -> Tuple[TileRing, ...]:
        return self.geometries

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        data: Dict[str, Any] = {
            'type': self.type.name.title().replace("_", ""),
            'geometry': [[list(p) for p in ring] for ring in self.geometries],
        }
        if self.properties:
            data['properties'] = dict(self.properties)
        if self.id is not None:
            data['id'] = self.id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeometryTileFeature':
        """Deserialize from dict.

        Args:
            data: Dictionary with keys: type, geometry, properties (optional),
                id (optional)

        Returns:
            GeometryTileFeature instance

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            geometries = tuple(
                tuple((float(p[0]), float(p[1])) for p in ring)
                for ring in data['geometry']
            )
            return cls(
                type=FeatureType.parse(data['type']),
                geometries=geometries,
                properties=dict(data.get('properties') or {}),
                id=data.get('id'),
            )
        except KeyError as e:
            raise ValueError(f"Missing required feature field: {e}")
        except (TypeError, IndexError) as e:
            raise ValueError(f"Invalid feature data: {e}")
