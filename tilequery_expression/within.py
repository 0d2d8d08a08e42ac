"""
Within Expression
=================

["within", <geojson polygon>]: true when the feature's geometry lies inside
the polygon.

Design:
- parse(): validates arity and geometry, records errors on the context,
  returns None on failure (no partial node)
- evaluate(): pure function of (node, feature, tile id); only Point features
  are evaluated, everything else is False plus one warning
- serialize(): ["within", "<compact geojson text>"], re-parseable by parse()
- Immutable node (frozen dataclass), safe to evaluate from many threads
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from tilequery_geometry.detector import ContainmentDetector
from tilequery_geometry.projection import convert_geometry
from tilequery_geometry.shapes import GeometryType, Polygon
from tilequery_geometry.tile import FeatureType

from .diagnostics import Diagnostics, LoggerDiagnostics
from .evaluation import EvaluationContext
from .parsing import ParsingContext
from .schemas.geojson import GeoJSONError, parse_geojson, stringify

POLYGON_REQUIRED = (
    "'within' expression requires valid geojson source that contains polygon geometry type."
)
ONLY_POINT_SUPPORTED = "'within' expression currently only supports 'Point' geometry type"


def _parse_value(value: Any, ctx: ParsingContext) -> Optional[Polygon]:
    """Polygon from a GeoJSON object (or its JSON text), None on failure."""
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except (ValueError, RecursionError):
            value = None

    if isinstance(value, Mapping) and value.get("type") == GeometryType.POLYGON.value:
        try:
            return parse_geojson(value)
        except GeoJSONError as e:
            ctx.error(str(e))

    ctx.error(POLYGON_REQUIRED)
    return None


@dataclass(frozen=True)
class Within:
    """
    Boolean expression node testing containment in a reference polygon.

    Attributes:
        geometry: Reference polygon (owned, immutable)
        diagnostics: Receiver for the unsupported-geometry warning
            (defaults to the structured logger)

    Example:
        >>> ctx = ParsingContext()
        >>> node = Within.parse(
        ...     ["within", {"type": "Polygon",
        ...                 "coordinates": [[[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]]}],
        ...     ctx,
        ... )
        >>> node.serialize()[0]
        'within'
    """
    geometry: Polygon
    diagnostics: Optional[Diagnostics] = field(default=None, compare=False, repr=False)

    operator = "within"
    result_type = "boolean"

    def __post_init__(self):
        """Validate invariants."""
        if not isinstance(self.geometry, Polygon):
            raise TypeError(f"geometry must be Polygon, got {type(self.geometry).__name__}")
        if self.diagnostics is None:
            object.__setattr__(self, "diagnostics", LoggerDiagnostics())

    @classmethod
    def parse(cls, value: Any, ctx: ParsingContext) -> Optional['Within']:
        """
        Parse ["within", <geojson polygon>].

        Args:
            value: Array form; the geometry may be an object or its JSON text
            ctx: Receives error messages

        Returns:
            Within node, or None if any error was recorded
        """
        if not isinstance(value, (list, tuple)):
            ctx.error(f"'{cls.operator}' expression must be an array")
            return None

        if len(value) != 2:
            ctx.error(
                f"'{cls.operator}' expression requires exactly one argument, "
                f"but found {len(value) - 1} instead."
            )
            return None

        geometry = _parse_value(value[1], ctx.concat(1))
        if geometry is None:
            return None
        return cls(geometry=geometry, diagnostics=ctx.diagnostics)

    def evaluate(self, params: EvaluationContext) -> bool:
        """
        Test the context's feature against the polygon.

        Returns:
            False when the feature or tile id is missing, or the feature is
            not a Point feature (the latter also emits one warning)
        """
        if params.feature is None or params.canonical is None:
            return False

        if params.feature.get_type() == FeatureType.POINT:
            candidate = convert_geometry(params.feature, params.canonical)
            return ContainmentDetector.test_containment(candidate, self.geometry)

        self.diagnostics.warn(ONLY_POINT_SUPPORTED)
        return False

    def serialize(self) -> List[str]:
        """Array form with the polygon as compact GeoJSON text."""
        return [self.operator, stringify(self.geometry)]
