"""
tilequery Expressions
=====================

Bounded Context: Style/query expressions over vector tile features.

Architecture:

    tilequery_expression/
    ├── within.py          # Within: parse / evaluate / serialize
    ├── parsing.py         # ParsingContext (error channel)
    ├── evaluation.py      # EvaluationContext (feature + tile id)
    ├── diagnostics.py     # Diagnostics.warn (non-fatal notices)
    ├── config.py          # QueryConfig (YAML)
    ├── schemas/           # GeoJSON structural parser / stringify
    └── logging/           # Structured JSON logging

Usage:

    from tilequery_expression import Within, ParsingContext, EvaluationContext
    from tilequery_geometry import CanonicalTileID, GeometryTileFeature

    ctx = ParsingContext()
    node = Within.parse(["within", {"type": "Polygon", "coordinates": rings}], ctx)
    if node is None:
        print([e.message for e in ctx.errors])

    inside = node.evaluate(EvaluationContext(
        feature=GeometryTileFeature.from_dict({"type": "Point", "geometry": [[[4096, 4096]]]}),
        canonical=CanonicalTileID(z=3, x=4, y=2),
    ))
"""

from .within import Within, POLYGON_REQUIRED, ONLY_POINT_SUPPORTED
from .parsing import ParsingContext, ParsingError
from .evaluation import EvaluationContext
from .diagnostics import Diagnostics, LoggerDiagnostics
from .config import QueryConfig
from .schemas import GeoJSONError, parse_geojson, to_geojson, stringify
from .logging import LogEvent, StructuredLogger, create_logger

__all__ = [
    # Expression
    "Within",
    "POLYGON_REQUIRED",
    "ONLY_POINT_SUPPORTED",
    # Contexts
    "ParsingContext",
    "ParsingError",
    "EvaluationContext",
    # Diagnostics
    "Diagnostics",
    "LoggerDiagnostics",
    # Config
    "QueryConfig",
    # Schemas
    "GeoJSONError",
    "parse_geojson",
    "to_geojson",
    "stringify",
    # Logging
    "LogEvent",
    "StructuredLogger",
    "create_logger",
]

__version__ = "1.0.0"
