"""
Evaluation Context
==================

What an expression may read at query time: the candidate feature and the
tile it was read from. Both are optional; expressions decide what a missing
value means.
"""

from dataclasses import dataclass
from typing import Optional

from tilequery_geometry.tile import CanonicalTileID, GeometryTileFeature


@dataclass(frozen=True)
class EvaluationContext:
    """
    Immutable evaluation input.

    Attributes:
        feature: Candidate feature (None when evaluating without data)
        canonical: Tile id used to project the feature's geometry
    """
    feature: Optional[GeometryTileFeature] = None
    canonical: Optional[CanonicalTileID] = None


__all__ = ["EvaluationContext"]
