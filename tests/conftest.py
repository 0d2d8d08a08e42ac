"""
Shared fixtures for tilequery tests.
"""

import copy
import logging
from typing import List

import pytest

from tilequery_geometry import CanonicalTileID, Polygon
from tilequery_expression import Diagnostics


SQUARE = [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]]

# Geographic square around (0, 0), reached by the centre of tile 0/0/0
GEO_SQUARE = [[-10, -10], [10, -10], [10, 10], [-10, 10], [-10, -10]]


class RecordingDiagnostics(Diagnostics):
    """Diagnostics that keeps every warning."""

    def __init__(self):
        self.messages: List[str] = []

    def warn(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture(autouse=True)
def reset_structured_loggers():
    """Drop handlers bound to a test's captured stderr."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("tilequery."):
            logging.getLogger(name).handlers.clear()


@pytest.fixture
def square() -> Polygon:
    return Polygon.of([copy.deepcopy(SQUARE)])


@pytest.fixture
def geo_square() -> Polygon:
    return Polygon.of([copy.deepcopy(GEO_SQUARE)])


@pytest.fixture
def square_geojson():
    return {"type": "Polygon", "coordinates": [copy.deepcopy(SQUARE)]}


@pytest.fixture
def geo_square_geojson():
    return {"type": "Polygon", "coordinates": [copy.deepcopy(GEO_SQUARE)]}


@pytest.fixture
def world_tile() -> CanonicalTileID:
    return CanonicalTileID(z=0, x=0, y=0)


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()
