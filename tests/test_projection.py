"""
Unit tests for tile ids, tile features and projection.
"""

import pytest

from tilequery_geometry import (
    CanonicalTileID,
    FeatureType,
    GeometryCollection,
    GeometryTileFeature,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    classify_rings,
    convert_geometry,
    tile_to_lnglat,
)

MAX_LAT = 85.0511287798


class TestCanonicalTileID:
    """Tests for CanonicalTileID validation and parsing."""

    def test_from_string(self):
        tile = CanonicalTileID.from_string("3/4/2")
        assert tile == CanonicalTileID(z=3, x=4, y=2)
        assert str(tile) == "3/4/2"

    @pytest.mark.parametrize("z, x, y", [(-1, 0, 0), (33, 0, 0), (1, 2, 0), (1, 0, 2), (2, -1, 0)])
    def test_invalid(self, z, x, y):
        with pytest.raises(ValueError):
            CanonicalTileID(z=z, x=x, y=y)

    @pytest.mark.parametrize("value", ["3/4", "a/b/c", "1/2/3/4", ""])
    def test_invalid_strings(self, value):
        with pytest.raises(ValueError):
            CanonicalTileID.from_string(value)


class TestFeatureType:

    @pytest.mark.parametrize("value, expected", [
        ("Point", FeatureType.POINT),
        ("LineString", FeatureType.LINE_STRING),
        ("line_string", FeatureType.LINE_STRING),
        ("Polygon", FeatureType.POLYGON),
        (3, FeatureType.POLYGON),
        (FeatureType.UNKNOWN, FeatureType.UNKNOWN),
    ])
    def test_parse(self, value, expected):
        assert FeatureType.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            FeatureType.parse("Circle")


class TestGeometryTileFeature:

    def test_from_dict(self):
        feature = GeometryTileFeature.from_dict({
            "id": "a",
            "type": "Point",
            "geometry": [[[10, 20]]],
            "properties": {"name": "x"},
        })
        assert feature.type is FeatureType.POINT
        assert feature.geometries == (((10.0, 20.0),),)
        assert feature.id == "a"
        assert feature.properties == {"name": "x"}

    def test_to_dict(self):
        feature = GeometryTileFeature(
            type=FeatureType.LINE_STRING,
            geometries=(((0.0, 0.0), (1.0, 1.0)),),
            id=3,
        )
        assert feature.to_dict() == {
            "type": "LineString",
            "geometry": [[[0.0, 0.0], [1.0, 1.0]]],
            "id": 3,
        }

    def test_missing_geometry(self):
        with pytest.raises(ValueError, match="Missing required feature field"):
            GeometryTileFeature.from_dict({"type": "Point"})

    def test_invalid_point(self):
        with pytest.raises(ValueError, match="Invalid feature data"):
            GeometryTileFeature.from_dict({"type": "Point", "geometry": [[[1]]]})


class TestTileToLngLat:

    def test_world_tile_corners(self, world_tile):
        lnglat = tile_to_lnglat([(0, 0), (4096, 4096), (8192, 8192)], world_tile)

        assert lnglat.shape == (3, 2)
        assert list(lnglat[0]) == pytest.approx([-180.0, MAX_LAT])
        assert list(lnglat[1]) == pytest.approx([0.0, 0.0], abs=1e-9)
        assert list(lnglat[2]) == pytest.approx([180.0, -MAX_LAT])

    def test_zoomed_tile_origin(self):
        lnglat = tile_to_lnglat([(0, 0)], CanonicalTileID(z=3, x=4, y=2))
        assert list(lnglat[0]) == pytest.approx([0.0, 66.51326], abs=1e-4)


class TestClassifyRings:

    outer = ((0, 0), (10, 0), (10, 10), (0, 10), (0, 0))
    hole = ((2, 2), (2, 4), (4, 4), (4, 2), (2, 2))
    other = ((20, 20), (30, 20), (30, 30), (20, 30), (20, 20))

    def test_hole_joins_outer(self):
        assert classify_rings([self.outer, self.hole]) == [[self.outer, self.hole]]

    def test_same_direction_starts_new_polygon(self):
        assert classify_rings([self.outer, self.hole, self.other]) == [
            [self.outer, self.hole],
            [self.other],
        ]

    def test_zero_area_rings_dropped(self):
        flat = ((0, 0), (5, 0), (0, 0))
        assert classify_rings([flat, self.outer]) == [[self.outer]]


class TestConvertGeometry:

    def test_single_point(self, world_tile):
        feature = GeometryTileFeature(type=FeatureType.POINT, geometries=(((4096, 4096),),))
        geometry = convert_geometry(feature, world_tile)

        assert isinstance(geometry, Point)
        assert geometry.x == pytest.approx(0.0, abs=1e-9)
        assert geometry.y == pytest.approx(0.0, abs=1e-9)

    def test_points_are_flattened(self, world_tile):
        feature = GeometryTileFeature(
            type=FeatureType.POINT,
            geometries=(((4096, 4096),), ((0, 0), (8192, 8192))),
        )
        geometry = convert_geometry(feature, world_tile)

        assert isinstance(geometry, MultiPoint)
        assert len(geometry) == 3

    def test_lines(self, world_tile):
        line = ((0, 0), (4096, 4096))
        single = GeometryTileFeature(type=FeatureType.LINE_STRING, geometries=(line,))
        multi = GeometryTileFeature(type=FeatureType.LINE_STRING, geometries=(line, line))

        assert isinstance(convert_geometry(single, world_tile), LineString)
        assert isinstance(convert_geometry(multi, world_tile), MultiLineString)

    def test_polygons(self, world_tile):
        rings = TestClassifyRings
        single = GeometryTileFeature(type=FeatureType.POLYGON, geometries=(rings.outer, rings.hole))
        multi = GeometryTileFeature(type=FeatureType.POLYGON, geometries=(rings.outer, rings.other))

        polygon = convert_geometry(single, world_tile)
        assert isinstance(polygon, Polygon)
        assert len(polygon.rings) == 2
        assert isinstance(convert_geometry(multi, world_tile), MultiPolygon)

    def test_unknown(self, world_tile):
        feature = GeometryTileFeature(type=FeatureType.UNKNOWN, geometries=(((1, 1),),))
        assert convert_geometry(feature, world_tile) == GeometryCollection()
