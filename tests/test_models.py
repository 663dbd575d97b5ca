# -*- coding: utf-8 -*-
"""Tests for the geometry models."""

import dataclasses

import pytest
from pydantic import ValidationError

from row_lib.enums import BendDirection
from row_lib.errors import InvalidGeometryError
from row_lib.models import Centerline
from row_lib.models import Polygon
from row_lib.models import RowCorridor
from row_lib.models import SpatialReference
from row_lib.models import VertexRecord


class TestSpatialReference:
    """Tests for SpatialReference."""

    def test_undefined(self):
        sr = SpatialReference()
        assert not sr.is_defined
        with pytest.raises(ValueError, match="neither"):
            sr.to_crs()

    def test_wkid(self):
        sr = SpatialReference(wkid=4326)
        assert sr.is_defined
        assert sr.to_crs().to_epsg() == 4326

    def test_wkt(self):
        wkt = SpatialReference(wkid=3857).to_crs().to_wkt()
        sr = SpatialReference(wkt=wkt)
        assert sr.to_crs().to_epsg() == 3857

    def test_equality(self):
        assert SpatialReference(wkid=102100) == SpatialReference(wkid=102100)


class TestCenterline:
    """Tests for Centerline."""

    def test_creation(self):
        centerline = Centerline(points=[[0, 0], [1, 2]])
        assert centerline.points == ((0.0, 0.0), (1.0, 2.0))
        assert centerline.vertex_count == 2
        assert not centerline.is_empty
        assert centerline.spatial_reference is None

    def test_drops_z(self):
        centerline = Centerline(points=[(0, 0, 12.5), (1, 2, 13.0)])
        assert centerline.points == ((0.0, 0.0), (1.0, 2.0))

    def test_empty(self):
        assert Centerline().is_empty
        assert Centerline(points=[(1, 1)]).is_empty

    def test_is_finite(self):
        assert Centerline(points=[(0, 0), (1, 1)]).is_finite
        assert not Centerline(points=[(0, 0), (float("nan"), 1)]).is_finite

    def test_immutable(self):
        centerline = Centerline(points=[(0, 0), (1, 1)])
        with pytest.raises(ValidationError):
            centerline.points = ((5, 5),)

    def test_invalid_point(self):
        with pytest.raises(ValidationError):
            Centerline(points=[("a", "b"), (1, 1)])

    def test_from_geojson_feature(self):
        centerline = Centerline.from_geojson(
            {
                "type": "Feature",
                "geometry": {"type": "LineString", "coordinates": [[0, 0], [0, 5]]},
                "properties": {},
            }
        )
        assert centerline.points == ((0, 0), (0, 5))

    def test_from_geojson_wrong_type(self):
        with pytest.raises(InvalidGeometryError, match="LineString"):
            Centerline.from_geojson({"type": "Point", "coordinates": [0, 0]})

    def test_from_geojson_no_coordinates(self):
        with pytest.raises(InvalidGeometryError):
            Centerline.from_geojson({"type": "LineString"})

    def test_from_geojson_not_a_dict(self):
        with pytest.raises(InvalidGeometryError):
            Centerline.from_geojson([[0, 0], [1, 1]])


class TestPolygon:
    """Tests for Polygon."""

    def test_exterior(self, square_polygon):
        assert square_polygon.exterior[0] == (0, 0)
        assert square_polygon.is_closed

    def test_empty(self):
        polygon = Polygon()
        assert polygon.exterior == ()
        assert polygon.is_closed

    def test_open_ring(self):
        polygon = Polygon(rings=[[(0, 0), (1, 0), (1, 1)]])
        assert not polygon.is_closed

    def test_from_geojson(self):
        polygon = Polygon.from_geojson(
            {
                "type": "Polygon",
                "coordinates": [[[0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 0, 1]]],
            }
        )
        assert polygon.exterior == ((0, 0), (1, 0), (1, 1), (0, 0))


class TestRecords:
    """Tests for the computed record dataclasses."""

    def test_vertex_record_frozen(self):
        record = VertexRecord(
            index=0,
            x=0.0,
            y=0.0,
            bearing=0.0,
            bearing_dms="0° 0' 0\"",
            bend_angle=0.0,
            bend_direction=BendDirection.START,
            segment_length=1.0,
            distance_from_start=0.0,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.index = 3

    def test_corridor_total_width(self, straight_centerline):
        corridor = RowCorridor(
            centerline=straight_centerline, left_width=12.5, right_width=7.5
        )
        assert corridor.total_width == 20.0
        assert not corridor.has_polygon
