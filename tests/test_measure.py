# -*- coding: utf-8 -*-
"""Tests for polygon area and perimeter."""

import pytest

from row_lib.engine.geodesic import GeodesicGeometryEngine
from row_lib.measure import calculate_area
from row_lib.measure import calculate_perimeter
from row_lib.models import Polygon
from row_lib.offset import build_row_polygon


class TestPlanarMeasurements:
    """Tests with the default planar engine."""

    def test_square(self, square_polygon):
        assert calculate_area(square_polygon) == pytest.approx(100.0)
        assert calculate_perimeter(square_polygon) == pytest.approx(40.0)

    def test_winding_does_not_change_sign(self, square_polygon):
        clockwise = Polygon(rings=[list(reversed(square_polygon.exterior))])
        assert calculate_area(clockwise) == pytest.approx(100.0)

    def test_hole(self):
        polygon = Polygon(
            rings=[
                [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)],
                [(2, 2), (2, 4), (4, 4), (4, 2), (2, 2)],
            ]
        )
        assert calculate_area(polygon) == pytest.approx(96.0)
        assert calculate_perimeter(polygon) == pytest.approx(48.0)

    def test_empty(self):
        polygon = Polygon(rings=[])
        assert calculate_area(polygon) == 0.0
        assert calculate_perimeter(polygon) == 0.0

    def test_degenerate_ring(self):
        polygon = Polygon(rings=[[(0, 0), (5, 0), (0, 0)]])
        assert calculate_area(polygon) == 0.0
        assert calculate_perimeter(polygon) == pytest.approx(10.0)

    def test_straight_row_polygon(self, straight_centerline):
        polygon = build_row_polygon(straight_centerline, 10.0, 10.0)
        assert calculate_area(polygon) == pytest.approx(2000.0)
        assert calculate_perimeter(polygon) == pytest.approx(240.0)

    def test_right_angle_row_polygon(self, right_angle_centerline):
        polygon = build_row_polygon(right_angle_centerline, 10.0, 10.0)
        # 20 x 110 m northbound leg plus 90 x 20 m eastbound leg
        assert calculate_area(polygon) == pytest.approx(4000.0)
        assert calculate_area(polygon) >= 0
        assert calculate_perimeter(polygon) >= 0


class TestGeodesicMeasurements:
    """Tests with the pyproj ellipsoidal engine."""

    def test_equator_degree(self):
        engine = GeodesicGeometryEngine("EPSG:4326")
        polygon = Polygon(rings=[[(0, 0), (1, 0)]])
        assert calculate_perimeter(polygon, engine=engine) == pytest.approx(
            111_319.49, rel=1e-6
        )

    def test_small_square_area(self):
        engine = GeodesicGeometryEngine("EPSG:4326")
        side = 0.001
        polygon = Polygon(
            rings=[[(0, 0), (side, 0), (side, side), (0, side), (0, 0)]]
        )
        # ~110.6 m north-south by ~111.3 m east-west near the equator
        assert calculate_area(polygon, engine=engine) == pytest.approx(
            12_308, rel=0.01
        )

    def test_winding_does_not_change_sign(self):
        engine = GeodesicGeometryEngine("EPSG:4326")
        ring = [(0, 0), (0, 0.001), (0.001, 0.001), (0.001, 0), (0, 0)]
        ccw = Polygon(rings=[ring])
        cw = Polygon(rings=[list(reversed(ring))])
        assert calculate_area(cw, engine=engine) == pytest.approx(
            calculate_area(ccw, engine=engine)
        )
        assert calculate_area(cw, engine=engine) > 0
