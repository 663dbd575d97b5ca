# -*- coding: utf-8 -*-
"""Tests for RowInterface file I/O."""

import orjson
import pytest

from row_lib.analytics import compute_vertex_analytics
from row_lib.errors import InvalidGeometryError
from row_lib.export import line_to_feature
from row_lib.interface import RowInterface
from row_lib.models import SpatialReference

LINE_GEOMETRY = {"type": "LineString", "coordinates": [[0, 0], [0, 100], [100, 100]]}
POLYGON_GEOMETRY = {
    "type": "Polygon",
    "coordinates": [[[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]],
}


class TestLoadCenterline:
    """Tests for RowInterface.load_centerline."""

    def test_geometry(self, write_geojson):
        centerline = RowInterface.load_centerline(write_geojson(LINE_GEOMETRY))
        assert centerline.points == ((0, 0), (0, 100), (100, 100))

    def test_feature(self, write_geojson):
        path = write_geojson(
            {"type": "Feature", "geometry": LINE_GEOMETRY, "properties": {}}
        )
        assert RowInterface.load_centerline(path).vertex_count == 3

    def test_feature_collection(self, write_geojson):
        path = write_geojson(
            {
                "type": "FeatureCollection",
                "features": [
                    {"type": "Feature", "geometry": POLYGON_GEOMETRY, "properties": {}},
                    {"type": "Feature", "geometry": LINE_GEOMETRY, "properties": {}},
                ],
            }
        )
        assert RowInterface.load_centerline(path).vertex_count == 3

    def test_spatial_reference(self, write_geojson):
        sr = SpatialReference(wkid=4326)
        centerline = RowInterface.load_centerline(
            write_geojson(LINE_GEOMETRY), spatial_reference=sr
        )
        assert centerline.spatial_reference == sr

    def test_wrong_geometry(self, write_geojson):
        with pytest.raises(InvalidGeometryError):
            RowInterface.load_centerline(write_geojson(POLYGON_GEOMETRY))

    def test_collection_without_line(self, write_geojson):
        path = write_geojson({"type": "FeatureCollection", "features": []})
        with pytest.raises(InvalidGeometryError):
            RowInterface.load_centerline(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.geojson"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidGeometryError):
            RowInterface.load_centerline(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RowInterface.load_centerline(tmp_path / "missing.geojson")


class TestLoadPolygon:
    """Tests for RowInterface.load_polygon."""

    def test_polygon(self, write_geojson):
        polygon = RowInterface.load_polygon(write_geojson(POLYGON_GEOMETRY))
        assert polygon.is_closed
        assert len(polygon.exterior) == 5

    def test_wrong_geometry(self, write_geojson):
        with pytest.raises(InvalidGeometryError):
            RowInterface.load_polygon(write_geojson(LINE_GEOMETRY))


class TestSave:
    """Tests for the save methods."""

    def test_save_geojson(self, tmp_path, straight_centerline):
        path = tmp_path / "line.geojson"
        RowInterface.save_geojson(line_to_feature(straight_centerline), path)

        data = orjson.loads(path.read_bytes())
        assert data["geometry"]["coordinates"] == [[0.0, 0.0], [0.0, 100.0]]

    def test_save_and_reload(self, tmp_path, right_angle_centerline):
        path = tmp_path / "line.geojson"
        RowInterface.save_geojson(line_to_feature(right_angle_centerline), path)
        assert RowInterface.load_centerline(path) == right_angle_centerline

    def test_save_vertices_csv(self, tmp_path, right_angle_centerline):
        path = tmp_path / "vertices.csv"
        RowInterface.save_vertices_csv(
            compute_vertex_analytics(right_angle_centerline), path
        )

        lines = path.read_text(encoding="utf-8").split("\n")
        assert len(lines) == 4
        assert lines[2].split(",")[6] == "Right"
