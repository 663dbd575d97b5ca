# -*- coding: utf-8 -*-
"""Unified interface for right-of-way file I/O.

Reading follows the same path for every geometry:

    File → orjson → GeoJSON dictionary → model ``from_geojson()`` → Model

Writing goes through :mod:`row_lib.export`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING
from typing import Any

import orjson

from row_lib.constants import CSV_ENCODING
from row_lib.constants import JSON_ENCODING
from row_lib.enums import GeometryType
from row_lib.errors import InvalidGeometryError
from row_lib.export import to_geojson_string
from row_lib.export import vertices_to_csv
from row_lib.models import Centerline
from row_lib.models import Polygon

if TYPE_CHECKING:
    from collections.abc import Iterable

    from row_lib.models import SpatialReference
    from row_lib.models import VertexRecord

logger = logging.getLogger(__name__)


def _first_of_type(data: Any, geometry_type: GeometryType) -> dict[str, Any]:
    """Pick the first feature of ``geometry_type`` out of a FeatureCollection.

    Non-collection objects are returned unchanged.
    """
    if not isinstance(data, dict):
        raise InvalidGeometryError("GeoJSON root must be an object")

    if data.get("type") != GeometryType.FEATURE_COLLECTION.value:
        return data

    for feature in data.get("features") or []:
        geometry = feature.get("geometry") or {}
        if geometry.get("type") == geometry_type.value:
            return feature

    raise InvalidGeometryError(
        f"FeatureCollection holds no `{geometry_type.value}` feature"
    )


class RowInterface:
    """File I/O for centerlines, ROW polygons and vertex tables.

    Example:
        centerline = RowInterface.load_centerline(Path("centerline.geojson"))
        polygon = build_row_polygon(centerline, 25.0, 25.0)
        RowInterface.save_geojson(polygon_to_feature(polygon), Path("row.geojson"))
    """

    # -------------------------------------------------------------------------
    # Loading Methods (File → Model)
    # -------------------------------------------------------------------------

    @classmethod
    def load_geojson(cls, path: Path) -> Any:
        """Read a GeoJSON file into plain Python objects.

        Raises:
            FileNotFoundError: If the file doesn't exist
            InvalidGeometryError: If the file is not valid JSON
        """
        try:
            return orjson.loads(path.read_bytes())
        except orjson.JSONDecodeError as e:
            raise InvalidGeometryError(f"Invalid JSON in {path}: {e}") from e

    @classmethod
    def load_centerline(
        cls,
        path: Path,
        *,
        spatial_reference: SpatialReference | None = None,
    ) -> Centerline:
        """Load a centerline from a GeoJSON LineString, Feature or FeatureCollection.

        Args:
            path: GeoJSON file path
            spatial_reference: Reference to attach to the centerline

        Returns:
            Centerline (first LineString of a FeatureCollection)

        Raises:
            InvalidGeometryError: If no LineString can be found
        """
        data = _first_of_type(cls.load_geojson(path), GeometryType.LINE_STRING)
        centerline = Centerline.from_geojson(data, spatial_reference=spatial_reference)
        logger.debug("Loaded %d-vertex centerline from %s", centerline.vertex_count, path)
        return centerline

    @classmethod
    def load_polygon(
        cls,
        path: Path,
        *,
        spatial_reference: SpatialReference | None = None,
    ) -> Polygon:
        """Load a polygon from a GeoJSON Polygon, Feature or FeatureCollection.

        Raises:
            InvalidGeometryError: If no Polygon can be found
        """
        data = _first_of_type(cls.load_geojson(path), GeometryType.POLYGON)
        return Polygon.from_geojson(data, spatial_reference=spatial_reference)

    # -------------------------------------------------------------------------
    # Saving Methods (Model → File)
    # -------------------------------------------------------------------------

    @classmethod
    def save_geojson(cls, obj: Any, path: Path, *, minify: bool = False) -> None:
        """Write a GeoJSON object (Feature, FeatureCollection, ...) to ``path``."""
        path.write_text(to_geojson_string(obj, minify=minify), encoding=JSON_ENCODING)
        logger.info("Wrote GeoJSON to %s", path)

    @classmethod
    def save_vertices_csv(cls, vertices: Iterable[VertexRecord], path: Path) -> None:
        """Write vertex records as the vertex analytics CSV table."""
        path.write_text(vertices_to_csv(vertices), encoding=CSV_ENCODING)
        logger.info("Wrote vertex table to %s", path)
