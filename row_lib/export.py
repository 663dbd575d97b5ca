# -*- coding: utf-8 -*-
"""GeoJSON and CSV serialization of centerlines, polygons and vertex records.

GeoJSON features carry the raw coordinates with an empty ``properties``
object and no CRS member. The CSV is a plain comma-joined table (no quoting)
with one row per vertex record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

import orjson
from geojson import Feature
from geojson import FeatureCollection
from geojson import LineString
from geojson import Polygon as GeoJSONPolygon

from row_lib.constants import CSV_COORDINATE_PRECISION
from row_lib.constants import CSV_HEADERS
from row_lib.constants import CSV_LINE_SEPARATOR
from row_lib.constants import CSV_SEPARATOR
from row_lib.constants import CSV_VALUE_PRECISION
from row_lib.constants import JSON_ENCODING
from row_lib.models import Centerline
from row_lib.models import Polygon

if TYPE_CHECKING:
    from collections.abc import Iterable

    from row_lib.models import RowCorridor
    from row_lib.models import VertexRecord

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# GeoJSON
# -----------------------------------------------------------------------------


def _with_raw_coordinates(geometry: Any, coordinates: list[Any]) -> Any:
    """Put back the unrounded coordinates (geojson rounds floats on construction)."""
    geometry["coordinates"] = coordinates
    return geometry


def line_to_feature(centerline: Centerline) -> Feature:
    """Convert a centerline to a GeoJSON LineString Feature."""
    coordinates = [list(pt) for pt in centerline.points]
    return Feature(
        geometry=_with_raw_coordinates(LineString(coordinates), coordinates),
        properties={},
    )


def polygon_to_feature(polygon: Polygon) -> Feature:
    """Convert a polygon to a GeoJSON Polygon Feature."""
    coordinates = [[list(pt) for pt in ring] for ring in polygon.rings]
    return Feature(
        geometry=_with_raw_coordinates(GeoJSONPolygon(coordinates), coordinates),
        properties={},
    )


def geometry_to_feature(geometry: Centerline | Polygon) -> Feature:
    """Convert a centerline or polygon to a GeoJSON Feature.

    Raises:
        TypeError: For any other geometry type
    """
    if isinstance(geometry, Centerline):
        return line_to_feature(geometry)
    if isinstance(geometry, Polygon):
        return polygon_to_feature(geometry)
    raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")


def corridor_to_feature_collection(corridor: RowCorridor) -> FeatureCollection:
    """Export a corridor as its centerline plus, if built, its ROW polygon.

    Unlike the single-geometry features, these features are annotated so the
    two can be told apart.
    """
    centerline = line_to_feature(corridor.centerline)
    centerline["properties"] = {
        "type": "centerline",
        "left_width": corridor.left_width,
        "right_width": corridor.right_width,
        "total_width": corridor.total_width,
    }
    features = [centerline]

    if corridor.polygon is not None:
        row = polygon_to_feature(corridor.polygon)
        row["properties"] = {
            "type": "row",
            "area": round(corridor.area, CSV_VALUE_PRECISION),
            "perimeter": round(corridor.perimeter, CSV_VALUE_PRECISION),
        }
        features.append(row)

    return FeatureCollection(features)


def to_geojson_string(obj: Any, *, minify: bool = False) -> str:
    """Serialize a GeoJSON object with orjson."""
    opts = 0 if minify else orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=opts).decode(JSON_ENCODING)


# -----------------------------------------------------------------------------
# CSV
# -----------------------------------------------------------------------------


def vertex_to_csv_row(vertex: VertexRecord) -> list[str]:
    """Format one vertex record as CSV fields."""
    return [
        str(vertex.index),
        f"{vertex.x:.{CSV_COORDINATE_PRECISION}f}",
        f"{vertex.y:.{CSV_COORDINATE_PRECISION}f}",
        f"{vertex.bearing:.{CSV_VALUE_PRECISION}f}",
        vertex.bearing_dms,
        f"{vertex.bend_angle:.{CSV_VALUE_PRECISION}f}",
        vertex.bend_direction.value,
        f"{vertex.segment_length:.{CSV_VALUE_PRECISION}f}",
        f"{vertex.distance_from_start:.{CSV_VALUE_PRECISION}f}",
    ]


def vertices_to_csv(vertices: Iterable[VertexRecord]) -> str:
    """Render vertex records as the vertex analytics CSV table."""
    rows = [CSV_SEPARATOR.join(CSV_HEADERS)]
    rows.extend(CSV_SEPARATOR.join(vertex_to_csv_row(v)) for v in vertices)
    logger.debug("Rendered %d CSV rows", len(rows) - 1)
    return CSV_LINE_SEPARATOR.join(rows)
