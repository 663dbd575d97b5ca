# -*- coding: utf-8 -*-
"""Right-of-way geometry library.

Turns a drawn centerline into a right-of-way (ROW) corridor polygon and
derives per-vertex survey analytics (bearings, bend angles, distances).

Usage:
    from row_lib import Centerline, build_row_polygon, compute_vertex_analytics

    centerline = Centerline(points=[(0, 0), (0, 100), (100, 100)])
    polygon = build_row_polygon(centerline, 10.0, 10.0)
    area = calculate_area(polygon)

    for vertex in compute_vertex_analytics(centerline):
        print(vertex.index, vertex.bearing_dms, vertex.bend_direction.value)
"""

__version__ = "0.1.0"

# Constants
from row_lib.constants import CSV_HEADERS
from row_lib.constants import DEFAULT_LEFT_WIDTH
from row_lib.constants import DEFAULT_RIGHT_WIDTH
from row_lib.constants import JSON_ENCODING

# Enums
from row_lib.enums import BendDirection
from row_lib.enums import OffsetSide

# Errors
from row_lib.errors import InvalidGeometryError
from row_lib.errors import InvalidWidthError
from row_lib.errors import OffsetFailure
from row_lib.errors import RowError

# Models
from row_lib.models import Centerline
from row_lib.models import Polygon
from row_lib.models import RowCorridor
from row_lib.models import SpatialReference
from row_lib.models import VertexRecord

# Engines
from row_lib.engine import GeodesicGeometryEngine
from row_lib.engine import GeometryEngine
from row_lib.engine import PlanarGeometryEngine
from row_lib.engine import engine_for

# Operations
from row_lib.analytics import compute_vertex_analytics
from row_lib.analytics import decimal_to_dms
from row_lib.corridor import build_corridor
from row_lib.measure import calculate_area
from row_lib.measure import calculate_perimeter
from row_lib.offset import build_row_polygon

# I/O
from row_lib.export import geometry_to_feature
from row_lib.export import vertices_to_csv
from row_lib.interface import RowInterface

__all__ = [
    "CSV_HEADERS",
    "DEFAULT_LEFT_WIDTH",
    "DEFAULT_RIGHT_WIDTH",
    "JSON_ENCODING",
    "BendDirection",
    "Centerline",
    "GeodesicGeometryEngine",
    "GeometryEngine",
    "InvalidGeometryError",
    "InvalidWidthError",
    "OffsetFailure",
    "OffsetSide",
    "PlanarGeometryEngine",
    "Polygon",
    "RowCorridor",
    "RowError",
    "RowInterface",
    "SpatialReference",
    "VertexRecord",
    "build_corridor",
    "build_row_polygon",
    "calculate_area",
    "calculate_perimeter",
    "compute_vertex_analytics",
    "decimal_to_dms",
    "engine_for",
    "geometry_to_feature",
    "vertices_to_csv",
]
