# -*- coding: utf-8 -*-
"""Area and perimeter of polygons."""

from __future__ import annotations

from typing import TYPE_CHECKING

from row_lib.engine import default_engine

if TYPE_CHECKING:
    from row_lib.engine.base import GeometryEngine
    from row_lib.models import Polygon


def calculate_area(polygon: Polygon, *, engine: GeometryEngine | None = None) -> float:
    """Unsigned area of ``polygon`` in square meters."""
    engine = engine or default_engine()
    return abs(engine.geodesic_area(polygon.rings))


def calculate_perimeter(
    polygon: Polygon, *, engine: GeometryEngine | None = None
) -> float:
    """Length in meters of all ring boundaries of ``polygon``."""
    engine = engine or default_engine()
    return sum(engine.geodesic_length(ring) for ring in polygon.rings)
