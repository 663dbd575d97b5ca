# -*- coding: utf-8 -*-
"""Centerline-to-corridor workflow.

Builds the ROW polygon of a centerline and measures it in one step. When
the offset fails the corridor falls back to the bare centerline so that
callers can still display and export it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from row_lib.constants import DEFAULT_LEFT_WIDTH
from row_lib.constants import DEFAULT_RIGHT_WIDTH
from row_lib.engine import default_engine
from row_lib.errors import OffsetFailure
from row_lib.measure import calculate_area
from row_lib.measure import calculate_perimeter
from row_lib.models import RowCorridor
from row_lib.offset import build_row_polygon
from row_lib.offset import validate_width

if TYPE_CHECKING:
    from row_lib.engine.base import GeometryEngine
    from row_lib.models import Centerline

logger = logging.getLogger(__name__)


def build_corridor(
    centerline: Centerline,
    left_width: float = DEFAULT_LEFT_WIDTH,
    right_width: float = DEFAULT_RIGHT_WIDTH,
    *,
    engine: GeometryEngine | None = None,
    allow_fallback: bool = True,
) -> RowCorridor:
    """Build and measure the ROW corridor of a centerline.

    Args:
        centerline: Source centerline
        left_width: Left width in meters
        right_width: Right width in meters
        engine: Geometry provider (planar shapely engine by default)
        allow_fallback: Return a polygon-less corridor instead of raising
            when the offset fails

    Returns:
        RowCorridor with the polygon, its area and its perimeter

    Raises:
        InvalidWidthError: If a width is negative or not finite
        OffsetFailure: If the offset fails and ``allow_fallback`` is False
    """
    left_width = validate_width(left_width, "Left")
    right_width = validate_width(right_width, "Right")
    engine = engine or default_engine()

    try:
        polygon = build_row_polygon(
            centerline, left_width, right_width, engine=engine
        )
    except OffsetFailure as e:
        if not allow_fallback:
            raise
        logger.warning("Error creating ROW, keeping centerline only: %s", e)
        return RowCorridor(
            centerline=centerline,
            left_width=left_width,
            right_width=right_width,
        )

    area = calculate_area(polygon, engine=engine)
    perimeter = calculate_perimeter(polygon, engine=engine)
    logger.info(
        "ROW polygon: width %.2f m, area %.2f m², perimeter %.2f m",
        left_width + right_width,
        area,
        perimeter,
    )

    return RowCorridor(
        centerline=centerline,
        left_width=left_width,
        right_width=right_width,
        polygon=polygon,
        area=area,
        perimeter=perimeter,
    )
