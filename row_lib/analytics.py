# -*- coding: utf-8 -*-
"""Per-vertex survey analytics for a centerline.

Bearings use the surveying convention: 0 degrees is north (+y), angles
increase clockwise, and values are normalized to ``[0, 360)``. Deflections
are normalized to ``(-180, 180]`` so that a positive value is a clockwise
(right-hand) turn.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from row_lib.constants import DEGREE_SIGN
from row_lib.constants import FULL_CIRCLE_DEG
from row_lib.constants import HALF_CIRCLE_DEG
from row_lib.constants import STRAIGHT_TOLERANCE_DEG
from row_lib.engine import default_engine
from row_lib.enums import BendDirection
from row_lib.models import VertexRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from row_lib.engine.base import GeometryEngine
    from row_lib.models import Centerline
    from row_lib.models import Point2D

logger = logging.getLogger(__name__)


def normalize_bearing(degrees: float) -> float:
    """Normalize an angle into ``[0, 360)``."""
    bearing = (degrees + FULL_CIRCLE_DEG) % FULL_CIRCLE_DEG
    # -1e-17 + 360 rounds to 360.0
    return 0.0 if bearing >= FULL_CIRCLE_DEG else bearing


def compute_bearing(start: Point2D, end: Point2D) -> float:
    """North-referenced azimuth in degrees from ``start`` to ``end``."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    return normalize_bearing(math.degrees(math.atan2(dx, dy)))


def compute_deflection(incoming: float, outgoing: float) -> float:
    """Signed change of bearing, normalized into ``(-180, 180]``."""
    deflection = outgoing - incoming
    if deflection > HALF_CIRCLE_DEG:
        deflection -= FULL_CIRCLE_DEG
    elif deflection <= -HALF_CIRCLE_DEG:
        deflection += FULL_CIRCLE_DEG
    return deflection


def classify_bend(deflection: float) -> BendDirection:
    """Classify a signed deflection as Straight, Left or Right."""
    if abs(deflection) <= STRAIGHT_TOLERANCE_DEG:
        return BendDirection.STRAIGHT
    return BendDirection.RIGHT if deflection > 0 else BendDirection.LEFT


def decimal_to_dms(decimal: float) -> str:
    """Format a non-negative decimal-degree angle as ``D° M' S"``.

    Minutes and seconds are truncated, not rounded.

    >>> decimal_to_dms(45.5)
    '45° 30\\' 0"'
    """
    degrees = math.floor(decimal)
    minutes_decimal = (decimal - degrees) * 60
    minutes = math.floor(minutes_decimal)
    seconds = math.floor((minutes_decimal - minutes) * 60)
    return f"{degrees}{DEGREE_SIGN} {minutes}' {seconds}\""


def _bend_at(
    points: Sequence[Point2D], index: int
) -> tuple[float, BendDirection]:
    """Bend angle and direction at ``points[index]``."""
    if index == 0:
        return 0.0, BendDirection.START
    if index == len(points) - 1:
        return 0.0, BendDirection.END

    incoming = compute_bearing(points[index - 1], points[index])
    outgoing = compute_bearing(points[index], points[index + 1])
    deflection = compute_deflection(incoming, outgoing)
    return abs(deflection), classify_bend(deflection)


def compute_vertex_analytics(
    centerline: Centerline,
    *,
    engine: GeometryEngine | None = None,
) -> list[VertexRecord]:
    """Compute bearing, bend and distance records for every vertex.

    Args:
        centerline: The centerline to analyze
        engine: Geometry provider used for segment lengths

    Returns:
        One record per vertex, in path order. Empty if the centerline has
        fewer than 2 points or any non-finite coordinate.
    """
    points = centerline.points
    if centerline.is_empty or not centerline.is_finite:
        return []

    engine = engine or default_engine()
    records: list[VertexRecord] = []
    cumulative_distance = 0.0

    for index, current in enumerate(points):
        has_next = index < len(points) - 1

        bearing = 0.0
        segment_length = 0.0
        if has_next:
            following = points[index + 1]
            bearing = compute_bearing(current, following)
            segment_length = engine.geodesic_length([current, following])

        bend_angle, bend_direction = _bend_at(points, index)

        records.append(
            VertexRecord(
                index=index,
                x=current[0],
                y=current[1],
                bearing=bearing,
                bearing_dms=decimal_to_dms(bearing),
                bend_angle=bend_angle,
                bend_direction=bend_direction,
                segment_length=segment_length,
                distance_from_start=cumulative_distance,
            )
        )
        cumulative_distance += segment_length

    logger.debug(
        "Computed %d vertex records, total length %.3f m",
        len(records),
        cumulative_distance,
    )
    return records
