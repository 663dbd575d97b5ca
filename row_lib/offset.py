# -*- coding: utf-8 -*-
"""Right-of-way polygon construction from a centerline.

The ROW ring is stitched from two mitre-joined parallel offsets of the
centerline::

    left offset (forward) + right offset (reversed) + first left point

so the ring has ``2 * n + 1`` positions for an ``n``-vertex centerline. The
left width is applied with a positive offset distance and the right width
with a negative one (see :class:`row_lib.engine.GeometryEngine` for the sign
convention).
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from row_lib.engine import default_engine
from row_lib.enums import OffsetSide
from row_lib.errors import InvalidWidthError
from row_lib.errors import OffsetFailure
from row_lib.models import Polygon

if TYPE_CHECKING:
    from row_lib.engine.base import GeometryEngine
    from row_lib.models import Centerline

logger = logging.getLogger(__name__)


def validate_width(value: float, label: str) -> float:
    """Check that a corridor width is a finite, non-negative number.

    Raises:
        InvalidWidthError: If the width is negative, NaN or infinite
    """
    if not math.isfinite(value) or value < 0:
        raise InvalidWidthError(
            f"{label} width must be a finite non-negative number, got {value}"
        )
    return float(value)


def build_row_polygon(
    centerline: Centerline,
    left_width: float,
    right_width: float,
    *,
    engine: GeometryEngine | None = None,
) -> Polygon:
    """Build the ROW polygon of a centerline.

    Both widths must be finite and >= 0. A zero width puts that side of the
    ring on the centerline itself, but at least one width must be positive.

    Args:
        centerline: Centerline with at least 2 points
        left_width: Width in meters applied on the positive-offset side
        right_width: Width in meters applied on the negative-offset side
        engine: Geometry provider (planar shapely engine by default)

    Returns:
        Single-ring polygon carrying the centerline's spatial reference

    Raises:
        InvalidWidthError: If a width is negative or not finite
        OffsetFailure: If either offset cannot be built, or both widths are 0
    """
    left_width = validate_width(left_width, "Left")
    right_width = validate_width(right_width, "Right")
    engine = engine or default_engine()

    if centerline.is_empty:
        raise OffsetFailure(
            f"Centerline needs at least 2 points, got {centerline.vertex_count}"
        )
    if not centerline.is_finite:
        raise OffsetFailure("Centerline has non-finite coordinates")
    if left_width == 0 and right_width == 0:
        raise OffsetFailure("Both widths are zero: the corridor has no area")

    logger.debug(
        "Offsetting %d-vertex centerline (left=%.3f, right=%.3f) with %s",
        centerline.vertex_count,
        left_width,
        right_width,
        engine.name,
    )

    left_path = engine.offset_line(centerline.points, left_width)
    if not left_path:
        raise OffsetFailure("Failed to create offset line", side=OffsetSide.LEFT)

    right_path = engine.offset_line(centerline.points, -right_width)
    if not right_path:
        raise OffsetFailure("Failed to create offset line", side=OffsetSide.RIGHT)

    ring = [*left_path, *reversed(right_path), left_path[0]]

    return Polygon(rings=(ring,), spatial_reference=centerline.spatial_reference)
