# -*- coding: utf-8 -*-
"""Geometry providers for offsetting, lengths and areas.

Usage::

    from row_lib.engine import GeodesicGeometryEngine
    from row_lib import build_row_polygon

    polygon = build_row_polygon(
        centerline, 25.0, 25.0, engine=GeodesicGeometryEngine("EPSG:4326")
    )

Available providers:

- :class:`PlanarGeometryEngine` -- shapely on the input plane (the default)
- :class:`GeodesicGeometryEngine` -- pyproj ellipsoidal measurements

To plug in another geometry library, subclass :class:`GeometryEngine`.
"""

from __future__ import annotations

import logging

from row_lib.engine.base import GeometryEngine
from row_lib.engine.geodesic import GeodesicGeometryEngine
from row_lib.engine.planar import PlanarGeometryEngine
from row_lib.models import SpatialReference

logger = logging.getLogger(__name__)

_DEFAULT_ENGINE = PlanarGeometryEngine()


def default_engine() -> GeometryEngine:
    """Return the shared planar provider."""
    return _DEFAULT_ENGINE


def engine_for(spatial_reference: SpatialReference | None) -> GeometryEngine:
    """Pick a provider for geometry carrying ``spatial_reference``.

    An undefined reference means local planar coordinates; anything else is
    measured on the ellipsoid of its CRS.
    """
    if spatial_reference is None or not spatial_reference.is_defined:
        return _DEFAULT_ENGINE

    crs = spatial_reference.to_crs()
    logger.debug("Using geodesic engine for CRS `%s`", crs.name)
    return GeodesicGeometryEngine(crs)


__all__ = [
    "GeodesicGeometryEngine",
    "GeometryEngine",
    "PlanarGeometryEngine",
    "default_engine",
    "engine_for",
]
