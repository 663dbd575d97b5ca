# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
import pytest

from row_lib.engine.base import GeometryEngine
from row_lib.engine.planar import PlanarGeometryEngine
from row_lib.models import Centerline
from row_lib.models import Polygon

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Geometry Fixtures
# =============================================================================


@pytest.fixture
def straight_centerline() -> Centerline:
    """Two-vertex line heading due north for 100 m."""
    return Centerline(points=[(0.0, 0.0), (0.0, 100.0)])


@pytest.fixture
def right_angle_centerline() -> Centerline:
    """North for 100 m, then east for 100 m."""
    return Centerline(points=[(0.0, 0.0), (0.0, 100.0), (100.0, 100.0)])


@pytest.fixture
def square_polygon() -> Polygon:
    """10 m x 10 m square, counter-clockwise."""
    return Polygon(rings=[[(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]])


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def write_geojson(tmp_path: Path):
    """Return a helper writing a GeoJSON object to a temporary file."""

    def _write(obj: Any, name: str = "input.geojson") -> Path:
        path = tmp_path / name
        path.write_bytes(orjson.dumps(obj))
        return path

    return _write


# =============================================================================
# Engines
# =============================================================================


class FailingOffsetEngine(GeometryEngine):
    """Planar engine whose offsets fail on the chosen side(s)."""

    def __init__(self, *, fail_positive: bool = False, fail_negative: bool = False):
        self._planar = PlanarGeometryEngine()
        self.fail_positive = fail_positive
        self.fail_negative = fail_negative

    def offset_line(self, points, distance):
        if (distance > 0 and self.fail_positive) or (
            distance < 0 and self.fail_negative
        ):
            return None
        return self._planar.offset_line(points, distance)

    def geodesic_length(self, points):
        return self._planar.geodesic_length(points)

    def geodesic_area(self, rings):
        return self._planar.geodesic_area(rings)


@pytest.fixture
def failing_engine_factory():
    return FailingOffsetEngine
