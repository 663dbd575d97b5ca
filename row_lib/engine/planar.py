# -*- coding: utf-8 -*-
"""Planar geometry provider backed by shapely.

Coordinates are taken as meters on a flat plane: lengths are Euclidean and
areas are planar. This is the default provider and the one to use for
projected coordinates in a metric CRS.

Offsets are mitre-joined and keep one output vertex per input vertex, so a
left and a right offset of an n-point centerline always pair up.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from shapely.geometry import LineString
from shapely.geometry import Polygon as ShapelyPolygon

from row_lib.constants import OFFSET_MITRE_LIMIT
from row_lib.engine.base import Coordinate
from row_lib.engine.base import GeometryEngine

logger = logging.getLogger(__name__)

#: Minimum number of positions for a closed linear ring
_MIN_RING_POSITIONS = 4

#: Below this, ``1 + cos(turn)`` is treated as a full reversal
_REVERSAL_TOLERANCE = 1e-12

Normal = tuple[float, float]


def _valid_ring(ring: Sequence[Coordinate]) -> bool:
    return len(ring) >= _MIN_RING_POSITIONS


def _segment_normals(coords: list[tuple[float, float]]) -> list[Normal | None]:
    """Right-hand unit normal of each segment, None for zero-length ones."""
    normals: list[Normal | None] = []
    for (x0, y0), (x1, y1) in zip(coords, coords[1:]):
        length = math.hypot(x1 - x0, y1 - y0)
        if length == 0:
            normals.append(None)
        else:
            normals.append(((y1 - y0) / length, (x0 - x1) / length))
    return normals


def _fill_gaps(normals: list[Normal | None]) -> list[Normal] | None:
    """Give zero-length segments the normal of a neighbouring segment.

    Returns None when every segment has zero length.
    """
    known = [n for n in normals if n is not None]
    if not known:
        return None

    filled: list[Normal] = []
    last = known[0]
    for normal in normals:
        if normal is not None:
            last = normal
        filled.append(last)
    return filled


class PlanarGeometryEngine(GeometryEngine):
    """Shapely-based provider working directly in the input coordinates."""

    def __init__(self, mitre_limit: float = OFFSET_MITRE_LIMIT) -> None:
        self.mitre_limit = mitre_limit

    @property
    def name(self) -> str:
        return "PlanarGeometryEngine"

    def offset_line(
        self, points: Sequence[Coordinate], distance: float
    ) -> list[tuple[float, float]] | None:
        coords = [(pt[0], pt[1]) for pt in points]
        if len(coords) < 2:  # noqa: PLR2004
            return None

        normals = _fill_gaps(_segment_normals(coords))
        if normals is None:
            logger.debug("Cannot offset a zero-length line")
            return None

        if distance == 0:
            return coords

        # One mitre vector per vertex: the ends take their segment's normal
        mitres: list[tuple[float, float]] = [normals[0]]
        for index, (n_in, n_out) in enumerate(zip(normals, normals[1:]), start=1):
            mitre = self._mitre(n_in, n_out)
            if mitre is None:
                logger.debug("Centerline reverses on itself at vertex %d", index)
                return None
            mitres.append(mitre)
        mitres.append(normals[-1])

        return [
            (x + distance * mx, y + distance * my)
            for (x, y), (mx, my) in zip(coords, mitres)
        ]

    def _mitre(
        self, n_in: tuple[float, float], n_out: tuple[float, float]
    ) -> tuple[float, float] | None:
        """Unit-distance offset of the joint between two segment normals.

        The result points at the intersection of both offset segments. Joins
        longer than ``mitre_limit`` are shortened along the same bisector.
        """
        cos_turn = n_in[0] * n_out[0] + n_in[1] * n_out[1]
        if 1 + cos_turn < _REVERSAL_TOLERANCE:
            return None

        scale = 1 / (1 + cos_turn)
        mx = (n_in[0] + n_out[0]) * scale
        my = (n_in[1] + n_out[1]) * scale

        ratio = math.hypot(mx, my)
        if ratio > self.mitre_limit:
            mx *= self.mitre_limit / ratio
            my *= self.mitre_limit / ratio
        return mx, my

    def geodesic_length(self, points: Sequence[Coordinate]) -> float:
        if len(points) < 2:  # noqa: PLR2004
            return 0.0
        return LineString([(pt[0], pt[1]) for pt in points]).length

    def geodesic_area(self, rings: Sequence[Sequence[Coordinate]]) -> float:
        if not rings or not _valid_ring(rings[0]):
            return 0.0
        shell = [(pt[0], pt[1]) for pt in rings[0]]
        holes = [[(pt[0], pt[1]) for pt in ring] for ring in rings[1:] if _valid_ring(ring)]
        return abs(ShapelyPolygon(shell, holes).area)
