# -*- coding: utf-8 -*-
"""Ellipsoidal geometry provider backed by pyproj.

Lengths and areas are measured on the ellipsoid of the source CRS with
:class:`pyproj.Geod`. Offsets are built with shapely in a local azimuthal
equidistant projection centred on the first vertex, where the offset
distance is in true meters near the line, then projected back.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pyproj import CRS
from pyproj import Geod
from pyproj import Transformer
from shapely.geometry import Polygon as ShapelyPolygon

from row_lib.constants import DEFAULT_GEODESIC_CRS
from row_lib.constants import OFFSET_MITRE_LIMIT
from row_lib.engine.base import Coordinate
from row_lib.engine.base import GeometryEngine
from row_lib.engine.planar import PlanarGeometryEngine

logger = logging.getLogger(__name__)

#: Minimum number of positions for a closed linear ring
_MIN_RING_POSITIONS = 4


class GeodesicGeometryEngine(GeometryEngine):
    """Provider measuring on the ellipsoid of ``crs``.

    Args:
        crs: Anything accepted by :meth:`pyproj.CRS.from_user_input`
            (``"EPSG:4326"``, ``3857``, a WKT string, ...)
        mitre_limit: Mitre limit used for offsets
    """

    def __init__(
        self,
        crs: CRS | str | int = DEFAULT_GEODESIC_CRS,
        mitre_limit: float = OFFSET_MITRE_LIMIT,
    ) -> None:
        self.crs = CRS.from_user_input(crs)

        geodetic_crs = self.crs.geodetic_crs
        if geodetic_crs is None:
            raise ValueError(f"CRS `{self.crs.name}` has no geodetic datum")

        self.geod: Geod = self.crs.get_geod() or Geod(ellps="WGS84")
        self._to_geographic = Transformer.from_crs(
            self.crs, geodetic_crs, always_xy=True
        )
        self._planar = PlanarGeometryEngine(mitre_limit=mitre_limit)

    @property
    def name(self) -> str:
        return f"GeodesicGeometryEngine({self.crs.name})"

    def _geographic(
        self, points: Sequence[Coordinate]
    ) -> tuple[list[float], list[float]]:
        """Return (longitudes, latitudes) of ``points``."""
        xs = [pt[0] for pt in points]
        ys = [pt[1] for pt in points]
        lons, lats = self._to_geographic.transform(xs, ys)
        return list(lons), list(lats)

    def _local_transformer(self, lon: float, lat: float) -> Transformer:
        """Transformer from the source CRS to a metric projection at (lon, lat)."""
        local_crs = CRS.from_proj4(
            f"+proj=aeqd +lat_0={lat} +lon_0={lon} +datum=WGS84 +units=m +no_defs"
        )
        return Transformer.from_crs(self.crs, local_crs, always_xy=True)

    def offset_line(
        self, points: Sequence[Coordinate], distance: float
    ) -> list[tuple[float, float]] | None:
        if not points:
            return None

        lons, lats = self._geographic(points[:1])
        transformer = self._local_transformer(lons[0], lats[0])

        xs, ys = transformer.transform(
            [pt[0] for pt in points], [pt[1] for pt in points]
        )
        local_offset = self._planar.offset_line(list(zip(xs, ys)), distance)
        if local_offset is None:
            return None

        out_x, out_y = transformer.transform(
            [pt[0] for pt in local_offset],
            [pt[1] for pt in local_offset],
            direction="INVERSE",
        )
        return list(zip(out_x, out_y))

    def geodesic_length(self, points: Sequence[Coordinate]) -> float:
        if len(points) < 2:  # noqa: PLR2004
            return 0.0
        lons, lats = self._geographic(points)
        return self.geod.line_length(lons, lats)

    def geodesic_area(self, rings: Sequence[Sequence[Coordinate]]) -> float:
        if not rings or len(rings[0]) < _MIN_RING_POSITIONS:
            return 0.0

        shell = list(zip(*self._geographic(rings[0])))
        holes = [
            list(zip(*self._geographic(ring)))
            for ring in rings[1:]
            if len(ring) >= _MIN_RING_POSITIONS
        ]
        area, _ = self.geod.geometry_area_perimeter(ShapelyPolygon(shell, holes))
        # Geod reports counter-clockwise rings as positive
        return abs(area)
