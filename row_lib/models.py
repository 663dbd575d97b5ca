# -*- coding: utf-8 -*-
"""Core data models for right-of-way geometry.

Input geometries (centerlines, polygons) are frozen Pydantic models so they
can be shared between the engines without being mutated. Computed results
(vertex records, corridors) are frozen dataclasses, created fresh on every
request.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pyproj import CRS

from row_lib.constants import MIN_CENTERLINE_POINTS
from row_lib.enums import BendDirection
from row_lib.enums import GeometryType
from row_lib.errors import InvalidGeometryError

Point2D = tuple[float, float]
Ring = tuple[Point2D, ...]


def _to_2d(points: Any) -> Any:
    """Drop Z/M ordinates so that GeoJSON 3D positions are accepted."""
    if not isinstance(points, (list, tuple)):
        return points
    return tuple(
        tuple(pt[:2]) if isinstance(pt, (list, tuple)) else pt for pt in points
    )


def _unwrap_geometry(obj: dict[str, Any], expected: GeometryType) -> dict[str, Any]:
    """Return the geometry dict of a GeoJSON geometry or Feature.

    Raises:
        InvalidGeometryError: If ``obj`` is not a ``expected`` geometry
    """
    if not isinstance(obj, dict):
        raise InvalidGeometryError(f"Expected a GeoJSON object, got {type(obj)}")

    if obj.get("type") == GeometryType.FEATURE.value:
        obj = obj.get("geometry") or {}

    if obj.get("type") != expected.value:
        raise InvalidGeometryError(
            f"Expected a `{expected.value}` geometry, got `{obj.get('type')}`"
        )
    if "coordinates" not in obj:
        raise InvalidGeometryError(f"`{expected.value}` has no coordinates")
    return obj


class SpatialReference(BaseModel):
    """Spatial reference token carried by a geometry.

    The engines never interpret it: it is copied from the centerline to the
    polygon built from it. Only :func:`row_lib.engine.engine_for` looks at it
    to choose a geometry provider.

    Attributes:
        wkid: Well-known ID (EPSG code or Esri WKID)
        wkt: Well-known text definition
    """

    model_config = ConfigDict(frozen=True)

    wkid: int | None = None
    wkt: str | None = None

    @property
    def is_defined(self) -> bool:
        """True if either a wkid or a wkt is set."""
        return self.wkid is not None or bool(self.wkt)

    def to_crs(self) -> CRS:
        """Build the pyproj CRS for this reference.

        Raises:
            ValueError: If the reference is not defined
        """
        if self.wkid is not None:
            return CRS.from_user_input(self.wkid)
        if self.wkt:
            return CRS.from_wkt(self.wkt)
        raise ValueError("Spatial reference has neither a wkid nor a wkt")


class Centerline(BaseModel):
    """An ordered single-path line of 2D points.

    Attributes:
        points: Path vertices as (x, y) tuples
        spatial_reference: Opaque reference passed through to derived geometry
    """

    model_config = ConfigDict(frozen=True)

    points: tuple[Point2D, ...] = Field(default_factory=tuple)
    spatial_reference: SpatialReference | None = None

    @field_validator("points", mode="before")
    @classmethod
    def drop_extra_ordinates(cls, value: Any) -> Any:
        return _to_2d(value)

    @property
    def vertex_count(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        """True if the line cannot carry a direction (fewer than 2 points)."""
        return self.vertex_count < MIN_CENTERLINE_POINTS

    @property
    def is_finite(self) -> bool:
        """True if every coordinate is a finite number."""
        return all(math.isfinite(c) for pt in self.points for c in pt)

    @classmethod
    def from_geojson(
        cls,
        obj: dict[str, Any],
        spatial_reference: SpatialReference | None = None,
    ) -> Centerline:
        """Build a centerline from a GeoJSON LineString or Feature.

        Args:
            obj: GeoJSON ``LineString`` geometry or a ``Feature`` wrapping one
            spatial_reference: Reference to attach (GeoJSON carries none)

        Returns:
            Centerline

        Raises:
            InvalidGeometryError: If ``obj`` is not a LineString
        """
        geometry = _unwrap_geometry(obj, GeometryType.LINE_STRING)
        return cls(
            points=geometry["coordinates"],
            spatial_reference=spatial_reference,
        )


class Polygon(BaseModel):
    """A polygon made of one or more closed rings.

    Attributes:
        rings: Closed rings (first point == last point); the first is the exterior
        spatial_reference: Opaque reference inherited from the source geometry
    """

    model_config = ConfigDict(frozen=True)

    rings: tuple[Ring, ...] = Field(default_factory=tuple)
    spatial_reference: SpatialReference | None = None

    @field_validator("rings", mode="before")
    @classmethod
    def drop_extra_ordinates(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            return value
        return tuple(_to_2d(ring) for ring in value)

    @property
    def exterior(self) -> Ring:
        """The first ring, or an empty ring for an empty polygon."""
        return self.rings[0] if self.rings else ()

    @property
    def is_closed(self) -> bool:
        """True if every ring ends on its first point."""
        return all(len(ring) > 0 and ring[0] == ring[-1] for ring in self.rings)

    @classmethod
    def from_geojson(
        cls,
        obj: dict[str, Any],
        spatial_reference: SpatialReference | None = None,
    ) -> Polygon:
        """Build a polygon from a GeoJSON Polygon or Feature.

        Raises:
            InvalidGeometryError: If ``obj`` is not a Polygon
        """
        geometry = _unwrap_geometry(obj, GeometryType.POLYGON)
        return cls(rings=geometry["coordinates"], spatial_reference=spatial_reference)


@dataclass(frozen=True)
class VertexRecord:
    """Survey analytics for a single centerline vertex.

    ``bearing`` is the north-referenced azimuth of the outgoing segment
    (0 for the last vertex). ``distance_from_start`` is the path distance
    needed to reach this vertex.
    """

    index: int
    x: float
    y: float
    bearing: float
    bearing_dms: str
    bend_angle: float
    bend_direction: BendDirection
    segment_length: float
    distance_from_start: float


@dataclass(frozen=True)
class RowCorridor:
    """A centerline with its widths and the measured ROW polygon.

    ``polygon`` is None when the offset construction failed and the
    corridor fell back to the bare centerline.
    """

    centerline: Centerline
    left_width: float
    right_width: float
    polygon: Polygon | None = None
    area: float = 0.0
    perimeter: float = 0.0

    @property
    def total_width(self) -> float:
        return self.left_width + self.right_width

    @property
    def has_polygon(self) -> bool:
        return self.polygon is not None
