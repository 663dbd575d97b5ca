# -*- coding: utf-8 -*-
"""Abstract base class for geometry providers.

The offset, analytics and measurement functions never compute lengths,
areas or parallel offsets themselves: they call a :class:`GeometryEngine`.

To implement a new provider:

1. Subclass ``GeometryEngine``.
2. Implement ``offset_line``, ``geodesic_length`` and ``geodesic_area``.
3. Optionally override ``name`` for logging.

All methods take plain coordinate sequences and must not mutate them.
"""

from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from collections.abc import Sequence

Coordinate = Sequence[float]


class GeometryEngine(ABC):
    """Narrow capability interface over a geometry library.

    Offset sign convention: a positive ``distance`` offsets to the right of
    the direction of travel, a negative one to the left. Returned offset
    paths keep the direction of travel of the input.
    """

    @property
    def name(self) -> str:
        """Human-readable name of the provider (for logging)."""
        return self.__class__.__name__

    @abstractmethod
    def offset_line(
        self, points: Sequence[Coordinate], distance: float
    ) -> list[tuple[float, float]] | None:
        """Build a mitre-joined parallel offset of a path.

        Args:
            points: Path vertices
            distance: Offset distance in meters (positive = right-hand side)

        Returns:
            The offset path with one point per input vertex, or None if the
            path has zero length or doubles back on itself.
        """
        ...

    @abstractmethod
    def geodesic_length(self, points: Sequence[Coordinate]) -> float:
        """Length of a path in meters."""
        ...

    @abstractmethod
    def geodesic_area(self, rings: Sequence[Sequence[Coordinate]]) -> float:
        """Unsigned area in square meters of a polygon.

        The first ring is the exterior, the others are holes.
        """
        ...
