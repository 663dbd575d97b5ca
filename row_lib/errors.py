# -*- coding: utf-8 -*-
"""Exceptions raised by row_lib.

Only the offset construction and the file I/O boundary raise; the
analytics and measurement functions degrade to empty results instead.
"""

from __future__ import annotations

from row_lib.enums import OffsetSide


class RowError(Exception):
    """Base class for all row_lib errors."""


class OffsetFailure(RowError):  # noqa: N818
    """Raised when a parallel offset of the centerline cannot be built.

    Attributes:
        message: Error message
        side: Side whose offset failed, or None when the input was rejected
            before any offset was attempted
    """

    def __init__(self, message: str, side: OffsetSide | None = None):
        self.message = message
        self.side = side
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.side is not None:
            return f"{self.message} (side: {self.side.value})"
        return self.message


class InvalidWidthError(RowError, ValueError):
    """Raised for a negative or non-finite corridor width."""


class InvalidGeometryError(RowError, ValueError):
    """Raised when GeoJSON input does not hold the expected geometry."""
