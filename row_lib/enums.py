# -*- coding: utf-8 -*-
"""Enumerations for right-of-way geometry and exports."""

from enum import Enum


class BendDirection(str, Enum):
    """Classification of the corridor at a centerline vertex.

    Attributes:
        START: First vertex of the centerline (no incoming segment)
        END: Last vertex of the centerline (no outgoing segment)
        STRAIGHT: Deflection within the straight tolerance
        LEFT: Counter-clockwise turn
        RIGHT: Clockwise turn
    """

    START = "Start"
    END = "End"
    STRAIGHT = "Straight"
    LEFT = "Left"
    RIGHT = "Right"


class GeometryType(str, Enum):
    """GeoJSON geometry type names handled by the library."""

    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"


class OffsetSide(str, Enum):
    """Side of the centerline an offset line was built on."""

    LEFT = "left"
    RIGHT = "right"
