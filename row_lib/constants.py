# -*- coding: utf-8 -*-
"""Constants used throughout the row_lib library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding used for GeoJSON files
JSON_ENCODING = "utf-8"

#: Encoding used for CSV exports
CSV_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Corridor Defaults
# -----------------------------------------------------------------------------

#: Default left-side ROW width in meters
DEFAULT_LEFT_WIDTH: float = 50.0

#: Default right-side ROW width in meters
DEFAULT_RIGHT_WIDTH: float = 50.0

#: Ratio of offset distance beyond which a mitre join is bevelled
OFFSET_MITRE_LIMIT: float = 10.0

#: Minimum number of points for a centerline to carry a direction
MIN_CENTERLINE_POINTS: int = 2

# -----------------------------------------------------------------------------
# Angles
# -----------------------------------------------------------------------------

#: Full circle in degrees
FULL_CIRCLE_DEG: float = 360.0

#: Half circle in degrees
HALF_CIRCLE_DEG: float = 180.0

#: Deflections with an absolute value at or below this are "Straight"
STRAIGHT_TOLERANCE_DEG: float = 1.0

#: Degree sign used in DMS strings
DEGREE_SIGN: str = "°"

# -----------------------------------------------------------------------------
# Geodesy
# -----------------------------------------------------------------------------

#: CRS assumed by the geodesic engine when none is given
DEFAULT_GEODESIC_CRS: str = "EPSG:4326"

# -----------------------------------------------------------------------------
# Formatting Constants
# -----------------------------------------------------------------------------

#: Decimal places for X/Y columns of the vertex CSV
CSV_COORDINATE_PRECISION: int = 6

#: Decimal places for every other numeric column of the vertex CSV
CSV_VALUE_PRECISION: int = 2

#: Field separator of the vertex CSV
CSV_SEPARATOR: str = ","

#: Row separator of the vertex CSV
CSV_LINE_SEPARATOR: str = "\n"

#: Header row of the vertex CSV
CSV_HEADERS: tuple[str, ...] = (
    "Index",
    "X",
    "Y",
    "Bearing",
    "Bearing DMS",
    "Bend Angle",
    "Bend Direction",
    "Segment Length (m)",
    "Distance From Start (m)",
)
