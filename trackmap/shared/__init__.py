"""
Shared utilities (NOT business logic).

Usage:
    from trackmap.shared import haversine, calculate_elevation_gain
    from trackmap.shared.formatters import format_duration
"""
from .geo import (
    haversine,
    calculate_total_distance,
    semicircles_to_degrees,
    EARTH_RADIUS_KM,
)
from .elevation import (
    parse_elevation,
    calculate_elevation_gain,
)
from .formatters import (
    format_duration,
    format_datetime,
    format_distance_km,
    format_elevation_gain,
    format_gpx_time,
)
from .constants import (
    TrackFormat,
    SourceKind,
    StravaColumn,
    XML_FORMATS,
    DEFAULT_TRACK_NAME,
    EXPORT_FILENAME,
)

__all__ = [
    # geo
    "haversine",
    "calculate_total_distance",
    "semicircles_to_degrees",
    "EARTH_RADIUS_KM",
    # elevation
    "parse_elevation",
    "calculate_elevation_gain",
    # formatters
    "format_duration",
    "format_datetime",
    "format_distance_km",
    "format_elevation_gain",
    "format_gpx_time",
    # constants
    "TrackFormat",
    "SourceKind",
    "StravaColumn",
    "XML_FORMATS",
    "DEFAULT_TRACK_NAME",
    "EXPORT_FILENAME",
]
