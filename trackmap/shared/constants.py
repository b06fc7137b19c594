"""
Unified constants for file formats, link types and Strava exports.

This module provides a single source of truth for the names the
decoders, the loader and the enricher agree on.
"""

import re
from enum import Enum


class TrackFormat(str, Enum):
    """
    Track file formats we can decode.

    The value is the file extension (lower case, without the dot).
    """
    GPX = "gpx"
    TCX = "tcx"
    FIT = "fit"


# GPX and TCX share the XML path
XML_FORMATS: frozenset[TrackFormat] = frozenset({TrackFormat.GPX, TrackFormat.TCX})

GZIP_SUFFIX = ".gz"

STRAVA_CSV_EXTENSIONS: frozenset[str] = frozenset({"csv"})
IMAGE_EXTENSIONS: frozenset[str] = frozenset({"jpg", "jpeg"})


class SourceKind(str, Enum):
    """What a dropped file or URL is routed to."""
    TRACK = "track"
    STRAVA_CSV = "strava_csv"
    IMAGE = "image"
    UNKNOWN = "unknown"


# === Track naming ===

DEFAULT_TRACK_NAME = "untitled"

# "2021_06_15_Morning Ride" -> date 15.06.2021, name "Morning Ride"
DATED_NAME_PATTERN = re.compile(r"(\d+)_(\d+)_(\d+)_(.*)")


# === GPX <link> types ===

LINK_TYPE_TRACK_ON_WEB = "trackOnWeb"
LINK_TYPE_ELEVATION_CHART = "elevationChartUrlTab"


# === GPX export ===

EXPORT_FILENAME = "all.gpx"
GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"
GPX_SCHEMA_LOCATION = (
    "http://www.topografix.com/GPX/1/1 "
    "http://www.topografix.com/GPX/1/1/gpx.xsd"
)


# === Activity colors (by filename suffix) ===

ACTIVITY_COLOR_PATTERNS: list[tuple[re.Pattern, str]] = [
    (re.compile(r"-(Hike|Walk)\.gpx"), "#ffc0cb"),
    (re.compile(r"-Run\.gpx"), "#ff0000"),
    (re.compile(r"-Ride\.gpx"), "#00ffff"),
]


# === Strava activities.csv ===

class StravaColumn(str, Enum):
    """Logical columns of a Strava activities export."""
    FILENAME = "filename"
    ACTIVITY_NAME = "activity_name"
    EQUIPMENT = "equipment"
    DURATION = "duration"
    ACTIVITY_TYPE = "activity_type"


# Strava localizes the export headers; first match wins
STRAVA_COLUMN_ALIASES: dict[StravaColumn, list[str]] = {
    StravaColumn.FILENAME: ["Filename", "Название файла"],
    StravaColumn.ACTIVITY_NAME: ["Activity Name", "Название тренировки"],
    StravaColumn.EQUIPMENT: [
        "Activity Gear",
        "Снаряжение для физической активности",
    ],
    StravaColumn.DURATION: ["Elapsed Time", "Общее время"],
    StravaColumn.ACTIVITY_TYPE: ["Activity Type", "Тип активности"],
}
