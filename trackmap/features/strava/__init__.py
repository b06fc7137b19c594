"""
Strava export integration module.

Usage:
    from trackmap.features.strava import read_activities_file, enrich_tracks

Components:
- activities_csv: read activities.csv, resolve its localized columns
- enrichment: match tracks to activities by file name, return enriched copies
"""

from .activities_csv import (
    ActivityRow,
    parse_duration,
    read_activities,
    read_activities_file,
    resolve_columns,
)
from .enrichment import (
    enrich_track,
    enrich_tracks,
    matching_activities,
)

__all__ = [
    # CSV
    "ActivityRow",
    "parse_duration",
    "read_activities",
    "read_activities_file",
    "resolve_columns",
    # Enrichment
    "enrich_track",
    "enrich_tracks",
    "matching_activities",
]
