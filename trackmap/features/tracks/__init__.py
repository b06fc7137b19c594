"""
Track extraction and normalization module.

Usage:
    from trackmap.features.tracks import load_many, collect_tracks
    from trackmap.features.tracks import serialize_gpx, build_tooltip

Components:
- Track, TrackPoint: in-memory track model
- decoders: GPX/TCX (XML) and FIT decoders
- normalizer: derived metrics and the dated-name convention
- loader: gzip, local files, URLs, concurrent loading
- serializer: merged GPX export
- summary: tooltip, list label, color and report rows for the map
"""

from .models import Track, TrackPoint
from .exceptions import (
    TrackError,
    FormatError,
    ParseError,
    UnsupportedFormatError,
)
from .loader import (
    LoadResult,
    collect_tracks,
    decode_content,
    load_file,
    load_many,
    load_url,
    source_kind,
    split_source_name,
)
from .serializer import serialize_gpx, write_gpx
from .summary import (
    build_tooltip,
    detect_color,
    format_summary_rows,
    summarize,
    track_distance_km,
    track_label,
)
from .schemas import TrackSummary

__all__ = [
    # Models
    "Track",
    "TrackPoint",
    "TrackSummary",
    # Errors
    "TrackError",
    "FormatError",
    "ParseError",
    "UnsupportedFormatError",
    # Loading
    "LoadResult",
    "collect_tracks",
    "decode_content",
    "load_file",
    "load_many",
    "load_url",
    "source_kind",
    "split_source_name",
    # Export
    "serialize_gpx",
    "write_gpx",
    # Summary
    "build_tooltip",
    "detect_color",
    "format_summary_rows",
    "summarize",
    "track_distance_km",
    "track_label",
]
