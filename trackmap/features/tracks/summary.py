"""
Track summary for the map layer.

Distance, tooltip text, list label and line color the renderer shows
for a loaded track.
"""

from typing import Iterable, Optional

from trackmap.shared.constants import ACTIVITY_COLOR_PATTERNS
from trackmap.shared.formatters import (
    format_datetime,
    format_distance_km,
    format_duration,
    format_elevation_gain,
)
from trackmap.shared.geo import calculate_total_distance

from .models import Track
from .schemas import TrackSummary


def track_distance_km(track: Track) -> float:
    """Length of the track along its points, in kilometers."""
    return calculate_total_distance(p.coordinates for p in track.points)


def build_tooltip(track: Track, distance_km: Optional[float] = None) -> str:
    """
    Tooltip HTML shown when hovering a track.

    Lines are only added for fields the track actually has.

    Args:
        track: Track to describe
        distance_km: Precomputed length; measured from the points if omitted
    """
    if distance_km is None:
        distance_km = track_distance_km(track)

    tooltip = f"<strong>{track.name}</strong>"
    if track.first_time is not None:
        tooltip += "<br>Дата: " + format_datetime(track.first_time)
    if track.date:
        tooltip += "<br>Дата: " + track.date
    tooltip += "<br>Расстояние: " + format_distance_km(distance_km)
    if track.description:
        tooltip += track.description
    if track.activity_type:
        tooltip += "<br>" + track.activity_type
        if track.equipment:
            tooltip += ": " + track.equipment
    if track.total_time:
        tooltip += "<br>Длительность: " + format_duration(track.total_time)
    if track.total_elevation_gain:
        tooltip += "<br>Общий подъем: " + format_elevation_gain(track.total_elevation_gain)
    if track.image_url:
        tooltip += f"<br><img src='{track.image_url}'>"
    return tooltip


def track_label(track: Track) -> str:
    """Entry in the track list: '<date> <name>', or first timestamp + name."""
    if track.date:
        return f"{track.date} {track.name}"
    if track.first_time is not None:
        return f"{format_datetime(track.first_time)} {track.name}"
    return track.name


def detect_color(filename: str) -> Optional[str]:
    """Line color implied by a Strava-style '-Run.gpx' filename, if any."""
    for pattern, color in ACTIVITY_COLOR_PATTERNS:
        if pattern.search(filename):
            return color
    return None


def summarize(track: Track) -> TrackSummary:
    return TrackSummary(
        name=track.name,
        date=track.date,
        elevation_gain_m=track.total_elevation_gain,
        distance_km=round(track_distance_km(track), 3),
        total_time_s=track.total_time,
        filename=track.filename,
        url=track.external_url,
        points_count=len(track.points),
    )


def format_summary_rows(tracks: Iterable[Track]) -> str:
    """Semicolon-separated report, one line per track."""
    return "".join(summarize(t).to_csv_row() + "\n" for t in tracks)
