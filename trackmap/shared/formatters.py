"""
Formatting utilities for display.

Used by the track summary and the GPX export.
"""

from datetime import datetime, timezone


def format_duration(seconds: float) -> str:
    """
    Format a duration as 'H:mm'.

    Args:
        seconds: Duration in seconds (e.g., 5400)

    Returns:
        Formatted string (e.g., '1:30')
    """
    if seconds < 0:
        return "—"

    total_minutes = int(seconds // 60)
    h = total_minutes // 60
    m = total_minutes % 60

    return f"{h}:{m:02d}"


def format_datetime(value: datetime) -> str:
    """Format a timestamp as 'DD.MM.YYYY HH:MM:SS'."""
    return value.strftime("%d.%m.%Y %H:%M:%S")


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.5 км', '0.8 км')
    """
    return f"{km:.1f} км"


def format_elevation_gain(meters: float) -> str:
    """
    Format elevation gain in whole meters.

    Args:
        meters: Elevation gain in meters

    Returns:
        Formatted string (e.g., '850 м')
    """
    return f"{int(round(meters))} м"


def format_gpx_time(value: datetime) -> str:
    """
    Format a timestamp the way GPX expects it: UTC with a 'Z' suffix.

    Naive timestamps are taken as UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")

