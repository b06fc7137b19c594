"""Data models for decoded tracks (dataclasses, no I/O dependency)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class TrackPoint:
    """Single recorded position."""

    latitude: float
    longitude: float
    elevation: float = 0.0  # meters, 0 when missing
    time: datetime | None = None

    @property
    def coordinates(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass
class Track:
    """
    One continuous recorded path with its metadata.

    A single source file may produce several tracks (one per GPX segment
    or route, one per TCX lap). Points are fixed once the track is built;
    descriptive fields are updated by building a new track with
    `with_updates`.
    """

    name: str  # "Morning Ride"
    points: tuple[TrackPoint, ...] = ()
    filename: str = ""  # "ride1.gpx.gz" or the URL it came from
    src: str | None = None  # GPX <src>
    description: str | None = None  # GPX <desc>
    date: str | None = None  # "15.06.2021", display only
    start_time: datetime | None = None
    end_time: datetime | None = None
    total_time: float | None = None  # seconds, end_time - start_time
    total_elevation_gain: float = 0.0  # meters
    external_url: str | None = None  # link to the track on a website
    image_url: str | None = None  # elevation chart image
    activity_type: str | None = None  # "Ride", from Strava enrichment
    equipment: str | None = None  # from Strava enrichment

    @property
    def first_time(self) -> datetime | None:
        """Timestamp of the first point, if it has one."""
        if not self.points:
            return None
        return self.points[0].time

    def with_updates(self, **changes) -> Track:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
