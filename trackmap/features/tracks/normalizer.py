"""
Track Normalizer

Turns decoded point sequences into Track entities: derived metrics
(elevation gain, start/end time, total time) and the dated-name
convention used by exported GPX files.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Sequence

from trackmap.shared.constants import DATED_NAME_PATTERN
from trackmap.shared.elevation import calculate_elevation_gain

from .models import Track, TrackPoint

logger = logging.getLogger(__name__)


def apply_name_convention(name: str) -> tuple[str, str | None]:
    """
    Split a '<y>_<m>_<d>_<free text>' name into (free text, 'd.m.y').

    Names that don't follow the convention come back unchanged with no
    date. The numeric groups are used verbatim (no zero padding).

    Example:
        >>> apply_name_convention("2021_06_15_Morning Ride")
        ('Morning Ride', '15.06.2021')
    """
    m = DATED_NAME_PATTERN.search(name)
    if not m:
        return name, None
    year, month, day, rest = m.groups()
    return rest, f"{day}.{month}.{year}"


def parse_timestamp(value: str | None, assume_utc: bool = True) -> datetime | None:
    """
    Parse an ISO 8601 timestamp.

    Args:
        value: Raw text, e.g. "2021-06-15T07:30:00Z"
        assume_utc: How to read values without an offset. True reads them
            as UTC (GPX, FIT); False reads them as local time (TCX).

    Returns:
        Timezone-aware datetime, or None if the value can't be parsed
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparsable timestamp: {value!r}")
        return None

    if parsed.tzinfo is None:
        if assume_utc:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone()
    return parsed


def time_bounds(points: Iterable[TrackPoint]) -> tuple[datetime | None, datetime | None]:
    """First and last timestamp over the points that carry one."""
    start = None
    end = None
    for point in points:
        if point.time is None:
            continue
        if start is None:
            start = point.time
        end = point.time
    return start, end


def total_seconds(start: datetime | None, end: datetime | None) -> float | None:
    """
    end - start in seconds.

    No reordering: out-of-order timestamps give a negative value.
    """
    if start is None or end is None:
        return None
    return (end - start).total_seconds()


def build_track(
    name: str,
    points: Sequence[TrackPoint],
    *,
    filename: str = "",
    with_elevation_gain: bool = True,
    with_times: bool = True,
    with_name_convention: bool = True,
    **metadata,
) -> Track:
    """
    Build a Track from decoded points, filling in derived metrics.

    Args:
        name: Raw track name from the file
        points: Points in recorded order
        filename: Source file name
        with_elevation_gain: Accumulate total_elevation_gain
        with_times: Fill start_time/end_time/total_time
        with_name_convention: Apply the '<y>_<m>_<d>_<name>' fallback
        **metadata: Other Track fields (src, description, external_url, ...)
    """
    date = metadata.pop("date", None)
    if with_name_convention:
        name, parsed_date = apply_name_convention(name)
        date = parsed_date or date

    track = Track(
        name=name,
        points=tuple(points),
        filename=filename,
        date=date,
        **metadata,
    )

    if with_elevation_gain:
        track.total_elevation_gain = calculate_elevation_gain(
            p.elevation for p in track.points
        )

    if with_times:
        start, end = time_bounds(track.points)
        track.start_time = start
        track.end_time = end
        track.total_time = total_seconds(start, end)

    return track
