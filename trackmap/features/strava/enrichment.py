"""
Strava CSV enrichment.

Matches loaded tracks to activities.csv rows by file name and takes the
activity name, type, gear and elapsed time from the export. Tracks are
not modified; enriched copies are returned.
"""

import logging
from typing import Optional, Sequence

from trackmap.features.tracks.models import Track
from trackmap.shared.constants import StravaColumn

from .activities_csv import (
    ActivityRow,
    parse_duration,
    require_filename_column,
    resolve_columns,
)

logger = logging.getLogger(__name__)

NAME_SEPARATOR = " + "


def matching_activities(
    track: Track,
    rows: Sequence[ActivityRow],
    filename_column: str,
) -> list[ActivityRow]:
    """
    Rows whose file name cell contains the track's filename or its GPX <src>.

    Substring match: 'activities/123.gpx.gz' matches a track loaded as
    '123.gpx.gz'. Several rows may match one track.
    """
    needles = [n for n in (track.filename, track.src) if n]
    if not needles:
        return []
    return [
        row for row in rows
        if any(n in (row.get(filename_column) or "") for n in needles)
    ]


def enrich_track(
    track: Track,
    rows: Sequence[ActivityRow],
    columns: Optional[dict] = None,
) -> Track:
    """
    Enrich one track from activities.csv rows.

    Returns the same track when no row matches, otherwise a copy with:
    - name: matching activity names joined with ' + '
    - equipment, activity_type: from the first match
    - total_time: sum of the matches' elapsed time

    Raises:
        FormatError: If the rows have no file name column
    """
    if not rows:
        return track
    if columns is None:
        columns = resolve_columns(list(rows[0].keys()))
    filename_column = require_filename_column(columns)

    matches = matching_activities(track, rows, filename_column)
    if not matches:
        return track

    def cell(row: ActivityRow, column: StravaColumn) -> Optional[str]:
        header = columns.get(column)
        if header is None:
            return None
        return row.get(header) or None

    first = matches[0]
    names = [cell(row, StravaColumn.ACTIVITY_NAME) or "" for row in matches]
    total_time = sum(parse_duration(cell(row, StravaColumn.DURATION)) for row in matches)

    logger.debug(f"Track {track.filename}: {len(matches)} Strava activities matched")
    return track.with_updates(
        name=NAME_SEPARATOR.join(names),
        equipment=cell(first, StravaColumn.EQUIPMENT),
        total_time=total_time,
        activity_type=cell(first, StravaColumn.ACTIVITY_TYPE),
    )


def enrich_tracks(tracks: Sequence[Track], rows: Sequence[ActivityRow]) -> list[Track]:
    """
    Enrich every track; unmatched tracks are passed through unchanged.

    Returns:
        New list in the same order as `tracks`
    """
    if not rows:
        return list(tracks)

    columns = resolve_columns(list(rows[0].keys()))
    enriched = [enrich_track(t, rows, columns) for t in tracks]

    matched = sum(1 for old, new in zip(tracks, enriched) if new is not old)
    logger.info(f"Strava enrichment: {matched} of {len(tracks)} tracks matched")
    return enriched
