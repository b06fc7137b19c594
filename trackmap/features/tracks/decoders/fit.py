"""
FIT decoder.

The binary structure (headers, definitions, CRC) is handled by fitparse;
this module only turns its `record` messages into a single Track.
"""

from __future__ import annotations

import io
import logging
from datetime import datetime, timezone
from typing import Any, Iterator, Mapping, Sequence

from fitparse import FitFile, FitParseError

from trackmap.shared.elevation import parse_elevation
from trackmap.shared.geo import semicircles_to_degrees

from ..exceptions import FormatError, ParseError
from ..models import Track, TrackPoint
from ..normalizer import build_track, parse_timestamp

logger = logging.getLogger(__name__)


def read_fit_records(data: bytes) -> list[dict[str, Any]]:
    """
    Extract `record` messages from a FIT file.

    Positions come back in degrees, altitude in meters (falling back to
    enhanced_altitude), timestamp as fitparse reports it.

    Raises:
        ParseError: If fitparse can't decode the binary
    """
    try:
        ff = FitFile(io.BytesIO(data))
        ff.parse()
        messages = list(ff.get_messages("record"))
    except FitParseError as e:
        logger.error(f"Failed to parse FIT: {e}")
        raise ParseError(f"Invalid FIT file: {e}") from e

    records = []
    for message in messages:
        fields = {f.name: f.value for f in message}
        altitude = fields.get("altitude")
        if altitude is None:
            altitude = fields.get("enhanced_altitude")
        records.append({
            "position_lat": semicircles_to_degrees(fields.get("position_lat")),
            "position_long": semicircles_to_degrees(fields.get("position_long")),
            "altitude": altitude,
            "timestamp": fields.get("timestamp"),
        })
    return records


def decode_fit(
    records: Sequence[Mapping[str, Any]],
    source_name: str = "",
    filename: str | None = None,
) -> Iterator[Track]:
    """
    Decode FIT records into one Track named after the source file.

    Args:
        records: Field maps with position_lat/position_long (degrees),
            altitude and timestamp
        source_name: Name of the file the records came from
        filename: Value for Track.filename (defaults to source_name)

    Raises:
        FormatError: If there are no records at all
    """
    if not records:
        logger.warning(f"FIT file has no records: {records!r}")
        raise FormatError("Unexpected FIT file format.")

    return _iter_track(records, source_name, filename if filename is not None else source_name)


def _iter_track(
    records: Sequence[Mapping[str, Any]],
    name: str,
    filename: str,
) -> Iterator[Track]:
    points = []
    for record in records:
        lat = record.get("position_lat")
        lon = record.get("position_long")
        if lat is None or lon is None:
            continue
        points.append(TrackPoint(
            latitude=float(lat),
            longitude=float(lon),
            elevation=parse_elevation(record.get("altitude")),
            time=_utc(record.get("timestamp")),
        ))

    logger.debug(f"FIT '{name}': {len(points)} of {len(records)} records positioned")
    yield build_track(name, points, filename=filename, with_name_convention=False)


def _utc(value) -> datetime | None:
    """fitparse timestamps are naive UTC datetimes."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return parse_timestamp(str(value), assume_utc=True)
