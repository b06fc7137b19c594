"""
TCX (Garmin Training Center) decoder.

Activities -> Activity -> Lap -> Track -> Trackpoint. Every Lap becomes
its own Track named after the source file.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Iterator

from trackmap.shared.elevation import parse_elevation

from ..exceptions import FormatError
from ..models import Track, TrackPoint
from ..normalizer import build_track, parse_timestamp
from ..xml_tree import child, child_text, children, describe, to_float

logger = logging.getLogger(__name__)


def decode_tcx(
    root: ET.Element,
    source_name: str = "",
    filename: str | None = None,
) -> Iterator[Track]:
    """
    Decode a parsed <TrainingCenterDatabase> document.

    Timestamps without an offset are read as local time, unlike GPX and
    FIT which read them as UTC. Elevation gain is not accumulated for TCX.

    Raises:
        FormatError: If the document has no <Activities>
    """
    activities = child(root, "Activities")
    if activities is None:
        logger.warning(f"TCX file has no activities: {describe(root)}")
        raise FormatError("Unexpected tcx file format.")

    return _iter_laps(activities, source_name, filename if filename is not None else source_name)


def _iter_laps(activities: ET.Element, name: str, filename: str) -> Iterator[Track]:
    for activity in children(activities, "Activity"):
        for lap in children(activity, "Lap"):
            # A lap carries a single <Track>
            lap_track = child(lap, "Track")
            trackpoints = children(lap_track, "Trackpoint") if lap_track is not None else ()
            points = [p for p in map(_trackpoint, trackpoints) if p]

            track = build_track(
                name,
                points,
                filename=filename,
                with_elevation_gain=False,
                with_name_convention=False,
            )
            logger.debug(f"TCX lap of '{name}': {len(points)} points")
            yield track


def _trackpoint(trkpt: ET.Element) -> TrackPoint | None:
    """A <Trackpoint> with a usable <Position>, else None."""
    position = child(trkpt, "Position")
    if position is None:
        return None
    lat = to_float(child_text(position, "LatitudeDegrees"))
    lon = to_float(child_text(position, "LongitudeDegrees"))
    if lat is None or lon is None:
        return None

    elevation = child_text(trkpt, "AltitudeMeters") or child_text(trkpt, "ElevationMeters")
    return TrackPoint(
        latitude=lat,
        longitude=lon,
        elevation=parse_elevation(elevation),
        time=parse_timestamp(child_text(trkpt, "Time"), assume_utc=False),
    )
