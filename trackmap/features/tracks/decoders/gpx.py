"""
GPX decoder.

See https://www.topografix.com/gpx/1/1 for the schema. Each <trkseg>
becomes its own Track (sharing the <trk> metadata) and each <rte> becomes
one Track with bare coordinates.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Iterator

from trackmap.shared.constants import (
    DEFAULT_TRACK_NAME,
    LINK_TYPE_ELEVATION_CHART,
    LINK_TYPE_TRACK_ON_WEB,
)
from trackmap.shared.elevation import parse_elevation

from ..exceptions import FormatError
from ..models import Track, TrackPoint
from ..normalizer import build_track, parse_timestamp
from ..xml_tree import child_text, children, describe, float_attribute

logger = logging.getLogger(__name__)


def decode_gpx(
    root: ET.Element,
    source_name: str = "",
    filename: str | None = None,
) -> Iterator[Track]:
    """
    Decode a parsed <gpx> document.

    Args:
        root: The <gpx> root element
        source_name: Name of the file the document came from
        filename: Value for Track.filename (defaults to source_name)

    Returns:
        Lazy iterator of Tracks: one per <trkseg>, then one per <rte>

    Raises:
        FormatError: If the document has neither tracks nor routes
    """
    trks = list(children(root, "trk"))
    rtes = list(children(root, "rte"))
    if not trks and not rtes:
        logger.warning(f"GPX file has neither tracks nor routes: {describe(root)}")
        raise FormatError("Unexpected gpx file format.")

    return _iter_tracks(trks, rtes, filename if filename is not None else source_name)


def _iter_tracks(
    trks: list[ET.Element],
    rtes: list[ET.Element],
    filename: str,
) -> Iterator[Track]:
    for trk in trks:
        metadata = _track_metadata(trk)
        for trkseg in children(trk, "trkseg"):
            points = [p for p in map(_track_point, children(trkseg, "trkpt")) if p]
            track = build_track(filename=filename, points=points, **metadata)
            logger.debug(f"GPX segment '{track.name}': {len(points)} points")
            yield track

    for rte in rtes:
        yield _route(rte, filename)


def _track_metadata(trk: ET.Element) -> dict:
    """Name, src, desc and typed links shared by every segment of a <trk>."""
    external_url = None
    image_url = None
    for link in children(trk, "link"):
        link_type = child_text(link, "type") or link.get("type") or ""
        if LINK_TYPE_TRACK_ON_WEB in link_type:
            external_url = link.get("href")
        if LINK_TYPE_ELEVATION_CHART in link_type:
            image_url = link.get("href")

    return {
        "name": child_text(trk, "name") or DEFAULT_TRACK_NAME,
        "src": child_text(trk, "src"),
        "description": child_text(trk, "desc"),
        "external_url": external_url,
        "image_url": image_url,
    }


def _track_point(trkpt: ET.Element) -> TrackPoint | None:
    """A <trkpt>, or None when lat/lon are missing or not numbers."""
    lat = float_attribute(trkpt, "lat")
    lon = float_attribute(trkpt, "lon")
    if lat is None or lon is None:
        return None

    return TrackPoint(
        latitude=lat,
        longitude=lon,
        elevation=parse_elevation(child_text(trkpt, "ele")),
        time=parse_timestamp(child_text(trkpt, "time"), assume_utc=True),
    )


def _route(rte: ET.Element, filename: str) -> Track:
    points = []
    for rtept in children(rte, "rtept"):
        lat = float_attribute(rtept, "lat")
        lon = float_attribute(rtept, "lon")
        if lat is None or lon is None:
            continue
        points.append(TrackPoint(latitude=lat, longitude=lon))

    track = build_track(
        child_text(rte, "name") or DEFAULT_TRACK_NAME,
        points,
        filename=filename,
        with_elevation_gain=False,
        with_times=False,
        with_name_convention=False,
    )
    logger.debug(f"GPX route '{track.name}': {len(points)} points")
    return track
