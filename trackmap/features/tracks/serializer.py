"""
GPX Serializer

Merges tracks into a single GPX 1.1 document. Only coordinates and
timestamps are written per point; elevation is dropped.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union
from xml.sax.saxutils import escape

from trackmap.config import settings
from trackmap.shared.constants import GPX_NAMESPACE, GPX_SCHEMA_LOCATION
from trackmap.shared.formatters import format_duration, format_gpx_time

from .models import Track

logger = logging.getLogger(__name__)

_QUOTE_ENTITIES = {"'": "&apos;", '"': "&quot;"}


def escape_xml(text: Optional[str]) -> str:
    """Escape < > & ' " for use in XML text and attribute values."""
    if text is None:
        return ""
    return escape(str(text), _QUOTE_ENTITIES)


def track_description(track: Track) -> str:
    """
    Description written to <desc>: activity type/equipment and duration.

    Example:
        '<br>Ride: Canyon<br>Длительность: 1:30'
    """
    desc = ""
    if track.activity_type:
        desc += "<br>" + track.activity_type
        if track.equipment:
            desc += ": " + track.equipment
    if track.total_time:
        desc += "<br>Длительность: " + format_duration(track.total_time)
    return desc


def serialize_gpx(
    tracks: Sequence[Track],
    creator: Optional[str] = None,
    author: Optional[str] = None,
) -> str:
    """
    Render tracks as one GPX 1.1 document.

    Args:
        tracks: Tracks to merge, one <trk> each
        creator: GPX creator attribute (defaults to settings.gpx_creator)
        author: Metadata author name (defaults to settings.gpx_author)

    Returns:
        The GPX document as text
    """
    creator = creator or settings.gpx_creator
    author = author or settings.gpx_author
    names = ", ".join(escape_xml(t.name) for t in tracks)

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<gpx creator="{escape_xml(creator)}" '
        'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
        f'xsi:schemaLocation="{GPX_SCHEMA_LOCATION}" '
        f'version="1.1" xmlns="{GPX_NAMESPACE}">',
        '    <metadata>',
        f'        <name>Merged {len(tracks)} tracks</name>',
        f'        <desc>Merged tracks: {names}</desc>',
        '        <author>',
        f'            <name>{escape_xml(author)}</name>',
        '        </author>',
        '    </metadata>',
    ]

    for track in tracks:
        lines.append('    <trk>')
        lines.append(f'        <name>{escape_xml(track.name)}</name>')
        lines.append(f'        <src>{escape_xml(track.filename)}</src>')

        desc = track_description(track)
        if desc:
            lines.append(f'        <desc>{escape_xml(desc)}</desc>')

        lines.append('        <trkseg>')
        for point in track.points:
            lines.append(f'            <trkpt lat="{point.latitude!r}" lon="{point.longitude!r}">')
            if point.time is not None:
                lines.append(f'                <time>{format_gpx_time(point.time)}</time>')
            lines.append('            </trkpt>')
        lines.append('        </trkseg>')
        lines.append('    </trk>')

    lines.append('</gpx>')

    logger.info(f"Serialized {len(tracks)} track(s) to GPX")
    return "\n".join(lines) + "\n"


def write_gpx(tracks: Sequence[Track], path: Union[str, Path, None] = None) -> Path:
    """Write the merged GPX document; defaults to settings.export_filename."""
    path = Path(path) if path is not None else Path(settings.export_filename)
    path.write_text(serialize_gpx(tracks), encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path
