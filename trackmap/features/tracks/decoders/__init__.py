"""
Format decoders.

Usage:
    from trackmap.features.tracks.decoders import decode_xml, decode_fit

GPX and TCX share the XML path: the document root decides which
decoder runs, not the file extension.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..exceptions import FormatError
from ..models import Track
from ..xml_tree import describe, local_name, parse_xml
from .fit import decode_fit, read_fit_records
from .gpx import decode_gpx
from .tcx import decode_tcx

logger = logging.getLogger(__name__)


def decode_xml(text: str, source_name: str = "", filename: str | None = None) -> Iterator[Track]:
    """
    Decode a GPX or TCX document.

    Raises:
        ParseError: If the text is not well-formed XML
        FormatError: If the root is neither <gpx> nor <TrainingCenterDatabase>,
            or the expected container is missing
    """
    root = parse_xml(text)
    root_name = local_name(root)

    if root_name == "gpx":
        return decode_gpx(root, source_name, filename)
    if root_name == "TrainingCenterDatabase":
        return decode_tcx(root, source_name, filename)

    logger.warning(f"Unknown XML root <{root_name}>: {describe(root)}")
    raise FormatError("Invalid file type.")


__all__ = [
    "decode_xml",
    "decode_gpx",
    "decode_tcx",
    "decode_fit",
    "read_fit_records",
]
