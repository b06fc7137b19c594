"""
Namespace-agnostic helpers over xml.etree.ElementTree.

GPX 1.0, GPX 1.1 and TCX v2 files declare different default namespaces;
the decoders only care about local tag names, so every lookup here
compares local names.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterator

from .exceptions import ParseError


def parse_xml(text: str) -> ET.Element:
    """Parse an XML document and return its root element."""
    try:
        return ET.fromstring(text.lstrip("\ufeff"))  # strip BOM if present
    except ET.ParseError as e:
        raise ParseError(f"Malformed XML: {e}") from e


def local_name(element: ET.Element) -> str:
    """'{http://www.topografix.com/GPX/1/1}trkpt' -> 'trkpt'."""
    tag = element.tag
    if not isinstance(tag, str):  # comments, processing instructions
        return ""
    return tag.rsplit("}", 1)[-1]


def children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    """Direct children with the given local name, in document order."""
    for child in element:
        if local_name(child) == name:
            yield child


def child(element: ET.Element, name: str) -> ET.Element | None:
    """First direct child with the given local name."""
    return next(children(element, name), None)


def child_text(element: ET.Element, name: str) -> str | None:
    """Stripped text of the first child with the given local name."""
    node = child(element, name)
    if node is None or node.text is None:
        return None
    text = node.text.strip()
    return text or None


def float_attribute(element: ET.Element, name: str) -> float | None:
    """Attribute parsed as float, None when absent or not a number."""
    return to_float(element.get(name))


def to_float(value) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN
        return None
    return number


def describe(element: ET.Element, limit: int = 500) -> str:
    """Short dump of an element for log messages."""
    dump = ET.tostring(element, encoding="unicode")
    if len(dump) > limit:
        return dump[:limit] + "..."
    return dump
