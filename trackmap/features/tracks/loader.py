"""
Track Loader

Reads local files or fetches URLs, undoes gzip, and hands the content to
the decoder for its extension. Several sources can be loaded together;
one failing source never aborts the others.
"""

import asyncio
import gzip
import logging
import zlib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union
from urllib.parse import urlparse

import httpx

from trackmap.config import settings
from trackmap.shared.constants import (
    GZIP_SUFFIX,
    IMAGE_EXTENSIONS,
    STRAVA_CSV_EXTENSIONS,
    XML_FORMATS,
    SourceKind,
    TrackFormat,
)

from .decoders import decode_fit, decode_xml, read_fit_records
from .exceptions import ParseError, UnsupportedFormatError
from .models import Track

logger = logging.getLogger(__name__)

Source = Union[str, Path]


# =============================================================================
# Names and formats
# =============================================================================

def split_source_name(name: str) -> tuple[str, str, bool]:
    """
    Split a file name into (name without .gz, extension, gzipped).

    Example:
        >>> split_source_name("Morning-Ride.GPX.gz")
        ('Morning-Ride.GPX', 'gpx', True)
    """
    gzipped = name.lower().endswith(GZIP_SUFFIX)
    stripped = name[:-len(GZIP_SUFFIX)] if gzipped else name
    extension = stripped.rsplit(".", 1)[-1].lower() if "." in stripped else ""
    return stripped, extension, gzipped


def url_file_name(url: str) -> str:
    """Last path segment of a URL ('https://x/tracks/a.gpx?v=1' -> 'a.gpx')."""
    return urlparse(url).path.rstrip("/").rsplit("/", 1)[-1]


def is_url(source: Source) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def source_kind(name: str) -> SourceKind:
    """Route a file name to the track, Strava CSV or image pipeline."""
    _, extension, gzipped = split_source_name(name)
    if extension in {f.value for f in TrackFormat}:
        return SourceKind.TRACK
    if gzipped:
        return SourceKind.UNKNOWN
    if extension in STRAVA_CSV_EXTENSIONS:
        return SourceKind.STRAVA_CSV
    if extension in IMAGE_EXTENSIONS:
        return SourceKind.IMAGE
    return SourceKind.UNKNOWN


def track_format(name: str) -> TrackFormat:
    """
    Decoder format for a file name.

    Raises:
        UnsupportedFormatError: For anything but gpx/tcx/fit (optionally .gz)
    """
    _, extension, _ = split_source_name(name)
    try:
        return TrackFormat(extension)
    except ValueError:
        raise UnsupportedFormatError(extension) from None


# =============================================================================
# Decoding
# =============================================================================

def decompress(data: bytes) -> bytes:
    """Inflate gzip data."""
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise ParseError(f"Invalid gzip data: {e}") from e


def decode_content(content: Union[bytes, str], name: str, filename: Optional[str] = None) -> list[Track]:
    """
    Decode file content into Tracks.

    Args:
        content: Raw bytes, or text for uncompressed GPX/TCX
        name: File name, used to pick the decoder (may end in .gz)
        filename: Value for Track.filename (defaults to name)

    Raises:
        UnsupportedFormatError: Before touching the content, for unknown extensions
        ParseError: Malformed gzip, XML or FIT content
        FormatError: Content without the expected container
    """
    fmt = track_format(name)
    stripped, _, gzipped = split_source_name(name)
    filename = filename if filename is not None else name

    if gzipped:
        if isinstance(content, str):
            raise ParseError(f"Expected binary gzip content for {name}")
        content = decompress(content)

    if fmt in XML_FORMATS:
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise ParseError(f"{name} is not UTF-8 text: {e}") from e
        tracks = list(decode_xml(content, stripped, filename))
    else:
        if isinstance(content, str):
            raise ParseError(f"Expected binary FIT content for {name}")
        tracks = list(decode_fit(read_fit_records(content), stripped, filename))

    logger.info(f"Decoded {len(tracks)} track(s) from {name}")
    return tracks


# =============================================================================
# Sources
# =============================================================================

async def load_file(path: Source) -> list[Track]:
    """Read and decode a local track file."""
    path = Path(path)
    track_format(path.name)  # reject unknown extensions before reading

    data = await asyncio.to_thread(path.read_bytes)
    return decode_content(data, path.name)


async def load_url(url: str, client: Optional[httpx.AsyncClient] = None) -> list[Track]:
    """
    Fetch and decode a track file by URL.

    Tracks get the full URL as their filename.

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
    """
    name = url_file_name(url)
    fmt = track_format(name)
    _, _, gzipped = split_source_name(name)

    if client is None:
        async with _http_client() as own_client:
            response = await own_client.get(url)
    else:
        response = await client.get(url)
    response.raise_for_status()

    binary = gzipped or fmt is TrackFormat.FIT
    content = response.content if binary else response.text
    logger.info(f"Fetched {url} ({len(response.content)} bytes)")
    return decode_content(content, name, filename=url)


def _http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.http_timeout_seconds,
        follow_redirects=True,
    )


# =============================================================================
# Concurrent loading
# =============================================================================

@dataclass
class LoadResult:
    """Outcome of loading one source: tracks, or the error that stopped it."""

    source: str
    tracks: list[Track] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def load_source(source: Source, client: Optional[httpx.AsyncClient] = None) -> list[Track]:
    """Load a URL or a local path."""
    if is_url(source):
        return await load_url(str(source), client)
    return await load_file(source)


async def load_many(
    sources: Iterable[Source],
    client: Optional[httpx.AsyncClient] = None,
) -> list[LoadResult]:
    """
    Load several sources concurrently and wait for all of them.

    Results come back in input order. A failing source yields a
    LoadResult with `error` set; the others are unaffected.
    """
    sources = list(sources)
    if client is None and any(is_url(s) for s in sources):
        async with _http_client() as own_client:
            return await _gather(sources, own_client)
    return await _gather(sources, client)


async def _gather(sources: list[Source], client: Optional[httpx.AsyncClient]) -> list[LoadResult]:
    return list(await asyncio.gather(*(_settle(s, client) for s in sources)))


async def _settle(source: Source, client: Optional[httpx.AsyncClient]) -> LoadResult:
    try:
        tracks = await load_source(source, client)
    except Exception as e:
        logger.error(f"Failed to load {source}: {e}")
        return LoadResult(source=str(source), error=e)
    return LoadResult(source=str(source), tracks=tracks)


def collect_tracks(results: Iterable[LoadResult]) -> list[Track]:
    """Append the tracks of every successful load, in order."""
    tracks: list[Track] = []
    for result in results:
        if result.ok:
            tracks.extend(result.tracks)
    return tracks
