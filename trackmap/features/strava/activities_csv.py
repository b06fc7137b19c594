"""
Strava activities.csv reader.

The bulk export ("Download your data") ships an activities.csv with one
row per activity; its header is localized to the account language.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

from trackmap.features.tracks.exceptions import FormatError, ParseError
from trackmap.shared.constants import STRAVA_COLUMN_ALIASES, StravaColumn

logger = logging.getLogger(__name__)

ActivityRow = dict[str, str]


def read_activities(text: str) -> list[ActivityRow]:
    """
    Parse activities.csv text into header-keyed rows.

    Raises:
        ParseError: If the CSV is malformed
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    try:
        rows = [dict(row) for row in reader]
    except csv.Error as e:
        logger.error(f"Failed to parse Strava CSV: {e}")
        raise ParseError(f"Invalid CSV file: {e}") from e

    logger.info(f"Read {len(rows)} Strava activities")
    return rows


def read_activities_file(path: Union[str, Path]) -> list[ActivityRow]:
    """Read a local activities.csv."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path.name} is not UTF-8 text: {e}") from e
    return read_activities(text)


def resolve_columns(header: Sequence[str]) -> dict[StravaColumn, Optional[str]]:
    """
    Map logical columns to the header names present in this export.

    Columns the export doesn't have map to None.
    """
    present = set(header)
    resolved: dict[StravaColumn, Optional[str]] = {}
    for column, aliases in STRAVA_COLUMN_ALIASES.items():
        resolved[column] = next((a for a in aliases if a in present), None)
    return resolved


def require_filename_column(columns: Mapping[StravaColumn, Optional[str]]) -> str:
    """
    The file name column, without which nothing can be matched.

    Raises:
        FormatError: If the export has no file name column
    """
    name = columns.get(StravaColumn.FILENAME)
    if name is None:
        logger.warning(f"Strava CSV has no file name column: {dict(columns)}")
        raise FormatError("Unexpected Strava CSV format.")
    return name


def parse_duration(value: Optional[str]) -> float:
    """
    Elapsed time cell in seconds; empty or unparsable cells count as 0.

    Example:
        >>> parse_duration("3 600,5")
        3600.5
    """
    if not value:
        return 0.0
    text = value.strip().replace("\xa0", "").replace(" ", "").replace(",", ".")
    try:
        return float(text)
    except ValueError:
        logger.debug(f"Unparsable duration: {value!r}")
        return 0.0
