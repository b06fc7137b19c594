"""
Tests for Strava activities.csv reading and track enrichment.
"""

import pytest

from trackmap.features.strava import (
    enrich_track,
    enrich_tracks,
    matching_activities,
    parse_duration,
    read_activities,
    read_activities_file,
    resolve_columns,
)
from trackmap.features.tracks.exceptions import FormatError
from trackmap.features.tracks.models import Track, TrackPoint
from trackmap.shared.constants import StravaColumn


# =============================================================================
# Test Data
# =============================================================================

ENGLISH_CSV = (
    "Activity ID,Activity Date,Activity Name,Activity Type,Elapsed Time,Activity Gear,Filename\n"
    '1,"Jun 15, 2021",Morning Ride,Ride,3600,Canyon,activities/1234.gpx.gz\n'
    '2,"Jun 15, 2021",Coffee Stop,Ride,1800,Canyon,activities/1234.gpx.gz\n'
    '3,"Jun 16, 2021",Evening Run,Run,2400,,activities/5678.fit.gz\n'
    '4,"Jun 17, 2021",Manual Entry,Walk,600,,\n'
)

RUSSIAN_CSV = (
    "ID тренировки,Название тренировки,Тип активности,Общее время,"
    "Снаряжение для физической активности,Название файла\n"
    "1,Утренний заезд,Заезд,3600,Canyon,activities/1234.gpx.gz\n"
)


def track(filename="1234.gpx.gz", **kwargs) -> Track:
    return Track(name="Original", points=(TrackPoint(1.0, 2.0),), filename=filename, **kwargs)


# =============================================================================
# Test CSV Reading
# =============================================================================

class TestReadActivities:
    """Tests for read_activities and resolve_columns."""

    def test_rows(self):
        rows = read_activities(ENGLISH_CSV)
        assert len(rows) == 4
        assert rows[0]["Activity Name"] == "Morning Ride"
        assert rows[0]["Activity Date"] == "Jun 15, 2021"

    def test_bom(self):
        assert read_activities("\ufeff" + ENGLISH_CSV)[0]["Activity ID"] == "1"

    def test_english_columns(self):
        columns = resolve_columns(list(read_activities(ENGLISH_CSV)[0].keys()))
        assert columns[StravaColumn.FILENAME] == "Filename"
        assert columns[StravaColumn.EQUIPMENT] == "Activity Gear"
        assert columns[StravaColumn.DURATION] == "Elapsed Time"

    def test_russian_columns(self):
        columns = resolve_columns(list(read_activities(RUSSIAN_CSV)[0].keys()))
        assert columns[StravaColumn.FILENAME] == "Название файла"
        assert columns[StravaColumn.ACTIVITY_NAME] == "Название тренировки"

    def test_missing_columns_are_none(self):
        columns = resolve_columns(["Filename"])
        assert columns[StravaColumn.FILENAME] == "Filename"
        assert columns[StravaColumn.ACTIVITY_TYPE] is None

    def test_read_file(self, tmp_path):
        path = tmp_path / "activities.csv"
        path.write_text(RUSSIAN_CSV, encoding="utf-8-sig")
        rows = read_activities_file(path)
        assert rows[0]["Название тренировки"] == "Утренний заезд"


class TestParseDuration:
    """Tests for parse_duration function."""

    @pytest.mark.parametrize("value, expected", [
        ("3600", 3600.0),
        ("3600.5", 3600.5),
        ("3 600,5", 3600.5),
        ("3\xa0600", 3600.0),
        ("", 0.0),
        (None, 0.0),
        ("n/a", 0.0),
    ])
    def test_values(self, value, expected):
        assert parse_duration(value) == expected


# =============================================================================
# Test Enrichment
# =============================================================================

class TestEnrichTrack:
    """Tests for matching and enrich_track."""

    def test_two_matches(self):
        """Names are joined, times summed, gear and type from the first row."""
        enriched = enrich_track(track(), read_activities(ENGLISH_CSV))
        assert enriched.name == "Morning Ride + Coffee Stop"
        assert enriched.total_time == 5400.0
        assert enriched.equipment == "Canyon"
        assert enriched.activity_type == "Ride"

    def test_original_untouched(self):
        original = track(total_time=100.0)
        enriched = enrich_track(original, read_activities(ENGLISH_CSV))
        assert enriched is not original
        assert original.name == "Original"
        assert original.total_time == 100.0
        assert enriched.points == original.points

    def test_no_match_returns_same_track(self):
        original = track("9999.gpx")
        assert enrich_track(original, read_activities(ENGLISH_CSV)) is original

    def test_match_by_src(self):
        """A merged GPX keeps the source file in <src>."""
        original = track("all.gpx", src="5678.fit.gz")
        enriched = enrich_track(original, read_activities(ENGLISH_CSV))
        assert enriched.name == "Evening Run"
        assert enriched.total_time == 2400.0
        assert enriched.equipment is None

    def test_track_without_filename_never_matches(self):
        rows = read_activities(ENGLISH_CSV)
        assert matching_activities(track(""), rows, "Filename") == []

    def test_russian_export(self):
        enriched = enrich_track(track(), read_activities(RUSSIAN_CSV))
        assert enriched.name == "Утренний заезд"
        assert enriched.activity_type == "Заезд"
        assert enriched.total_time == 3600.0

    def test_missing_filename_column(self):
        rows = read_activities("Activity Name,Elapsed Time\nRide,60\n")
        with pytest.raises(FormatError, match="Strava CSV"):
            enrich_track(track(), rows)

    def test_no_rows(self):
        original = track()
        assert enrich_track(original, []) is original


class TestEnrichTracks:
    """Tests for enrich_tracks function."""

    def test_order_and_passthrough(self):
        tracks = [track("5678.fit.gz"), track("none.gpx"), track("1234.gpx.gz")]
        enriched = enrich_tracks(tracks, read_activities(ENGLISH_CSV))
        assert [t.name for t in enriched] == [
            "Evening Run", "Original", "Morning Ride + Coffee Stop",
        ]
        assert enriched[1] is tracks[1]
        assert enriched is not tracks

    def test_no_rows(self):
        tracks = [track()]
        assert enrich_tracks(tracks, []) == tracks
