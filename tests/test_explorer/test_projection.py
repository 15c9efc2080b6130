"""Tests for re-projecting a resolved instant into zones and formats."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from date_explorer.explorer.formatting import relative_phrase
from date_explorer.explorer.projection import (
    build_view,
    iso8601,
    offset_difference,
    unix_seconds,
    zoned_fields,
)
from date_explorer.explorer.resolver import ResolvedInstant
from date_explorer.timezone_utils import offset_string, whole_hours

NEW_YEAR_NOON_NY = datetime(2024, 1, 1, 17, 0, 0, tzinfo=timezone.utc)


class TestZonedFields:
    def test_new_york_fields(self) -> None:
        fields = zoned_fields(NEW_YEAR_NOON_NY, "America/New_York")
        assert (fields.year, fields.month, fields.day) == (2024, 1, 1)
        assert fields.month_name == "January"
        assert fields.weekday == "Monday"
        assert fields.hour24 == 12
        assert fields.hour12 == 12
        assert fields.meridiem == "PM"
        assert fields.offset == "-05:00"
        assert fields.abbreviation == "EST"

    def test_midnight_is_twelve_am(self) -> None:
        fields = zoned_fields(datetime(2024, 1, 1, tzinfo=timezone.utc), "UTC")
        assert fields.hour12 == 12
        assert fields.meridiem == "AM"
        assert fields.offset == "+00:00"

    def test_milliseconds(self) -> None:
        instant = datetime(2024, 1, 1, 0, 0, 1, 987654, tzinfo=timezone.utc)
        assert zoned_fields(instant, "UTC").millisecond == 987


class TestOffsets:
    @pytest.mark.parametrize(
        "offset,hours",
        [("+05:30", 5), ("-03:30", -3), ("-00:30", 0), ("+14:00", 14), ("+00:00", 0)],
    )
    def test_whole_hours_truncates(self, offset: str, hours: int) -> None:
        assert whole_hours(offset) == hours

    def test_offset_string_negative_half_hour(self) -> None:
        dt = NEW_YEAR_NOON_NY.astimezone(timezone(timedelta(hours=-3, minutes=-30)))
        assert offset_string(dt) == "-03:30"

    def test_remote_ahead_of_source(self) -> None:
        diff = offset_difference(NEW_YEAR_NOON_NY, "UTC", "Asia/Kolkata")
        assert diff.hours == 5
        assert diff.magnitude == 5
        assert diff.direction == "ahead"

    def test_remote_behind_source(self) -> None:
        diff = offset_difference(NEW_YEAR_NOON_NY, "Asia/Tokyo", "America/New_York")
        assert diff.hours == -14
        assert diff.direction == "behind"

    def test_same_offset(self) -> None:
        diff = offset_difference(NEW_YEAR_NOON_NY, "Europe/Paris", "Europe/Berlin")
        assert diff.hours == 0
        assert diff.direction == "same"

    def test_depends_on_instant(self) -> None:
        summer = datetime(2024, 7, 1, tzinfo=timezone.utc)
        assert offset_difference(NEW_YEAR_NOON_NY, "UTC", "Europe/London").hours == 0
        assert offset_difference(summer, "UTC", "Europe/London").hours == 1


class TestFormats:
    def test_iso8601_millisecond_precision(self) -> None:
        instant = datetime(2024, 1, 1, 17, 0, 0, 250999, tzinfo=timezone.utc)
        assert iso8601(instant) == "2024-01-01T17:00:00.250Z"

    def test_iso8601_converts_to_utc(self) -> None:
        instant = NEW_YEAR_NOON_NY.astimezone(timezone(timedelta(hours=2)))
        assert iso8601(instant) == "2024-01-01T17:00:00.000Z"

    def test_unix_seconds_floors(self) -> None:
        instant = datetime(1970, 1, 1, 0, 0, 1, 750000, tzinfo=timezone.utc)
        assert unix_seconds(instant) == 1
        assert unix_seconds(NEW_YEAR_NOON_NY) == 1704128400


class TestRelativePhrase:
    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(seconds=10), "in a few seconds"),
            (timedelta(seconds=-60), "a minute ago"),
            (timedelta(minutes=20), "in 20 minutes"),
            (timedelta(minutes=-60), "an hour ago"),
            (timedelta(hours=3), "in 3 hours"),
            (timedelta(hours=-3), "3 hours ago"),
            (timedelta(hours=30), "in a day"),
            (timedelta(days=-5), "5 days ago"),
            (timedelta(days=40), "in a month"),
            (timedelta(days=-120), "4 months ago"),
            (timedelta(days=400), "in a year"),
            (timedelta(days=-3 * 365), "3 years ago"),
        ],
    )
    def test_phrases(self, delta: timedelta, expected: str) -> None:
        assert relative_phrase(NEW_YEAR_NOON_NY + delta, NEW_YEAR_NOON_NY) == expected


class TestBuildView:
    def test_all_representations(self) -> None:
        resolved = ResolvedInstant(instant=NEW_YEAR_NOON_NY, source_zone="America/New_York")
        now = NEW_YEAR_NOON_NY - timedelta(hours=2)
        view = build_view(resolved, "Asia/Kolkata", now)

        assert view.local.hour24 == 12
        assert view.utc.hour24 == 17
        assert view.remote.hour24 == 22
        assert view.remote.minute == 30
        assert view.difference.hours == 10
        assert view.iso8601 == "2024-01-01T17:00:00.000Z"
        assert view.unix == 1704128400
        assert view.relative == "in 2 hours"

    def test_to_dict(self) -> None:
        resolved = ResolvedInstant(instant=NEW_YEAR_NOON_NY, source_zone="UTC")
        data = build_view(resolved, "Asia/Kolkata", NEW_YEAR_NOON_NY).to_dict()
        assert data["difference"] == {"hours": 5, "magnitude": 5, "direction": "ahead"}
        assert data["utc"]["zone"] == "UTC"
        assert data["remote"]["offset"] == "+05:30"
