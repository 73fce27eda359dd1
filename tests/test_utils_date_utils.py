"""
Tests for release date helpers.
"""

import pytest
import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from herald.utils.date_utils import (
    format_release_date,
    normalize_release_date,
    parse_release_date,
    utc_timestamp,
)


class TestNormalizeReleaseDate:
    """Tests for normalize_release_date."""

    @pytest.mark.parametrize("value,precision,expected", [
        ("2024-03-09", "day", "2024-03-09"),
        ("2024-03", "month", "2024-03-01"),
        ("2024", "year", "2024-01-01"),
        ("2024-03-09", "unknown", "2024-03-09"),
    ])
    def test_normalize(self, value, precision, expected):
        assert normalize_release_date(value, precision) == expected

    def test_normalized_dates_sort_chronologically(self):
        """Test that padded dates of mixed precision compare as strings."""
        assert normalize_release_date("2024-01", "month") < normalize_release_date("2024-01-15", "day")
        assert normalize_release_date("2023", "year") < normalize_release_date("2023-02", "month")


class TestParseReleaseDate:
    """Tests for parse_release_date."""

    def test_parse(self):
        assert parse_release_date("2024-03", "month") == date(2024, 3, 1)

    def test_parse_malformed(self):
        assert parse_release_date("someday", "day") is None
        assert parse_release_date("2024-13", "month") is None


class TestFormatReleaseDate:
    """Tests for format_release_date."""

    @pytest.mark.parametrize("value,precision,expected", [
        ("2024", "year", "2024"),
        ("2024-03", "month", "Mar 2024"),
        ("2024-03-01", "day", "Mar 1, 2024"),
        ("2023-12-25", None, "Dec 25, 2023"),
        ("not a date", "day", "not a date"),
        ("", "day", ""),
    ])
    def test_format(self, value, precision, expected):
        assert format_release_date(value, precision) == expected


class TestUtcTimestamp:
    """Tests for utc_timestamp."""

    def test_milliseconds_and_z_suffix(self, fixed_now):
        assert utc_timestamp(fixed_now) == "2024-03-02T09:30:15.123Z"

    def test_converts_to_utc(self):
        """Test that offset-aware times are converted, not relabelled."""
        plus_two = timezone(timedelta(hours=2))
        assert utc_timestamp(datetime(2024, 3, 2, 11, 0, 0, tzinfo=plus_two)) == "2024-03-02T09:00:00.000Z"

    def test_naive_is_treated_as_utc(self):
        assert utc_timestamp(datetime(2024, 1, 1, 0, 0, 0, 5000)) == "2024-01-01T00:00:00.005Z"

    def test_default_is_now(self):
        """Test the shape of a timestamp taken from the clock."""
        value = utc_timestamp()
        assert value.endswith("Z")
        assert len(value) == len("2024-03-02T09:30:15.123Z")
        datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ")
