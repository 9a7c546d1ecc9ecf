"""
Unit tests for requests-log timestamp formatting.
"""

from datetime import timezone

import pytest

from app.dashboard.formatting import format_timestamp, parse_timestamp, resolve_timezone


@pytest.mark.unit
class TestParseTimestamp:
    def test_iso_with_z_suffix(self):
        dt = parse_timestamp("2026-10-18T11:05:03Z")
        assert dt.tzinfo is not None
        assert dt.astimezone(timezone.utc).hour == 11

    def test_naive_iso_defaults_to_utc(self):
        assert parse_timestamp("2026-10-18T11:05:03").tzinfo == timezone.utc

    def test_naive_iso_uses_local_timezone(self):
        tz = resolve_timezone("Asia/Jerusalem")
        dt = parse_timestamp("2026-10-18T11:05:03", tz)

        assert dt.tzinfo is tz
        assert dt.astimezone(timezone.utc).hour == 8

    def test_date_only_is_utc(self):
        tz = resolve_timezone("Asia/Jerusalem")
        assert parse_timestamp("2026-10-18", tz).tzinfo == timezone.utc

    def test_epoch_millis(self):
        dt = parse_timestamp(1_700_000_000_000)
        assert dt.year == 2023

    @pytest.mark.parametrize("value", [None, "", "yesterday", True])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None


@pytest.mark.unit
class TestFormatTimestamp:
    ts = "2026-01-05T07:03:04Z"

    def test_he_il(self):
        assert format_timestamp(self.ts, "he-IL", "Asia/Jerusalem") == "5.1.2026, 9:03:04"

    def test_en_gb(self):
        assert format_timestamp(self.ts, "en-GB", "UTC") == "05/01/2026, 07:03:04"

    def test_en_us_afternoon(self):
        assert format_timestamp("2026-10-18T14:05:03Z", "en-US", "UTC") == "10/18/2026, 2:05:03 PM"

    def test_unknown_locale_falls_back_to_hebrew(self):
        assert format_timestamp(self.ts, "fr-FR", "UTC") == "5.1.2026, 7:03:04"

    def test_unknown_timezone_falls_back_to_utc(self):
        assert format_timestamp(self.ts, "he-IL", "Nowhere/Special") == "5.1.2026, 7:03:04"

    def test_naive_date_time_shown_as_written(self):
        assert format_timestamp("2026-10-18T11:05:03", "he-IL", "Asia/Jerusalem") == "18.10.2026, 11:05:03"

    def test_date_only_converted_from_utc(self):
        assert format_timestamp("2026-10-18", "he-IL", "Asia/Jerusalem") == "18.10.2026, 3:00:00"

    def test_raw_value_when_unparseable(self):
        assert format_timestamp("soon") == "soon"
        assert format_timestamp(None) == ""
