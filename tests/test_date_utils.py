from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from app.application.utils.date_utils import (
    format_date,
    format_time_in_zone,
    parse_instant,
    to_iso,
    utc_midnight,
)


def test_parse_date_only_is_utc_midnight():
    assert parse_instant("2025-01-28") == datetime(2025, 1, 28, tzinfo=timezone.utc)


def test_parse_converts_offsets_to_utc():
    assert parse_instant("2025-01-28T09:00:00-06:00") == datetime(2025, 1, 28, 15, tzinfo=timezone.utc)
    assert parse_instant("2025-01-28T15:00:00Z") == datetime(2025, 1, 28, 15, tzinfo=timezone.utc)
    assert parse_instant("2025-01-28T15:00:00.000Z") == datetime(2025, 1, 28, 15, tzinfo=timezone.utc)


def test_parse_naive_datetime_is_utc():
    assert parse_instant("2025-01-28T15:00:00") == datetime(2025, 1, 28, 15, tzinfo=timezone.utc)


def test_parse_rejects_garbage():
    for value in ("", "   ", "tomorrow", "2025-13-40"):
        with pytest.raises(ValueError):
            parse_instant(value)


def test_to_iso_uses_milliseconds_and_z():
    assert to_iso(datetime(2025, 1, 28, 15, 0, tzinfo=timezone.utc)) == "2025-01-28T15:00:00.000Z"
    assert to_iso(parse_instant("2025-01-28T09:30:00-06:00")) == "2025-01-28T15:30:00.000Z"


def test_utc_midnight():
    value = datetime(2025, 1, 28, 23, 59, tzinfo=timezone.utc)
    assert utc_midnight(value) == datetime(2025, 1, 28, tzinfo=timezone.utc)


def test_format_time_in_zone():
    assert format_time_in_zone("2025-01-28T15:00:00.000Z", "America/Chicago") == "9:00 AM"
    assert format_time_in_zone("2025-01-28T22:30:00Z", "America/Chicago") == "4:30 PM"
    assert format_time_in_zone("2025-01-28T12:00:00Z", "Not/AZone") == "12:00 PM"


def test_format_date():
    assert format_date(date(2025, 1, 28)) == "Tuesday, January 28, 2025"
