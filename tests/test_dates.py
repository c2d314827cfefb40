import locale
from datetime import datetime, timedelta, timezone

import pytest

from core.dates import normalize, parse_end_date

FALLBACK = datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)


def test_empty_string_returns_fallback():
    assert normalize("", FALLBACK) is FALLBACK
    assert normalize("   ", FALLBACK) is FALLBACK


def test_offset_qualified_round_trip():
    """A timestamp written in the full offset-qualified layout parses back to the same instant."""
    instant = datetime(2024, 5, 1, 12, 30, 15, tzinfo=timezone(timedelta(hours=2)))
    assert normalize(instant.strftime("%Y-%m-%dT%H:%M:%S%z"), FALLBACK) == instant
    assert normalize(instant.isoformat(), FALLBACK) == instant


def test_fractional_seconds():
    instant = datetime(2024, 5, 1, 12, 30, 15, 250000, tzinfo=timezone.utc)
    assert normalize(instant.isoformat(), FALLBACK) == instant


def test_missing_zone_is_read_as_utc():
    expected = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    assert normalize("2024-05-01T12:30:00", FALLBACK) == expected
    assert normalize("2024-05-01 12:30:00", FALLBACK) == expected
    assert normalize("2024-05-01T12:30:00Z", FALLBACK) == expected


def test_negative_offset_is_kept():
    parsed = normalize("2024-05-01T12:30:00-05:00", FALLBACK)
    assert parsed.utcoffset() == timedelta(hours=-5)


@pytest.mark.parametrize("raw", [
    "yesterday",
    "2024-13-45T99:99:99Z",
    "05/01/2024",
    "\x00",
    "2024-05-01",
    "Z",
    "+01:00",
])
def test_unparseable_values_fall_back(raw):
    assert normalize(raw, FALLBACK) is FALLBACK


def test_end_date_phrases():
    now = datetime(2025, 3, 10, 15, 45, tzinfo=timezone.utc)
    midnight = datetime(2025, 3, 10, tzinfo=timezone.utc)
    assert parse_end_date("Ends today", now) == midnight
    assert parse_end_date("Ends tomorrow", now) == midnight + timedelta(days=1)
    assert parse_end_date("Jan 5, 2026", now) == datetime(2026, 1, 5, tzinfo=timezone.utc)
    assert parse_end_date("Ends March 31, 2025", now) == datetime(2025, 3, 31, tzinfo=timezone.utc)


def test_end_date_unknown_text():
    assert parse_end_date("", FALLBACK) is None
    assert parse_end_date("while supplies last", FALLBACK) is None


@pytest.mark.parametrize("raw,expected", [
    ("Ends Sept 30, 2025", datetime(2025, 9, 30, tzinfo=timezone.utc)),
    ("Dec. 1, 2025", datetime(2025, 12, 1, tzinfo=timezone.utc)),
    ("ends may 5 2026", datetime(2026, 5, 5, tzinfo=timezone.utc)),
])
def test_end_date_month_spellings(raw, expected):
    assert parse_end_date(raw, FALLBACK) == expected


def test_end_date_rejects_impossible_dates():
    assert parse_end_date("Feb 30, 2026", FALLBACK) is None
    assert parse_end_date("Smarch 3, 2026", FALLBACK) is None


def test_end_date_ignores_process_locale():
    """English month names parse even when the C library uses another language."""
    saved = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
    except locale.Error:
        pytest.skip("de_DE.UTF-8 locale not installed")
    try:
        assert parse_end_date("Ends Mar 31, 2026", FALLBACK) == datetime(2026, 3, 31, tzinfo=timezone.utc)
    finally:
        locale.setlocale(locale.LC_TIME, saved)
