"""Date helper stories: parsing, leap years, timespans, clock angles."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone

import pytest

from katakit.domain.dates import (
    INVALID_TIMESTAMP,
    clock_angle,
    format_timespan,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
)


def _utc_millis(*args: int) -> float:
    return datetime(*args, tzinfo=timezone.utc).timestamp() * 1000  # type: ignore[misc]


# ======================== parse_rfc2822 ========================


@pytest.mark.os_agnostic
def test_rfc2822_with_gmt_zone() -> None:
    assert parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT") == _utc_millis(2016, 1, 26, 13, 48, 2)


@pytest.mark.os_agnostic
def test_rfc2822_gmt_offset_is_east_of_greenwich() -> None:
    """``GMT+01`` means one hour ahead of UTC."""
    assert parse_rfc2822("Sun, 17 May 1998 03:00:00 GMT+01") == _utc_millis(1998, 5, 17, 2, 0, 0)


@pytest.mark.os_agnostic
def test_rfc2822_numeric_offset() -> None:
    assert parse_rfc2822("Sun, 17 May 1998 03:00:00 -0200") == _utc_millis(1998, 5, 17, 5, 0, 0)


@pytest.mark.os_agnostic
def test_rfc2822_without_zone_is_local_time() -> None:
    """Text without a zone is read like a naive local datetime."""
    assert parse_rfc2822("December 17, 1995 03:24:00") == datetime(1995, 12, 17, 3, 24).timestamp() * 1000


@pytest.mark.os_agnostic
@pytest.mark.parametrize("text", ["not a date", "", "32 Foo 2016 99:99:99"])
def test_rfc2822_invalid_text_returns_nan(text: str) -> None:
    assert math.isnan(parse_rfc2822(text))


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "text",
    [
        "Sun, 17 May 1998 03:00:00 GMT+99",
        "Sun, 17 May 1998 03:00:00 GMT+25",
        "Sun, 17 May 1998 03:00:00 +9900",
    ],
)
def test_rfc2822_offset_of_a_day_or_more_returns_nan(text: str) -> None:
    """Offsets that parse but cannot be turned into a timestamp give NaN."""
    assert math.isnan(parse_rfc2822(text))


# ======================== parse_iso8601 ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2016-01-19T16:07:37+00:00", _utc_millis(2016, 1, 19, 16, 7, 37)),
        ("2016-01-19T08:07:37Z", _utc_millis(2016, 1, 19, 8, 7, 37)),
        ("2016-01-19T10:07:37+02:00", _utc_millis(2016, 1, 19, 8, 7, 37)),
    ],
)
def test_iso8601_with_offsets(text: str, expected: float) -> None:
    assert parse_iso8601(text) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("text", ["2016-01-19", "20160119"])
def test_iso8601_date_only_is_utc_midnight(text: str) -> None:
    assert parse_iso8601(text) == 1453161600000.0


@pytest.mark.os_agnostic
def test_iso8601_date_time_without_zone_is_local_time() -> None:
    assert parse_iso8601("2016-01-19T08:07:37") == datetime(2016, 1, 19, 8, 7, 37).timestamp() * 1000


@pytest.mark.os_agnostic
@pytest.mark.parametrize("text", ["Tue, 26 Jan 2016 13:48:02 GMT", "2016-13-45", "yesterday"])
def test_iso8601_rejects_non_iso_text(text: str) -> None:
    assert math.isnan(parse_iso8601(text))


@pytest.mark.os_agnostic
def test_invalid_sentinel_is_nan() -> None:
    """The sentinel is NaN and therefore never equal to itself."""
    assert math.isnan(INVALID_TIMESTAMP)
    assert INVALID_TIMESTAMP != INVALID_TIMESTAMP


# ======================== is_leap_year ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("year", "expected"),
    [(1900, False), (2000, True), (2001, False), (2012, True), (2015, False)],
)
def test_leap_years(year: int, expected: bool) -> None:
    assert is_leap_year(date(year, 2, 1)) is expected


@pytest.mark.os_agnostic
def test_leap_year_accepts_datetime_and_epoch_millis() -> None:
    assert is_leap_year(datetime(2024, 6, 1, 12))
    assert not is_leap_year(_utc_millis(2023, 6, 1))


# ======================== format_timespan ========================

START = datetime(2000, 1, 1, 10, 0, 0)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("end", "expected"),
    [
        (datetime(2000, 1, 1, 11, 0, 0), "01:00:00.000"),
        (datetime(2000, 1, 1, 10, 30, 0), "00:30:00.000"),
        (datetime(2000, 1, 1, 10, 0, 20), "00:00:20.000"),
        (datetime(2000, 1, 1, 10, 0, 0, 250_000), "00:00:00.250"),
        (datetime(2000, 1, 1, 15, 20, 10, 453_000), "05:20:10.453"),
    ],
)
def test_timespan_formats_field_differences(end: datetime, expected: str) -> None:
    assert format_timespan(START, end) == expected


@pytest.mark.os_agnostic
def test_timespan_does_not_borrow_across_units() -> None:
    """10:50 -> 11:10 yields a negative minute field rather than 00:20."""
    assert format_timespan(datetime(2000, 1, 1, 10, 50), datetime(2000, 1, 1, 11, 10)) == "01:-40:00.000"


@pytest.mark.os_agnostic
def test_timespan_ignores_sub_millisecond_digits() -> None:
    end = START + timedelta(microseconds=999)

    assert format_timespan(START, end) == "00:00:00.000"


# ======================== clock_angle ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("hour", "minute", "expected"),
    [
        (0, 0, 0.0),
        (3, 0, math.pi / 2),
        (18, 0, math.pi),
        (21, 0, math.pi / 2),
        (14, 20, math.radians(50)),
        (12, 30, math.radians(165)),
    ],
)
def test_clock_angle_in_radians(hour: int, minute: int, expected: float) -> None:
    moment = datetime(2016, 3, 5, hour, minute, tzinfo=timezone.utc)

    assert clock_angle(moment) == pytest.approx(expected)


@pytest.mark.os_agnostic
def test_clock_angle_uses_utc_hour_of_aware_datetimes() -> None:
    """06:00 at UTC+3 is 03:00 UTC, a right angle."""
    moment = datetime(2016, 4, 5, 6, 0, tzinfo=timezone(timedelta(hours=3)))

    assert clock_angle(moment) == pytest.approx(math.pi / 2)


@pytest.mark.os_agnostic
def test_clock_angle_accepts_epoch_millis() -> None:
    assert clock_angle(_utc_millis(2016, 4, 5, 18, 0)) == pytest.approx(math.pi)


@pytest.mark.os_agnostic
def test_clock_angle_stays_within_half_turn() -> None:
    """Every minute of a day maps into [0, pi]."""
    base = datetime(2016, 1, 1, tzinfo=timezone.utc)

    angles = [clock_angle(base + timedelta(minutes=m)) for m in range(24 * 60)]

    assert all(0 <= a <= math.pi for a in angles)
