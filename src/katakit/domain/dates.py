"""Date arithmetic helpers.

Timestamps are milliseconds since the Unix epoch as ``float``. Parsing
helpers never raise on bad input; they return :data:`INVALID_TIMESTAMP`
(NaN), which callers must test with :func:`math.isnan`.

Functions taking a date accept a ``datetime``, a ``date`` (midnight) or an
epoch-millisecond number (UTC).
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timezone

from dateutil import parser as date_parser

INVALID_TIMESTAMP = float("nan")

DateLike = datetime | date | int | float

# "GMT+01" means one hour east of Greenwich here; dateutil would read the
# POSIX sense and flip the sign, so the suffix is rewritten to "+0100".
_GMT_OFFSET = re.compile(r"\b(?:GMT|UTC)\s*([+-])(\d{1,2})(?::?(\d{2}))?\b")


def _to_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def _to_millis(value: datetime) -> float:
    return value.timestamp() * 1000


def _rewrite_gmt_offset(match: re.Match[str]) -> str:
    sign, hours, minutes = match.group(1), match.group(2), match.group(3)
    return f"{sign}{int(hours):02d}{minutes or '00'}"


def _is_date_only(text: str) -> bool:
    try:
        date_parser.isoparser().parse_isodate(text)
    except ValueError:
        return False
    return True


def parse_rfc2822(text: str) -> float:
    """Parse RFC 2822 style text into epoch milliseconds.

    Accepts the looser forms browsers accept as well, such as
    ``'December 17, 1995 03:24:00'``. Text without a zone is local time.
    Zone offsets of a day or more yield NaN.

    Example:
        >>> parse_rfc2822("Tue, 26 Jan 2016 13:48:02 GMT")
        1453816082000.0
        >>> math.isnan(parse_rfc2822("not a date"))
        True
    """
    try:
        parsed = date_parser.parse(_GMT_OFFSET.sub(_rewrite_gmt_offset, text))
        return _to_millis(parsed)
    except (ValueError, OverflowError):
        return INVALID_TIMESTAMP


def parse_iso8601(text: str) -> float:
    """Parse ISO 8601 text into epoch milliseconds.

    A date without a time is midnight UTC; a date-time without a zone is
    local time.

    Example:
        >>> parse_iso8601("2016-01-19T08:07:37Z")
        1453190857000.0
        >>> parse_iso8601("2016-01-19")
        1453161600000.0
        >>> math.isnan(parse_iso8601("19/01/2016"))
        True
    """
    try:
        parsed = date_parser.isoparse(text)
        if parsed.tzinfo is None and _is_date_only(text):
            parsed = parsed.replace(tzinfo=timezone.utc)
        return _to_millis(parsed)
    except (ValueError, OverflowError):
        return INVALID_TIMESTAMP


def is_leap_year(value: DateLike) -> bool:
    """Return True if the year of ``value`` is a Gregorian leap year.

    Example:
        >>> [is_leap_year(date(year, 2, 1)) for year in (1900, 2000, 2001, 2012, 2015)]
        [False, True, False, True, False]
    """
    year = _to_datetime(value).year
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def format_timespan(start: DateLike, end: DateLike) -> str:
    """Render the field-wise difference ``end - start`` as ``HH:mm:ss.sss``.

    Each unit is subtracted on its own without borrowing from the next
    larger unit, so spans where a field of ``end`` is smaller than the same
    field of ``start`` produce a negative component.

    Example:
        >>> format_timespan(datetime(2000, 1, 1, 10), datetime(2000, 1, 1, 15, 20, 10, 453000))
        '05:20:10.453'
    """
    first, last = _to_datetime(start), _to_datetime(end)
    hours = last.hour - first.hour
    minutes = last.minute - first.minute
    seconds = last.second - first.second
    millis = last.microsecond // 1000 - first.microsecond // 1000
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def clock_angle(value: DateLike) -> float:
    """Return the angle in radians between the hands of an analog clock.

    The hour hand follows the UTC hour, the minute hand the minute of
    ``value`` as given. The result is the shorter arc, in ``[0, pi]``.

    Example:
        >>> clock_angle(datetime(2016, 3, 5, 3, 0, tzinfo=timezone.utc)) == math.pi / 2
        True
    """
    moment = _to_datetime(value)
    minute = moment.minute
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    hour = moment.hour % 12

    hour_degrees = 30 * hour + 0.5 * minute
    minute_degrees = 6 * minute
    arc = abs(hour_degrees - minute_degrees) % 360
    return math.radians(min(arc, 360 - arc))


__all__ = [
    "INVALID_TIMESTAMP",
    "DateLike",
    "clock_angle",
    "format_timespan",
    "is_leap_year",
    "parse_iso8601",
    "parse_rfc2822",
]
