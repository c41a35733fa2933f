"""Calendar date helpers used by the day count conventions."""

import calendar
from datetime import date, datetime
from typing import Union

import logging

from pandas import Timestamp

from daycountlib.errors import InvalidDateOrderError

logger = logging.getLogger(__name__)

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime, Timestamp, str]


def to_date(date_like: DateLike) -> date:
    """
    Normalize a date-like value to a plain date.
    Accepts date, datetime, pandas Timestamp and 'YYYY-MM-DD' / 'YYYYMMDD' strings.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def actual_days(first: date, second: date) -> int:
    """Number of calendar days from first to second; second must not precede first."""
    days = second.toordinal() - first.toordinal()
    if days < 0:
        raise InvalidDateOrderError(first, second)
    return days


def length_of_year(dt: date) -> int:
    """Return 366 for dates in a leap year, otherwise 365."""
    return 366 if calendar.isleap(dt.year) else 365


def day_of_year(dt: date) -> int:
    """1-based position of the date within its year."""
    return dt.timetuple().tm_yday


def is_last_day_of_february(dt: date) -> bool:
    return dt.month == 2 and dt.day == calendar.monthrange(dt.year, 2)[1]


def _next_leap_year(dt: date) -> int:
    year = dt.year
    if calendar.isleap(year) and dt < date(year, 2, 29):
        return year
    year += 1
    while not calendar.isleap(year):
        year += 1
    return year


def next_leap_day(dt: date) -> date:
    """
    Return the first February 29 strictly after the given date.

    A date on or after February 29 of a leap year moves on to the next
    leap year, so repeated calls walk through successive leap days.
    Raises ValueError when that leap day is past date.max.
    """
    year = _next_leap_year(dt)
    if year > date.max.year:
        raise ValueError(f"No leap day representable after {dt}")
    return date(year, 2, 29)


def contains_leap_day(first: date, second: date) -> bool:
    """Whether a February 29 falls in the half-open interval (first, second]."""
    year = _next_leap_year(first)
    return year <= second.year and date(year, 2, 29) <= second


def count_leap_days(first: date, second: date) -> int:
    """Count the February 29 dates in the half-open interval (first, second]."""
    count = 0
    year = _next_leap_year(first)
    # second.year bounds the loop, so every leap day built here is representable
    while year <= second.year and date(year, 2, 29) <= second:
        count += 1
        year = _next_leap_year(date(year, 2, 29))
    logger.debug("Found %s leap days between %s and %s", count, first, second)
    return count
