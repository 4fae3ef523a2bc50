"""Conversions between calendar dates and Julian Day numbers.

Dates use astronomical year numbering: year ``0`` is 1 BC, year ``-1`` is
2 BC, and so on.  Dates before 1582-10-15 are reckoned in the Julian
calendar and dates from 1582-10-15 onward in the Gregorian calendar.  The
ten days 1582-10-05 through 1582-10-14 do not exist.

A Julian Day (JD) is a continuous day count whose integer boundary falls at
noon, so civil midnight corresponds to a fractional part of ``0.5``.

All routines operate on Python scalars and use exact integer arithmetic
for the day counts, so they are valid for arbitrarily distant years.

References:

    1. W. H. Press et al., *Numerical Recipes in C (2nd Ed.)*, 1992,
       pp. 11-15.
    2. J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, Ch. 7.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from typing import NamedTuple

from .constants import (
    DATE_NUMBER_GREGORIAN_START,
    JD_GREGORIAN_START,
    JD_MJD_OFFSET,
    LAST_JULIAN_LEAP_RULE_YEAR,
    SECONDS_PER_DAY,
)

logger = logging.getLogger(__name__)

# Added before truncating the seconds of day to absorb round-down error
_TIME_OF_DAY_EPSILON = 0.0001

_DAYS_PER_CENTURY = 36525
_DAY_SECONDS = 86400

_ISO8601_PATTERN = re.compile(
    r"^([+\-]?\d+)[:\-](\d\d)[:\-](\d\d)T(\d?\d):(\d\d):(\d\d(?:\.\d*)?)$"
)


class CalendarSystem(enum.Enum):
    """Calendar used to reckon a date."""

    JULIAN = "julian"
    GREGORIAN = "gregorian"


class DateTimeFields(NamedTuple):
    """Broken-down calendar date and time of day.

    Attributes:
        year: Astronomical year (year 0 and negative years permitted).
        month: Month, 1-12.
        day: Day of month, 1-31.
        hour: Hour, 0-23.
        minute: Minute, 0-59.
        second: Second, ``[0, 60)``.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def resolve_calendar_system(jd: float) -> CalendarSystem:
    """Return the calendar in force on the civil day containing ``jd``.

    The civil day starts at midnight, so the day number is
    ``floor(jd + 0.5)``.  Day numbers from 2299161 (1582-10-15) onward
    are Gregorian.

    Args:
        jd (float): Julian Day.

    Returns:
        CalendarSystem: ``GREGORIAN`` or ``JULIAN``.
    """
    return _calendar_system_for_day_number(math.floor(jd + 0.5))


def _calendar_system_for_day_number(julian: int) -> CalendarSystem:
    if julian >= JD_GREGORIAN_START:
        return CalendarSystem.GREGORIAN
    return CalendarSystem.JULIAN


def calendar_system_for_date(year: int, month: int, day: int) -> CalendarSystem:
    """Return the calendar a (year, month, day) triple is expressed in.

    Args:
        year (int): Astronomical year.
        month (int): Month.
        day (int): Day of month.

    Returns:
        CalendarSystem: ``GREGORIAN`` on or after 1582-10-15, else ``JULIAN``.
    """
    if day + 31 * (month + 12 * year) >= DATE_NUMBER_GREGORIAN_START:
        return CalendarSystem.GREGORIAN
    return CalendarSystem.JULIAN


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a month.

    Years after 1582 follow the Gregorian leap-year rule; earlier years
    follow the Julian rule (every fourth year).  Month ``0`` is December of
    the previous year and month ``13`` is January of the next year.

    Args:
        month (int): Month, 0-13.
        year (int): Astronomical year.

    Returns:
        int: Days in the month, or ``0`` for any other month value.
    """
    if month in (1, 3, 5, 7, 8, 10, 12):
        return 31
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        if year > LAST_JULIAN_LEAP_RULE_YEAR:
            leap = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
        else:
            leap = year % 4 == 0
        return 29 if leap else 28
    if month == 0:
        return days_in_month(12, year - 1)
    if month == 13:
        return days_in_month(1, year + 1)
    return 0


def _is_direct_date(year: int, month: int, day: int) -> bool:
    """Whether a date can use the closed-form day count."""
    if year < -4712 or not 1 <= month <= 12:
        return False
    if not 1 <= day <= days_in_month(month, year):
        return False
    # Calendar reform gap
    return not (year == 1582 and month == 10 and 4 < day < 15)


def _day_number_direct(year: int, month: int, day: int) -> int:
    """Julian Day number of a valid date from the closed-form count."""
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    b = 0
    if calendar_system_for_date(year, month, day) is CalendarSystem.GREGORIAN:
        a = y // 100
        b = 2 - a + a // 4

    return (1461 * (y + 4716)) // 4 + (306001 * (m + 1)) // 10000 + day + b - 1524


def _day_number_integer(year: int, month: int, day: int) -> int:
    """Julian Day number from the Numerical Recipes integer algorithm.

    Accepts any integers, including days past the end of the month and
    years before -4712.
    """
    if month > 2:
        jy = year
        jm = month + 1
    else:
        jy = year - 1
        jm = month + 13

    julian = (1461 * jy) // 4 + (306001 * jm) // 10000 + day + 1720995

    if calendar_system_for_date(year, month, day) is CalendarSystem.GREGORIAN:
        century = jy // 100
        julian += 2 - century + century // 4

    return julian


def caldate_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Convert a calendar date and time of day to Julian Day.

    Valid dates from -4712 onward use a closed-form day count.  Anything
    else (earlier years, days beyond the end of the month, dates in the
    1582 gap) falls back to the Numerical Recipes integer algorithm, which
    is total over the integers.  A day number too large for a float gives
    ``nan``; use :func:`caldate_to_jd_checked` for an explicit flag.

    Args:
        year (int): Astronomical year.
        month (int): Month.
        day (int): Day of month.
        hour (int): Hour. Default: ``0``
        minute (int): Minute. Default: ``0``
        second (float): Second. Default: ``0.0``

    Returns:
        float: Julian Day, or ``nan`` if it is not representable.

    Examples:
        >>> caldate_to_jd(2000, 1, 1, 12, 0, 0)
        2451545.0
        >>> caldate_to_jd(1582, 10, 4)
        2299159.5
    """
    time_offset = hour / 24.0 + minute / 1440.0 + second / SECONDS_PER_DAY - 0.5

    if _is_direct_date(year, month, day):
        julian = _day_number_direct(year, month, day)
    else:
        julian = _day_number_integer(year, month, day)

    try:
        return julian + time_offset
    except OverflowError:
        logger.debug("Day number of %d-%d-%d is out of float range", year, month, day)
        return math.nan


def caldate_to_jd_checked(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> tuple[float, bool]:
    """Convert a calendar date and time of day to Julian Day with a success flag.

    Args:
        year (int): Astronomical year.
        month (int): Month.
        day (int): Day of month.
        hour (int): Hour. Default: ``0``
        minute (int): Minute. Default: ``0``
        second (float): Second. Default: ``0.0``

    Returns:
        tuple[float, bool]: ``(jd, True)``, or ``(0.0, False)`` if the Julian
            Day is not a finite float.
    """
    jd = caldate_to_jd(year, month, day, hour, minute, second)
    if not math.isfinite(jd):
        return 0.0, False
    return jd, True


def jd_to_caldate(jd: float) -> tuple[int, int, int]:
    """Convert Julian Day to a calendar date.

    Args:
        jd (float): Julian Day.

    Returns:
        tuple[int, int, int]: ``(year, month, day)`` of the civil day
            containing ``jd``.

    Examples:
        >>> jd_to_caldate(2451545.0)
        (2000, 1, 1)
        >>> jd_to_caldate(0.0)
        (-4712, 1, 1)
    """
    return _caldate_from_day_number(math.floor(jd + 0.5))


def _caldate_from_day_number(julian: int) -> tuple[int, int, int]:
    """Calendar date of a civil day number from the Numerical Recipes algorithm."""
    if _calendar_system_for_day_number(julian) is CalendarSystem.GREGORIAN:
        alpha = (4 * (julian - 1867216) - 1) // 146097
        ta = julian + 1 + alpha - alpha // 4
    elif julian < 0:
        # Shift into positive range by whole centuries, removed again below
        ta = julian + _DAYS_PER_CENTURY * (1 - _trunc_div(julian, _DAYS_PER_CENTURY))
    else:
        ta = julian

    tb = ta + 1524
    tc = (tb * 20 - 2442) // 7305
    td = 365 * tc + tc // 4
    te = ((tb - td) * 10000) // 306001

    day = tb - td - (306001 * te) // 10000

    month = te - 1
    if month > 12:
        month -= 12

    year = tc - 4715
    if month > 2:
        year -= 1

    if julian < 0:
        year -= 100 * (1 - _trunc_div(julian, _DAYS_PER_CENTURY))

    return year, month, day


def _civil_day_and_seconds(jd: float) -> tuple[int, int]:
    """Civil day number and whole seconds since midnight of ``jd``."""
    noon_day = math.floor(jd)
    seconds = math.floor((jd - noon_day) * SECONDS_PER_DAY + _TIME_OF_DAY_EPSILON)
    return divmod(noon_day * _DAY_SECONDS + seconds + _DAY_SECONDS // 2, _DAY_SECONDS)


def _time_of_day(seconds: int) -> tuple[int, int, int]:
    return seconds // 3600, (seconds // 60) % 60, seconds % 60


def time_of_day_from_jd(jd: float) -> tuple[int, int, int]:
    """Return the civil time of day encoded in the fraction of ``jd``.

    Args:
        jd (float): Julian Day.

    Returns:
        tuple[int, int, int]: ``(hour, minute, second)``.

    Examples:
        >>> time_of_day_from_jd(2451545.0)
        (12, 0, 0)
        >>> time_of_day_from_jd(2451544.5)
        (0, 0, 0)
    """
    _, seconds = _civil_day_and_seconds(jd)
    return _time_of_day(seconds)


def jd_to_datetime(jd: float) -> DateTimeFields:
    """Convert Julian Day to a full calendar date and time of day.

    The date and the time of day come from the same whole-second count, so
    an instant that rounds up to midnight is dated on the following day.

    Args:
        jd (float): Julian Day.

    Returns:
        DateTimeFields: Date and time, whole seconds.
    """
    julian, seconds = _civil_day_and_seconds(jd)
    year, month, day = _caldate_from_day_number(julian)
    hour, minute, second = _time_of_day(seconds)
    return DateTimeFields(year, month, day, hour, minute, second)


def jd_to_mjd(jd: float) -> float:
    """Convert Julian Date to Modified Julian Date.

    Args:
        jd (float): Julian Date.

    Returns:
        float: Modified Julian Date.
    """
    return jd - JD_MJD_OFFSET


def mjd_to_jd(mjd: float) -> float:
    """Convert Modified Julian Date to Julian Date.

    Args:
        mjd (float): Modified Julian Date.

    Returns:
        float: Julian Date.
    """
    return mjd + JD_MJD_OFFSET


def decimal_year(year: int, month: int, day: int) -> float:
    """Approximate a calendar date as a decimal year.

    Each month counts as 30.5 days of a 366-day year and the day of month
    enters only through the integer quotient ``day // 31``.  This coarse
    form is the argument of the published DeltaT polynomials and must not
    be replaced by an exact day-of-year fraction.

    Args:
        year (int): Astronomical year.
        month (int): Month.
        day (int): Day of month.

    Returns:
        float: Decimal year.
    """
    return year + ((month - 1) * 30.5 + (day // 31) * 30.5) / 366


def jd_to_decimal_year(jd: float) -> float:
    """Return :func:`decimal_year` of the civil date containing ``jd``."""
    return decimal_year(*jd_to_caldate(jd))


def parse_iso8601(text: str) -> tuple[bool, DateTimeFields | None]:
    """Parse an ISO 8601 style date-time string.

    Accepts ``YYYY-MM-DDTHH:MM:SS[.fff]`` where the date separators may
    be ``-`` or ``:``, the year may carry a sign and any number of digits,
    and the hour may be one digit.  Values are not range-checked.

    Args:
        text (str): Date-time string.

    Returns:
        tuple[bool, DateTimeFields | None]: ``(True, fields)`` on success,
            ``(False, None)`` if the string does not match.
    """
    match = _ISO8601_PATTERN.match(text)
    if match is None:
        logger.debug("Failed to parse ISO 8601 date-time string: %r", text)
        return False, None

    year, month, day, hour, minute, second = match.groups()
    fields = DateTimeFields(
        int(year), int(month), int(day), int(hour), int(minute), float(second)
    )
    return True, fields


def iso8601_to_jd(text: str) -> tuple[float, bool]:
    """Convert an ISO 8601 style date-time string to Julian Day.

    Args:
        text (str): Date-time string accepted by :func:`parse_iso8601`.

    Returns:
        tuple[float, bool]: ``(jd, True)`` on success, ``(0.0, False)`` if
            the string does not parse or the result is not finite.
    """
    ok, fields = parse_iso8601(text)
    if not ok:
        return 0.0, False

    jd, ok = caldate_to_jd_checked(*fields)
    if not ok:
        logger.debug("ISO 8601 string %r gives a non-finite Julian Day", text)
    return jd, ok


def jd_to_iso8601(jd: float) -> str:
    """Format Julian Day as ``YYYY-MM-DDTHH:MM:SS``.

    Negative years are prefixed with ``-``; the absolute year is padded to
    at least four digits.

    Args:
        jd (float): Julian Day.

    Returns:
        str: Date-time string.

    Examples:
        >>> jd_to_iso8601(2451545.0)
        '2000-01-01T12:00:00'
    """
    year, month, day, hour, minute, second = jd_to_datetime(jd)
    sign = "-" if year < 0 else ""
    return (
        f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}"
    )
