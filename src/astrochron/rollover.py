"""Normalization of overflowing calendar date-time components.

Date pickers and text fields can produce components such as a 13th month,
day 0 or minute 61.  :func:`normalize_datetime` carries such values into a
canonical calendar date-time, honouring month lengths, leap years and the
1582 calendar reform gap.
"""

from __future__ import annotations

from .time import DateTimeFields, days_in_month


def normalize_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: float,
) -> tuple[DateTimeFields, bool]:
    """Carry out-of-range date-time components into a canonical date-time.

    Components may be positive, zero or negative.  Carries are applied from
    the smallest unit upward: seconds into minutes, minutes into hours,
    hours into days, days into months and months into years.  Day carries
    use the length of the month being stepped over at each step.  A date
    landing in the nonexistent range 1582-10-05..14 is moved to
    1582-10-15.

    Args:
        year (int): Astronomical year.
        month (int): Month.
        day (int): Day of month.
        hour (int): Hour.
        minute (int): Minute.
        second (float): Second.

    Returns:
        tuple[DateTimeFields, bool]: The normalized components and whether
            any component changed.  When nothing changed the input values
            are returned as given.

    Examples:
        >>> normalize_datetime(2024, 12, 31, 23, 59, 60)
        (DateTimeFields(year=2025, month=1, day=1, hour=0, minute=0, second=0), True)
    """
    changed = False

    while second >= 60:
        second -= 60
        minute += 1
        changed = True
    while second < 0:
        second += 60
        minute -= 1
        changed = True

    while minute > 59:
        minute -= 60
        hour += 1
        changed = True
    while minute < 0:
        minute += 60
        hour -= 1
        changed = True

    while hour > 23:
        hour -= 24
        day += 1
        changed = True
    while hour < 0:
        hour += 24
        day -= 1
        changed = True

    while day > days_in_month(month, year):
        day -= days_in_month(month, year)
        month += 1
        if month > 12:
            month -= 12
            year += 1
        changed = True
    while day < 1:
        day += days_in_month(month - 1, year)
        month -= 1
        if month < 1:
            month += 12
            year -= 1
        changed = True

    while month > 12:
        month -= 12
        year += 1
        changed = True
    while month < 1:
        month += 12
        year -= 1
        changed = True

    if year == 1582 and month == 10 and 4 < day < 15:
        day = 15
        changed = True

    return DateTimeFields(year, month, day, hour, minute, second), changed
