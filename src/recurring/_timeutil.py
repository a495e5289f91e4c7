"""Calendar boundary arithmetic.

Every function takes a ``datetime`` and returns a ``datetime`` carrying the
same ``tzinfo``. Beginnings are truncated to the start of the period; ends are
one microsecond before the beginning of the following period. Weeks start on
Monday, following ISO 8601.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

_ONE_DAY = timedelta(days=1)
_TICK = timedelta(microseconds=1)


def days_in_month(t: date) -> int:
    return calendar.monthrange(t.year, t.month)[1]


# --- Beginnings ---


def beginning_of_minute(t: datetime) -> datetime:
    return t.replace(second=0, microsecond=0)


def beginning_of_hour(t: datetime) -> datetime:
    return t.replace(minute=0, second=0, microsecond=0)


def beginning_of_day(t: datetime) -> datetime:
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


def beginning_of_week(t: datetime) -> datetime:
    d = beginning_of_day(t)
    return d - timedelta(days=d.weekday())


def beginning_of_month(t: datetime) -> datetime:
    return beginning_of_day(t).replace(day=1)


def beginning_of_quarter(t: datetime) -> datetime:
    first_month = (t.month - 1) // 3 * 3 + 1
    return beginning_of_month(t).replace(month=first_month)


def beginning_of_year(t: datetime) -> datetime:
    return beginning_of_month(t).replace(month=1)


# --- Ends ---


def end_of_minute(t: datetime) -> datetime:
    return beginning_of_minute(t) + timedelta(minutes=1) - _TICK


def end_of_hour(t: datetime) -> datetime:
    return beginning_of_hour(t) + timedelta(hours=1) - _TICK


def end_of_day(t: datetime) -> datetime:
    return beginning_of_day(t) + _ONE_DAY - _TICK


def end_of_week(t: datetime) -> datetime:
    return beginning_of_week(t) + timedelta(days=7) - _TICK


def end_of_month(t: datetime) -> datetime:
    return end_of_day(t.replace(day=days_in_month(t)))


def end_of_quarter(t: datetime) -> datetime:
    last_month = beginning_of_quarter(t).month + 2
    return end_of_month(t.replace(day=1, month=last_month))


def end_of_year(t: datetime) -> datetime:
    return end_of_month(t.replace(day=1, month=12))


# --- Week helpers ---


def monday(t: datetime) -> datetime:
    """Start of the Monday that opens the week containing ``t``."""
    return beginning_of_week(t)


def sunday(t: datetime) -> datetime:
    """Start of the Sunday that closes the week containing ``t``."""
    d = beginning_of_day(t)
    return d + timedelta(days=6 - d.weekday())


def end_of_sunday(t: datetime) -> datetime:
    return end_of_day(sunday(t))


def week_of_month(t: date) -> int:
    """1-based ISO week offset of ``t`` from the first week touched by its month.

    Computed as ``1 + isoweek(t) - isoweek(first of month)``. Around the new
    year the ISO week number wraps (December 31st can be week 1), and the
    result then leaves the 1..6 range.
    """
    first_week = t.replace(day=1).isocalendar()[1]
    this_week = t.isocalendar()[1]
    return 1 + this_week - first_week
