from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date, datetime, timedelta

from ._ast import (
    And,
    Date,
    Day,
    DayRange,
    Month,
    MonthRange,
    Not,
    Or,
    TemporalExpression,
    Week,
    Weekday,
    WeekdayRange,
    Year,
    YearRange,
)
from ._error import RecurringError
from ._timeutil import beginning_of_day, days_in_month, week_of_month

logger = logging.getLogger(__name__)

# =============================================================================
# Search Horizon
# =============================================================================
# Every search is bounded by a horizon instant. Searches step one calendar
# day at a time and report "not found" (None, or a short list) once the
# candidate passes the horizon, so unsatisfiable expressions such as
# And(Month.FEBRUARY, Day(30)) terminate.
#
# DEFAULT_HORIZON is the span used by Rule when no horizon is given. Eight
# years reaches the next February 29th even across a skipped century leap
# year (2096 -> 2104).
#
# Stepping uses timedelta(days=1) on the candidate, which is wall-clock
# arithmetic for aware datetimes: candidates stay at local midnight across
# DST transitions.
# =============================================================================

DEFAULT_HORIZON = timedelta(days=8 * 366)

_ONE_DAY = timedelta(days=1)


# --- Normalization ---


def _normalize_day(day: int, t: date) -> int:
    if day < 0:
        return days_in_month(t) + day + 1
    return day


def _normalize_week(week: int, t: date) -> int:
    if week < 0:
        last = t.replace(day=days_in_month(t))
        return week_of_month(last) + week + 1
    return week


# --- Evaluation ---


def includes(expr: TemporalExpression, t: datetime) -> bool:
    """Return True when ``t`` falls on a date matched by ``expr``.

    Only the calendar date of ``t`` is inspected; the time of day is ignored.
    """
    match expr:
        case Day(day=day):
            return _normalize_day(day, t) == t.day
        case Week(week=week):
            return week_of_month(t) == _normalize_week(week, t)
        case Weekday():
            return Weekday.of(t) == expr
        case Month():
            return t.month == expr
        case Year(year=year):
            return t.year == year
        case Date(year=y, month=m, day=d):
            return (t.year, t.month, t.day) == (y, m, d)
        case DayRange(start=start, end=end):
            return _normalize_day(start, t) <= t.day <= _normalize_day(end, t)
        case WeekdayRange(start=start, end=end):
            return start <= Weekday.of(t) <= end
        case MonthRange(start=start, end=end):
            return start <= t.month <= end
        case YearRange(start=start, end=end):
            return start <= t.year <= end
        case Or():
            return any(includes(e, t) for e in expr.expressions)
        case And():
            return all(includes(e, t) for e in expr.expressions)
        case Not(expression=inner):
            return not includes(inner, t)
    raise RecurringError.eval(f"not a temporal expression: {expr!r}")


# --- Search ---


def _check_bounds(start: datetime, horizon: datetime) -> None:
    if (start.tzinfo is None) != (horizon.tzinfo is None):
        raise RecurringError.search("start and horizon must both be naive or both be aware")


def next_from(start: datetime, expr: TemporalExpression, horizon: datetime) -> datetime | None:
    """First matching day at or after the day containing ``start``.

    Returns the beginning of that day, or None when no day up to ``horizon``
    matches.
    """
    _check_bounds(start, horizon)
    candidate = beginning_of_day(start)
    while candidate <= horizon:
        if includes(expr, candidate):
            return candidate
        candidate += _ONE_DAY
    logger.debug("no occurrence between %s and horizon %s", start, horizon)
    return None


def next_n_from(
    start: datetime, expr: TemporalExpression, n: int, horizon: datetime
) -> list[datetime]:
    if n < 0:
        raise RecurringError.search(f"occurrence count must not be negative, got {n}")
    results: list[datetime] = []
    current = start
    for _ in range(n):
        nxt = next_from(current, expr, horizon)
        if nxt is None:
            break
        current = nxt + _ONE_DAY
        results.append(nxt)
    return results


def previous_from(
    start: datetime, expr: TemporalExpression, horizon: datetime
) -> datetime | None:
    """Latest matching day at or before the day containing ``start``.

    ``horizon`` is a lower bound here: the day containing it is the earliest
    day considered.
    """
    _check_bounds(start, horizon)
    floor = beginning_of_day(horizon)
    candidate = beginning_of_day(start)
    while candidate >= floor:
        if includes(expr, candidate):
            return candidate
        candidate -= _ONE_DAY
    logger.debug("no occurrence between horizon %s and %s", horizon, start)
    return None


# --- Iterator functions ---


def occurrences(start: datetime, expr: TemporalExpression, horizon: datetime) -> Iterator[datetime]:
    """Lazily yield matching days from the day containing ``start`` up to ``horizon``."""
    current = start
    while True:
        nxt = next_from(current, expr, horizon)
        if nxt is None:
            return
        current = nxt + _ONE_DAY
        yield nxt


def between(start: datetime, end: datetime, expr: TemporalExpression) -> Iterator[datetime]:
    """Matching days from the day containing ``start`` through ``end`` inclusive."""
    return occurrences(start, expr, end)
