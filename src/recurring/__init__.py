from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta

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
    dates,
    days,
    months,
    weekdays,
    weeks,
    years,
)
from ._display import display
from ._error import RecurringError, RecurringErrorKind
from ._eval import (
    DEFAULT_HORIZON,
    between,
    includes,
    next_from,
    next_n_from,
    occurrences,
    previous_from,
)


class Rule:
    """A temporal expression bundled with a default search horizon.

    Searches without an explicit ``horizon`` look ``span`` ahead of (or, for
    ``previous_from``, behind) their starting point.
    """

    _expr: TemporalExpression
    _span: timedelta

    def __init__(self, expr: TemporalExpression, span: timedelta = DEFAULT_HORIZON) -> None:
        self._expr = expr
        self._span = span

    def includes(self, dt: datetime) -> bool:
        return includes(self._expr, dt)

    def next_from(self, now: datetime, horizon: datetime | None = None) -> datetime | None:
        return next_from(now, self._expr, self._ahead(now, horizon))

    def next_n_from(
        self, now: datetime, n: int, horizon: datetime | None = None
    ) -> list[datetime]:
        return next_n_from(now, self._expr, n, self._ahead(now, horizon))

    def previous_from(self, now: datetime, horizon: datetime | None = None) -> datetime | None:
        if horizon is None:
            horizon = now - self._span
        return previous_from(now, self._expr, horizon)

    def occurrences(self, from_: datetime, horizon: datetime | None = None) -> Iterator[datetime]:
        """Returns a lazy iterator of matching days starting with the day of `from_`.

        The iterator stops at the horizon, so it terminates even for rules that
        never match.
        """
        return occurrences(from_, self._expr, self._ahead(from_, horizon))

    def between(self, from_: datetime, to: datetime) -> Iterator[datetime]:
        """Returns an iterator of matching days from the day of `from_` through `to`."""
        return between(from_, to, self._expr)

    def _ahead(self, now: datetime, horizon: datetime | None) -> datetime:
        return now + self._span if horizon is None else horizon

    def __str__(self) -> str:
        return display(self._expr)

    def __repr__(self) -> str:
        return f"Rule({display(self._expr)!r})"

    @property
    def expression(self) -> TemporalExpression:
        return self._expr

    @property
    def span(self) -> timedelta:
        return self._span


__all__ = [
    "Rule",
    "RecurringError",
    "RecurringErrorKind",
    "TemporalExpression",
    "DEFAULT_HORIZON",
    "Weekday",
    "Month",
    "Day",
    "Week",
    "Year",
    "Date",
    "DayRange",
    "WeekdayRange",
    "MonthRange",
    "YearRange",
    "Or",
    "And",
    "Not",
    "days",
    "weeks",
    "weekdays",
    "months",
    "years",
    "dates",
    "includes",
    "next_from",
    "next_n_from",
    "previous_from",
    "occurrences",
    "between",
    "display",
]
