from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from typing import Self


class Weekday(IntEnum):
    """Day of the week, numbered Sunday=0 ... Saturday=6.

    Members are leaf expressions: ``Weekday.TUESDAY`` matches every Tuesday.
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, d: date) -> Weekday:
        return cls(d.isoweekday() % 7)

    def __str__(self) -> str:
        return self.name.lower()


class Month(IntEnum):
    """Month of the year, numbered January=1 ... December=12.

    Members are leaf expressions: ``Month.OCTOBER`` matches every day in October.
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        return self.name.lower()


# --- Leaf expressions ---


@dataclass(frozen=True, slots=True)
class Day:
    """Day of the month starting at 1; negative values count back from the last day."""

    day: int


@dataclass(frozen=True, slots=True)
class Week:
    """ISO week of the month starting at 1; negative values count back from the last week."""

    week: int


@dataclass(frozen=True, slots=True)
class Year:
    year: int


@dataclass(frozen=True, slots=True)
class Date:
    year: int
    month: int
    day: int

    @classmethod
    def of(cls, d: date) -> Date:
        return cls(d.year, d.month, d.day)


# --- Range expressions ---
# Both ends are inclusive. A range whose start is after its end matches nothing.


@dataclass(frozen=True, slots=True)
class DayRange:
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class WeekdayRange:
    start: Weekday
    end: Weekday


@dataclass(frozen=True, slots=True)
class MonthRange:
    start: Month
    end: Month


@dataclass(frozen=True, slots=True)
class YearRange:
    start: int
    end: int


# --- Combinators ---


class _Junction:
    """Ordered, growable list of child expressions.

    ``add`` mutates in place. Instances are not synchronized: callers must
    not add children while another thread is adding or evaluating. Hand out
    a ``snapshot()`` when a tree needs to be shared across threads.
    """

    __slots__ = ("_expressions",)

    _expressions: list[TemporalExpression]

    def __init__(self, *expressions: TemporalExpression) -> None:
        self._expressions = list(expressions)

    @property
    def expressions(self) -> tuple[TemporalExpression, ...]:
        return tuple(self._expressions)

    def add(self, expression: TemporalExpression) -> None:
        self._expressions.append(expression)

    def extend(self, expressions: Iterable[TemporalExpression]) -> None:
        self._expressions.extend(expressions)

    def snapshot(self) -> Self:
        """Deep copy of the tree: nested junctions are snapshotted too."""
        return type(self)(*(_snapshot(e) for e in self._expressions))

    def __len__(self) -> int:
        return len(self._expressions)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._expressions == other._expressions  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        args = ", ".join(repr(e) for e in self._expressions)
        return f"{type(self).__name__}({args})"


class Or(_Junction):
    """Matches when any child matches. An empty ``Or`` matches nothing."""

    __slots__ = ()


class And(_Junction):
    """Matches when every child matches. An empty ``And`` matches everything."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Not:
    expression: TemporalExpression


def _snapshot(expr: TemporalExpression) -> TemporalExpression:
    match expr:
        case _Junction():
            return expr.snapshot()
        case Not(expression=inner):
            return Not(_snapshot(inner))
    return expr


TemporalExpression = (
    Day
    | Week
    | Weekday
    | Month
    | Year
    | Date
    | DayRange
    | WeekdayRange
    | MonthRange
    | YearRange
    | Or
    | And
    | Not
)


# --- Any-of builders ---


def days(*values: int) -> Or:
    return Or(*(Day(v) for v in values))


def weeks(*values: int) -> Or:
    return Or(*(Week(v) for v in values))


def weekdays(*values: Weekday | int) -> Or:
    return Or(*(Weekday(v) for v in values))


def months(*values: Month | int) -> Or:
    return Or(*(Month(v) for v in values))


def years(*values: int) -> Or:
    return Or(*(Year(v) for v in values))


def dates(*values: date) -> Or:
    """Any of the given calendar dates; ``datetime`` values keep only their date part."""
    return Or(*(Date.of(v) for v in values))
