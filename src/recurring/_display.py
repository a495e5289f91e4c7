from __future__ import annotations

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


def display(expr: TemporalExpression) -> str:
    """Render an expression tree as canonical text.

    >>> display(And(Month.OCTOBER, Not(Day(-1))))
    'and(month(october), not(day(-1)))'
    """
    match expr:
        case Day(day=d):
            return f"day({d})"
        case Week(week=w):
            return f"week({w})"
        case Weekday():
            return f"weekday({expr})"
        case Month():
            return f"month({expr})"
        case Year(year=y):
            return f"year({y})"
        case Date(year=y, month=m, day=d):
            return f"date({y:04d}-{m:02d}-{d:02d})"
        case DayRange(start=s, end=e):
            return f"day_range({s}, {e})"
        case WeekdayRange(start=s, end=e):
            return f"weekday_range({_enum_display(Weekday, s)}, {_enum_display(Weekday, e)})"
        case MonthRange(start=s, end=e):
            return f"month_range({_enum_display(Month, s)}, {_enum_display(Month, e)})"
        case YearRange(start=s, end=e):
            return f"year_range({s}, {e})"
        case Or():
            return _display_junction("or", expr.expressions)
        case And():
            return _display_junction("and", expr.expressions)
        case Not(expression=inner):
            return f"not({display(inner)})"
    raise RecurringError.eval(f"not a temporal expression: {expr!r}")


def _display_junction(name: str, children: tuple[TemporalExpression, ...]) -> str:
    return f"{name}(" + ", ".join(display(c) for c in children) + ")"


def _enum_display(kind: type[Weekday] | type[Month], value: int) -> str:
    try:
        return str(kind(value))
    except ValueError:
        return str(value)
