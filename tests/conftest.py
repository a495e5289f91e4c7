from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest


def ymd(s: str) -> datetime:
    """Parse 'YYYY/MM/DD' into a naive midnight datetime."""
    return datetime.strptime(s, "%Y/%m/%d")


def fmt(dt: datetime) -> str:
    """Format a datetime as 'YYYY/MM/DD'."""
    return dt.strftime("%Y/%m/%d")


def each_day(first: str, last: str) -> list[datetime]:
    """Every midnight from `first` through `last`, both 'YYYY/MM/DD'."""
    start, end = ymd(first), ymd(last)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def last_days_of_months(year: int) -> list[datetime]:
    out: list[datetime] = []
    for month in range(1, 13):
        first_of_next = date(year + month // 12, month % 12 + 1, 1)
        out.append(datetime.combine(first_of_next - timedelta(days=1), datetime.min.time()))
    return out


@pytest.fixture(scope="session")
def two_years() -> list[datetime]:
    return each_day("2019/01/01", "2020/12/31")
