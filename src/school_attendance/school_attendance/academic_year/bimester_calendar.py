from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from .model import SchoolDay


def is_weekday(day: date) -> bool:
    return day.weekday() < 5


def build_calendar(start: Optional[date], end: Optional[date]) -> tuple[SchoolDay, ...]:
    """Every day from start to end inclusive; Mon-Fri count by default.

    A missing bound or start > end gives an empty calendar, not an error.
    """

    if not start or not end or start > end:
        return ()

    days: list[SchoolDay] = []
    current = start
    while current <= end:
        days.append(SchoolDay(day=current, counts=is_weekday(current)))
        current += timedelta(days=1)
    return tuple(days)


def toggle(calendar: Sequence[SchoolDay], day: date) -> tuple[SchoolDay, ...]:
    return tuple(SchoolDay(day=d.day, counts=not d.counts) if d.day == day else d for d in calendar)


def count_eligible(calendar: Iterable[SchoolDay]) -> int:
    return sum(1 for d in calendar if d.counts)


def count_eligible_in_window(calendar: Iterable[SchoolDay], start: Optional[date], end: Optional[date]) -> int:
    if not start or not end:
        return 0
    return sum(1 for d in calendar if d.counts and start <= d.day <= end)


def eligible_days(calendar: Iterable[SchoolDay]) -> frozenset[date]:
    return frozenset(d.day for d in calendar if d.counts)


def eligible_union(calendars: Iterable[Iterable[SchoolDay]]) -> frozenset[date]:
    """Counted days of several bimesters; a day shared by two counts once."""
    days: set[date] = set()
    for calendar in calendars:
        days.update(eligible_days(calendar))
    return frozenset(days)
