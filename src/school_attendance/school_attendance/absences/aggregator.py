"""Pure aggregation of absence events.

Nothing here touches the store: callers pass roster, events and calendars
already loaded, and get fresh immutable read-models back.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from ..academic_year.bimester_calendar import eligible_days
from ..academic_year.classifier import classify
from ..academic_year.model import BimesterRange, SchoolDay
from ..common.datetime_utils import sunday_first_weekday
from ..common.numbers import percent, round_half_up
from ..common.turma import sort_turmas, turma_sort_key
from ..core.constants import BIMESTERS
from ..students.model import Student
from .model import (
    AbsenceEvent,
    AggregationFilter,
    DayOfWeekAggregate,
    StudentAggregate,
    TurmaAggregate,
    TurmaBimesterRow,
)


def _eligible_by_bimester(calendars: Mapping[int, Sequence[SchoolDay]]) -> dict[int, frozenset[date]]:
    return {number: eligible_days(calendars.get(number) or ()) for number in BIMESTERS}


def _bimester_of(day: date, eligible: Mapping[int, frozenset[date]]) -> int:
    # Ascending bimester number wins when calendars overlap.
    for number in BIMESTERS:
        if day in eligible[number]:
            return number
    return 0


def _school_days(eligible: Mapping[int, frozenset[date]], flt: Optional[AggregationFilter]) -> int:
    days: set[date] = set()
    for number in BIMESTERS:
        if flt and not flt.accepts_bimester(number):
            continue
        days.update(eligible[number])
    if flt and (flt.window_start or flt.window_end):
        days = {d for d in days if flt.in_window(d)}
    return len(days)


def count_school_days(
    calendars: Mapping[int, Sequence[SchoolDay]],
    flt: Optional[AggregationFilter] = None,
) -> int:
    """Denominator of the absence percentages, independent of the roster."""
    return _school_days(_eligible_by_bimester(calendars), flt)


def aggregate_by_student(
    roster: Sequence[Student],
    events: Iterable[AbsenceEvent],
    calendars: Mapping[int, Sequence[SchoolDay]],
    *,
    flt: Optional[AggregationFilter] = None,
) -> list[StudentAggregate]:
    """Per-student absences per bimester and percentages, in roster order.

    An event counts for bimester N only when its day is a counted school day
    of N. Events for students not on the roster are ignored. With no counted
    school days the student is 0% absent / 100% present.
    """

    eligible = _eligible_by_bimester(calendars)
    known = {s.student_id for s in roster}
    counts: dict[str, dict[int, int]] = defaultdict(lambda: {n: 0 for n in BIMESTERS})

    for ev in events:
        if ev.student_id not in known:
            continue
        number = _bimester_of(ev.day, eligible)
        if number == 0:
            continue
        if flt:
            if (flt.window_start or flt.window_end) and not flt.in_window(ev.day):
                continue
            if not flt.accepts_bimester(number):
                continue
            if flt.exclude_justified and ev.justified:
                continue
        counts[ev.student_id][number] += 1

    school_days = _school_days(eligible, flt)

    out: list[StudentAggregate] = []
    for s in roster:
        per = counts.get(s.student_id) or {n: 0 for n in BIMESTERS}
        total = sum(per.values())
        absence = min(round_half_up(percent(total, school_days), 1), 100.0)
        out.append(
            StudentAggregate(
                student_id=s.student_id,
                turma=s.turma,
                name=s.name,
                b1=per[1],
                b2=per[2],
                b3=per[3],
                b4=per[4],
                school_days=school_days,
                absence_percent=absence,
                attendance_percent=round_half_up(100.0 - absence, 1),
            )
        )
    return out


def aggregate_by_turma(aggregates: Iterable[StudentAggregate]) -> list[TurmaAggregate]:
    groups: dict[str, list[StudentAggregate]] = defaultdict(list)
    for a in aggregates:
        groups[a.turma].append(a)

    out = []
    for turma in sort_turmas(groups):
        members = groups[turma]
        n = len(members)
        out.append(
            TurmaAggregate(
                turma=turma,
                students=n,
                mean_absences=round_half_up(sum(m.total for m in members) / n, 1),
                mean_attendance_percent=round_half_up(sum(m.attendance_percent for m in members) / n, 1),
            )
        )
    return out


def aggregate_by_day_of_week(
    events: Iterable[AbsenceEvent],
    window_start: Optional[date],
    window_end: Optional[date],
    bimester_filter: Iterable[int],
    ranges: Mapping[int, BimesterRange],
    exclude_justified: bool = False,
    *,
    turmas: Iterable[str] = (),
) -> DayOfWeekAggregate:
    """Absences per weekday, overall and per turma.

    ``turmas`` pre-seeds zeroed buckets so every class shows up on the chart
    even without absences.
    """

    flt = AggregationFilter(
        window_start=window_start,
        window_end=window_end,
        bimesters=frozenset(bimester_filter),
        exclude_justified=exclude_justified,
    )
    overall = [0] * 7
    by_turma: dict[str, list[int]] = {t: [0] * 7 for t in turmas}

    for ev in events:
        if not flt.in_window(ev.day):
            continue
        if flt.bimesters and not flt.accepts_bimester(classify(ev.day, ranges)):
            continue
        if flt.exclude_justified and ev.justified:
            continue
        idx = sunday_first_weekday(ev.day)
        overall[idx] += 1
        by_turma.setdefault(ev.turma, [0] * 7)[idx] += 1

    return DayOfWeekAggregate(
        overall=tuple(overall),
        by_turma={t: tuple(by_turma[t]) for t in sorted(by_turma, key=turma_sort_key)},
    )


def bimester_totals(aggregates: Iterable[StudentAggregate]) -> dict[int, int]:
    """Absences of the whole school per bimester (evolution chart)."""
    totals = {n: 0 for n in BIMESTERS}
    for a in aggregates:
        for n in BIMESTERS:
            totals[n] += a.for_bimester(n)
    return totals


def turma_bimester_matrix(aggregates: Iterable[StudentAggregate]) -> list[TurmaBimesterRow]:
    sums: dict[str, list[int]] = defaultdict(lambda: [0, 0, 0, 0])
    for a in aggregates:
        row = sums[a.turma]
        for i, n in enumerate(BIMESTERS):
            row[i] += a.for_bimester(n)
    return [TurmaBimesterRow(turma, *sums[turma]) for turma in sort_turmas(sums)]


def student_absence_dates(
    student_id: str,
    events: Iterable[AbsenceEvent],
    ranges: Mapping[int, BimesterRange],
    *,
    exclude_justified: bool = False,
) -> dict[int, list[date]]:
    """Dates a student missed, grouped by bimester and sorted."""
    out: dict[int, list[date]] = {n: [] for n in BIMESTERS}
    for ev in events:
        if ev.student_id != student_id:
            continue
        if exclude_justified and ev.justified:
            continue
        number = classify(ev.day, ranges)
        if number:
            out[number].append(ev.day)
    for days in out.values():
        days.sort()
    return out


def monthly_absences(student_id: str, events: Iterable[AbsenceEvent], *, year: Optional[int] = None) -> dict[int, int]:
    """Absences per calendar month (1..12) for the welfare report."""
    out = {m: 0 for m in range(1, 13)}
    for ev in events:
        if ev.student_id != student_id:
            continue
        if year is not None and ev.day.year != year:
            continue
        out[ev.day.month] += 1
    return out
