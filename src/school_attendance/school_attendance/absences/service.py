from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterable, Optional

from ..academic_year.model import AcademicYear
from ..academic_year.service import AcademicYearService
from ..common.datetime_utils import parse_date, today
from ..common.turma import sort_turmas
from ..core.enums import AlertLevel, WindowMode
from ..core.exceptions import ValidationError
from ..reports import welfare
from ..reports.alerts import Kpis, compute_kpis, students_at
from ..reports.heatmap import color_for, to_css
from ..students.service import StudentService
from .aggregator import (
    aggregate_by_day_of_week,
    aggregate_by_student,
    aggregate_by_turma,
    bimester_totals,
    count_school_days,
    student_absence_dates,
    turma_bimester_matrix,
)
from .duplicates import find_duplicates, select_for_removal
from .model import AbsenceEvent, AggregationFilter, DayOfWeekAggregate, StudentAggregate, TurmaAggregate
from .repository import AbsenceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrequencyReport:
    students: list[StudentAggregate] = field(default_factory=list)
    turmas: list[TurmaAggregate] = field(default_factory=list)
    bimester_totals: dict[int, int] = field(default_factory=dict)
    school_days: int = 0
    kpis: Optional[Kpis] = None


class AttendanceAnalyticsService:
    """Loads roster, marks and calendar, then runs the pure aggregations."""

    def __init__(
        self,
        absences: AbsenceRepository,
        students: StudentService,
        academic_years: AcademicYearService,
        *,
        clock: Callable[[], date] = today,
    ):
        self._absences = absences
        self._students = students
        self._academic_years = academic_years
        self._clock = clock

    def build_filter(
        self,
        mode: WindowMode,
        *,
        selected: Iterable[int] = (),
        start_text: str = "",
        end_text: str = "",
        exclude_justified: bool = False,
        academic_year: Optional[AcademicYear] = None,
    ) -> AggregationFilter:
        """Turn the dashboard filter bar into a concrete window.

        today: first bimester start up to today, all bimesters.
        custom: typed dates, optionally narrowed to selected bimesters.
        bimesters: from the first selected bimester start to the last one's end.
        """

        selected = frozenset(int(n) for n in selected)
        academic_year = academic_year or self._academic_years.get()
        ranges = academic_year.ranges()

        if mode is WindowMode.TODAY:
            first = ranges.get(1)
            start = first.start if first else date(academic_year.year, 1, 1)
            return AggregationFilter(start, self._clock(), frozenset(), exclude_justified)

        if mode is WindowMode.CUSTOM:
            start, end = parse_date(start_text), parse_date(end_text)
            if not start or not end:
                raise ValidationError("Período personalizado inválido (use dd/mm/aaaa)")
            return AggregationFilter(start, end, selected, exclude_justified)

        if mode is WindowMode.BIMESTERS and selected:
            first, last = ranges.get(min(selected)), ranges.get(max(selected))
            return AggregationFilter(
                first.start if first else None,
                last.end if last else None,
                selected,
                exclude_justified,
            )

        return AggregationFilter(None, None, selected, exclude_justified)

    def frequency(self, flt: AggregationFilter) -> FrequencyReport:
        if not flt.window_start or not flt.window_end:
            return FrequencyReport()

        academic_year = self._academic_years.get()
        roster = self._students.list_roster(active_only=True)
        events = self._absences.list_all()

        calendars = academic_year.calendars()
        students = aggregate_by_student(roster, events, calendars, flt=flt)
        school_days = count_school_days(calendars, flt)
        return FrequencyReport(
            students=students,
            turmas=aggregate_by_turma(students),
            bimester_totals=bimester_totals(students),
            school_days=school_days,
            kpis=compute_kpis(students, school_days),
        )

    def alerts(self, flt: AggregationFilter) -> dict[AlertLevel, list[StudentAggregate]]:
        students = self.frequency(flt).students
        return {
            AlertLevel.NEAR_LIMIT: students_at(AlertLevel.NEAR_LIMIT, students),
            AlertLevel.AT_RISK: students_at(AlertLevel.AT_RISK, students),
        }

    def day_of_week(self, flt: AggregationFilter) -> DayOfWeekAggregate:
        academic_year = self._academic_years.get()
        roster = self._students.list_roster(active_only=True)
        return aggregate_by_day_of_week(
            self._absences.list_all(),
            flt.window_start,
            flt.window_end,
            flt.bimesters,
            academic_year.ranges(),
            flt.exclude_justified,
            turmas=sort_turmas(s.turma for s in roster),
        )

    def heatmap(self, flt: AggregationFilter) -> list[dict]:
        """Turma x bimester matrix with a color per cell."""
        rows = turma_bimester_matrix(self.frequency(flt).students)
        max_value = max((v for r in rows for v in r.values), default=0)
        return [
            {
                "turma": r.turma,
                "cells": [
                    {"bimester": i + 1, "absences": v, "color": to_css(color_for(v, max_value))}
                    for i, v in enumerate(r.values)
                ],
            }
            for r in rows
        ]

    def student_absences(self, student_id: str, *, exclude_justified: bool = False) -> dict[int, list[date]]:
        ranges = self._academic_years.get().ranges()
        return student_absence_dates(
            student_id, self._absences.list_all(), ranges, exclude_justified=exclude_justified
        )

    def duplicates(self) -> list[AbsenceEvent]:
        return find_duplicates(self._absences.list_all())

    def remove_duplicates(self) -> int:
        """Delete every duplicate mark but the first of each (student, day)."""
        to_remove = select_for_removal(self._absences.list_all())
        removed = self._absences.delete_many(ev.doc_id for ev in to_remove)
        logger.info("removed %s duplicated absence marks", removed)
        return removed

    def welfare_report_csv(self, *, months: Iterable[int] = range(1, 13)) -> bytes:
        months = list(months)
        if any(m < 1 or m > 12 for m in months):
            raise ValidationError("Mês inválido")
        rows = welfare.build_rows(
            self._students.welfare_roster(),
            self._absences.list_all(),
            months=months,
            year=self._academic_years.school_year,
        )
        return welfare.to_csv_bytes(rows)
