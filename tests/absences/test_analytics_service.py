from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.school_attendance.school_attendance.absences.model import AbsenceEvent
from src.school_attendance.school_attendance.absences.service import AttendanceAnalyticsService
from src.school_attendance.school_attendance.academic_year.service import AcademicYearService
from src.school_attendance.school_attendance.core.enums import AlertLevel, WindowMode
from src.school_attendance.school_attendance.core.exceptions import ValidationError
from src.school_attendance.school_attendance.students.model import Student
from src.school_attendance.school_attendance.students.service import StudentService


class InMemoryAcademicYears:
    def __init__(self):
        self.docs: dict[int, dict] = {}

    def get_document(self, school_year: int) -> Optional[dict]:
        return self.docs.get(school_year)

    def save_document(self, school_year: int, document: dict) -> None:
        self.docs[school_year] = document


class InMemoryStudents:
    def __init__(self, students):
        self.students = list(students)

    def list_all(self):
        return list(self.students)

    def upsert(self, student):
        self.students.append(student)


class InMemoryAbsences:
    def __init__(self, events):
        self.events = list(events)

    def list_all(self):
        return list(self.events)

    def delete_many(self, doc_ids):
        ids = set(doc_ids)
        before = len(self.events)
        self.events = [e for e in self.events if e.doc_id not in ids]
        return before - len(self.events)


def _build(events, *, today=date(2025, 2, 12), roster=None):
    years = AcademicYearService(InMemoryAcademicYears(), school_year=2025)
    years.edit_bimester(1, start="03/02/2025", end="07/02/2025")
    years.edit_bimester(2, start="10/02/2025", end="14/02/2025")
    if roster is None:
        roster = [
            Student(student_id="s1", turma="9A", name="Ana", welfare_flag=True),
            Student(student_id="s2", turma="10A", name="Bruno"),
        ]
    students = StudentService(InMemoryStudents(roster))
    absences = InMemoryAbsences(events)
    return AttendanceAnalyticsService(absences, students, years, clock=lambda: today), absences


def _ev(doc_id, student_id, day, turma="9A", justified=False):
    return AbsenceEvent(student_id=student_id, turma=turma, day=day, doc_id=doc_id, justified=justified)


def test_build_filter_modes():
    svc, _ = _build([])

    today = svc.build_filter(WindowMode.TODAY, selected=[2])
    assert (today.window_start, today.window_end, today.bimesters) == (date(2025, 2, 3), date(2025, 2, 12), frozenset())

    bims = svc.build_filter(WindowMode.BIMESTERS, selected=[2, 1])
    assert (bims.window_start, bims.window_end) == (date(2025, 2, 3), date(2025, 2, 14))

    custom = svc.build_filter(WindowMode.CUSTOM, start_text="04/02/2025", end_text="2025-02-06", exclude_justified=True)
    assert (custom.window_start, custom.window_end, custom.exclude_justified) == (date(2025, 2, 4), date(2025, 2, 6), True)

    nothing = svc.build_filter(WindowMode.BIMESTERS)
    assert nothing.window_start is None


def test_build_filter_rejects_bad_custom_dates():
    svc, _ = _build([])
    with pytest.raises(ValidationError):
        svc.build_filter(WindowMode.CUSTOM, start_text="04/02", end_text="06/02/2025")


def test_frequency_report():
    events = [
        _ev("a", "s1", date(2025, 2, 5)),
        _ev("b", "s1", date(2025, 2, 6)),
        _ev("c", "s1", date(2025, 2, 11)),
        _ev("d", "s2", date(2025, 2, 12), turma="10A"),
    ]
    svc, _ = _build(events)

    report = svc.frequency(svc.build_filter(WindowMode.BIMESTERS, selected=[1, 2]))

    assert report.school_days == 10
    ana, bruno = report.students
    assert (ana.b1, ana.b2, ana.absence_percent) == (2, 1, 30.0)
    assert (bruno.b2, bruno.attendance_percent) == (1, 90.0)
    assert [t.turma for t in report.turmas] == ["9A", "10A"]
    assert report.bimester_totals == {1: 2, 2: 2, 3: 0, 4: 0}
    assert report.kpis.at_risk == 1

    alerts = svc.alerts(svc.build_filter(WindowMode.BIMESTERS, selected=[1, 2]))
    assert [a.student_id for a in alerts[AlertLevel.AT_RISK]] == ["s1"]


def test_frequency_school_days_without_active_students():
    svc, _ = _build([_ev("a", "s1", date(2025, 2, 5))], roster=[])

    report = svc.frequency(svc.build_filter(WindowMode.BIMESTERS, selected=[1, 2]))

    assert report.students == []
    assert report.school_days == 10
    assert report.kpis.total_students == 0


def test_frequency_without_window_is_empty():
    svc, _ = _build([_ev("a", "s1", date(2025, 2, 5))])
    report = svc.frequency(svc.build_filter(WindowMode.NONE))

    assert report.students == []
    assert report.kpis is None


def test_day_of_week_includes_roster_turmas():
    svc, _ = _build([_ev("a", "s1", date(2025, 2, 5))])
    stats = svc.day_of_week(svc.build_filter(WindowMode.TODAY))

    assert stats.overall[3] == 1
    assert list(stats.by_turma) == ["9A", "10A"]


def test_remove_duplicates_keeps_first_mark():
    events = [
        _ev("a", "s1", date(2025, 2, 5)),
        _ev("b", "s1", date(2025, 2, 5)),
        _ev("c", "s2", date(2025, 2, 5), turma="10A"),
    ]
    svc, absences = _build(events)

    assert [e.doc_id for e in svc.duplicates()] == ["a", "b"]
    assert svc.remove_duplicates() == 1
    assert [e.doc_id for e in absences.events] == ["a", "c"]
    assert svc.duplicates() == []


def test_heatmap_colors_cells_against_max():
    events = [_ev("a", "s1", date(2025, 2, 5)), _ev("b", "s1", date(2025, 2, 6))]
    svc, _ = _build(events)

    rows = svc.heatmap(svc.build_filter(WindowMode.BIMESTERS, selected=[1, 2]))

    assert rows[0]["turma"] == "9A"
    assert rows[0]["cells"][0] == {"bimester": 1, "absences": 2, "color": "rgb(255, 0, 0)"}
    assert rows[1]["cells"][0]["color"] == "rgb(255, 200, 200)"


def test_welfare_report_csv():
    svc, _ = _build([_ev("a", "s1", date(2025, 2, 5)), _ev("b", "s1", date(2025, 3, 5))])

    text = svc.welfare_report_csv(months=[2, 3]).decode("utf-8-sig")
    lines = text.strip().splitlines()

    assert lines[0] == "estudante_id,nome,turma,Fev,Mar,total"
    assert lines[1] == "s1,Ana,9A,1,1,2"
    assert len(lines) == 2

    with pytest.raises(ValidationError):
        svc.welfare_report_csv(months=[13])
