from __future__ import annotations

import pytest

from src.school_attendance.school_attendance.core.exceptions import ValidationError
from src.school_attendance.school_attendance.students.model import Student
from src.school_attendance.school_attendance.students.service import StudentService


class InMemoryStudents:
    def __init__(self, students=()):
        self.students = list(students)

    def list_all(self):
        return list(self.students)

    def upsert(self, student: Student) -> None:
        self.students = [s for s in self.students if s.student_id != student.student_id] + [student]


def test_roster_backfills_missing_ids_and_skips_inactive():
    repo = InMemoryStudents(
        [
            Student(student_id="", turma="9A", name="Sem Id"),
            Student(student_id="s2", turma="9A", name="Saiu", status="TRANSFERIDO"),
        ]
    )
    roster = StudentService(repo).list_roster()

    assert len(roster) == 1
    assert roster[0].name == "Sem Id"
    assert len(roster[0].student_id) == 32

    assert len(StudentService(repo).list_roster(active_only=False)) == 2


def test_welfare_roster_sorted_by_name():
    repo = InMemoryStudents(
        [
            Student(student_id="1", turma="9A", name="bruno", welfare_flag=True),
            Student(student_id="2", turma="9A", name="Ana", welfare_flag=True),
            Student(student_id="3", turma="9A", name="Caio"),
        ]
    )

    assert [s.name for s in StudentService(repo).welfare_roster()] == ["Ana", "bruno"]


def test_register_normalizes_and_stores():
    repo = InMemoryStudents()
    student = StudentService(repo).register(name="  Ana  ", turma="9a", shift="MANHÃ")

    assert student.name == "Ana"
    assert student.turma == "9A"
    assert repo.students == [student]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "turma": "9A"},
        {"name": "Ana", "turma": "A9"},
        {"name": "Ana", "turma": "9A", "status": "???"},
        {"name": "Ana", "turma": "9A", "shift": "NOITE"},
    ],
)
def test_register_rejects_bad_input(kwargs):
    with pytest.raises(ValidationError):
        StudentService(InMemoryStudents()).register(**kwargs)
