from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional
from uuid import uuid4

from ..common.validators import require_non_empty, require_turma
from ..core.enums import SchoolShift, StudentStatus
from ..core.exceptions import ValidationError
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def new_student_id() -> str:
    return uuid4().hex


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def list_roster(self, *, active_only: bool = True) -> list[Student]:
        """Roster with ids backfilled for legacy records that have none."""

        roster: list[Student] = []
        for s in self._students.list_all():
            if not s.student_id:
                s = replace(s, student_id=new_student_id())
                logger.warning("student %r had no id; generated %s", s.name, s.student_id)
            if active_only and s.status != StudentStatus.ACTIVE.value:
                continue
            roster.append(s)
        return roster

    def welfare_roster(self) -> list[Student]:
        """Active students in the cash-transfer programme, by name."""
        students = [s for s in self.list_roster(active_only=True) if s.welfare_flag]
        students.sort(key=lambda s: s.name.casefold())
        return students

    def register(
        self,
        *,
        name: str,
        turma: str,
        status: str = StudentStatus.ACTIVE.value,
        welfare_flag: bool = False,
        shift: Optional[str] = None,
        student_id: Optional[str] = None,
    ) -> Student:
        name = require_non_empty(name, "Nome")
        turma = require_turma(turma)

        valid_status = {s.value for s in StudentStatus}
        if status not in valid_status:
            raise ValidationError(f"Situação inválida: {status}")
        if shift is not None and shift not in {s.value for s in SchoolShift}:
            raise ValidationError(f"Turno inválido: {shift}")

        student = Student(
            student_id=(student_id or "").strip() or new_student_id(),
            turma=turma,
            name=name,
            status=status,
            welfare_flag=bool(welfare_flag),
            shift=shift,
        )
        self._students.upsert(student)
        return student
