from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, turma, name, status, welfare_flag, shift
                FROM students
                ORDER BY name
                """
            )
            rows = fetchall(cur)
            return [
                Student(
                    student_id=str(r.get("student_id") or ""),
                    turma=str(r["turma"]),
                    name=str(r["name"]),
                    status=str(r.get("status") or ""),
                    welfare_flag=bool(r.get("welfare_flag")),
                    shift=r.get("shift"),
                )
                for r in rows
            ]

    def upsert(self, student: Student) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(student_id, turma, name, status, welfare_flag, shift)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    turma=VALUES(turma), name=VALUES(name), status=VALUES(status),
                    welfare_flag=VALUES(welfare_flag), shift=VALUES(shift)
                """,
                (
                    student.student_id,
                    student.turma,
                    student.name,
                    student.status,
                    1 if student.welfare_flag else 0,
                    student.shift,
                ),
            )
