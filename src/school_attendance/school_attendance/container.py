from __future__ import annotations

from dataclasses import dataclass

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.service import AttendanceAnalyticsService
from .academic_year.mysql_academic_year_repository import MySQLAcademicYearRepository
from .academic_year.service import AcademicYearService
from .database.connection import DBConfig, DatabaseConnection
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    academic_years_repo: MySQLAcademicYearRepository
    students_repo: MySQLStudentRepository
    absences_repo: MySQLAbsenceRepository

    academic_year_service: AcademicYearService
    student_service: StudentService
    analytics_service: AttendanceAnalyticsService


def build_container(*, db_config: dict, school_year: int) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    academic_years_repo = MySQLAcademicYearRepository(conn)
    students_repo = MySQLStudentRepository(conn)
    absences_repo = MySQLAbsenceRepository(conn)

    academic_year_service = AcademicYearService(academic_years_repo, school_year=school_year)
    student_service = StudentService(students_repo)
    analytics_service = AttendanceAnalyticsService(absences_repo, student_service, academic_year_service)

    return Container(
        conn=conn,
        academic_years_repo=academic_years_repo,
        students_repo=students_repo,
        absences_repo=absences_repo,
        academic_year_service=academic_year_service,
        student_service=student_service,
        analytics_service=analytics_service,
    )
