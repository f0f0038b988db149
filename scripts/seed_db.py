"""Seed a demo academic year and a handful of students."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container

DEMO_BIMESTERS = {
    1: ("03/02/2025", "11/04/2025"),
    2: ("14/04/2025", "11/07/2025"),
    3: ("28/07/2025", "03/10/2025"),
    4: ("06/10/2025", "19/12/2025"),
}

DEMO_STUDENTS = [
    ("Ana Souza", "9A", True),
    ("Bruno Lima", "9A", False),
    ("Carla Mendes", "9B", False),
    ("Diego Rocha", "10A", True),
]


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, school_year=settings.SCHOOL_YEAR)

    for number, (start, end) in DEMO_BIMESTERS.items():
        container.academic_year_service.edit_bimester(number, start=start, end=end)
    for name, turma, welfare_flag in DEMO_STUDENTS:
        container.student_service.register(name=name, turma=turma, welfare_flag=welfare_flag)

    totals = container.academic_year_service.school_day_totals()
    print(f"OK: seeded year {settings.SCHOOL_YEAR} ({totals.annual} school days, {len(DEMO_STUDENTS)} students)")


if __name__ == "__main__":
    main()
