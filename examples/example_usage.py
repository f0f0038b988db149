"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the aggregation rules live in services and
pure functions.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.core.enums import WindowMode


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, school_year=settings.SCHOOL_YEAR)
    analytics = container.analytics_service

    report = analytics.frequency(analytics.build_filter(WindowMode.BIMESTERS, selected=[1, 2]))
    for t in report.turmas:
        print(t.turma, t.mean_absences, t.mean_attendance_percent)


if __name__ == "__main__":
    main()
