from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import parse_date
from ..core.constants import BIMESTERS
from ..core.exceptions import ValidationError
from .bimester_calendar import count_eligible_in_window, eligible_union
from .document import config_to_document, year_from_document, year_to_document
from .editor import BimesterEditor
from .model import AcademicYear, BimesterConfig, SchoolDayTotals
from .repository import AcademicYearRepository

logger = logging.getLogger(__name__)


class AcademicYearService:
    """Use cases around the academic-year (bimester) configuration."""

    def __init__(self, academic_years: AcademicYearRepository, *, school_year: int):
        self._academic_years = academic_years
        self._school_year = int(school_year)

    @property
    def school_year(self) -> int:
        return self._school_year

    def get(self) -> AcademicYear:
        doc = self._academic_years.get_document(self._school_year)
        return year_from_document(self._school_year, doc)

    def save_document(self, document: dict) -> AcademicYear:
        if not isinstance(document, dict):
            raise ValidationError("Documento do ano letivo inválido")

        academic_year = year_from_document(self._school_year, document)
        self._academic_years.save_document(self._school_year, year_to_document(academic_year))
        logger.info("academic year %s saved", self._school_year)
        return academic_year

    def edit_bimester(
        self,
        number: int,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
        toggle_dates: Iterable[str] = (),
    ) -> BimesterConfig:
        if number not in BIMESTERS:
            raise ValidationError(f"Bimestre inválido: {number}")

        academic_year = self.get()
        editor = BimesterEditor.from_config(academic_year.bimesters.get(number) or BimesterConfig(number=number))

        if start is not None:
            editor.edit_start(start)
        if end is not None:
            editor.edit_end(end)
        for text in toggle_dates:
            day = parse_date(text)
            if not day:
                raise ValidationError(f"Data inválida: {text}")
            editor.toggle_day(day)

        updated = editor.snapshot()
        bimesters = dict(academic_year.bimesters)
        bimesters[number] = updated
        self._academic_years.save_document(
            self._school_year, year_to_document(AcademicYear(year=self._school_year, bimesters=bimesters))
        )
        logger.info("bimester %s updated (%s days)", number, len(updated.days))
        return updated

    def school_day_totals(
        self,
        *,
        window_start: Optional[date] = None,
        window_end: Optional[date] = None,
        academic_year: Optional[AcademicYear] = None,
    ) -> SchoolDayTotals:
        """Counted school days per bimester (inside its own range) and in a window."""

        academic_year = academic_year or self.get()
        ranges = academic_year.ranges()
        per_bimester: dict[int, int] = {}
        for number in BIMESTERS:
            config = academic_year.bimesters.get(number)
            r = ranges.get(number)
            if config and r:
                per_bimester[number] = count_eligible_in_window(config.days, r.start, r.end)

        union = eligible_union(academic_year.calendars().values())
        in_window = 0
        if window_start and window_end:
            in_window = sum(1 for d in union if window_start <= d <= window_end)

        return SchoolDayTotals(
            b1=per_bimester.get(1, 0),
            b2=per_bimester.get(2, 0),
            b3=per_bimester.get(3, 0),
            b4=per_bimester.get(4, 0),
            annual=len(union),
            in_window=in_window,
        )

    def to_document(self, academic_year: AcademicYear) -> dict:
        return year_to_document(academic_year)

    def bimester_document(self, config: BimesterConfig) -> dict:
        return config_to_document(config)
