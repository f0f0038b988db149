"""Codec for the stored academic-year document.

Shape (dates as dd/mm/yyyy text)::

    {"1º Bimestre": {"startDate": "03/02/2025", "endDate": "...",
                     "dates": [{"date": "03/02/2025", "isChecked": true}, ...]},
     ...}
"""

from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import format_date, parse_date
from ..core.constants import BIMESTER_KEYS
from .model import AcademicYear, BimesterConfig, SchoolDay


def config_from_document(number: int, entry: Mapping[str, Any] | None) -> BimesterConfig:
    entry = entry or {}
    days: list[SchoolDay] = []
    for item in entry.get("dates") or []:
        parsed = parse_date(item.get("date"))
        if parsed:
            days.append(SchoolDay(day=parsed, counts=bool(item.get("isChecked"))))
    days.sort(key=lambda d: d.day)
    return BimesterConfig(
        number=number,
        start_text=str(entry.get("startDate") or ""),
        end_text=str(entry.get("endDate") or ""),
        days=tuple(days),
    )


def config_to_document(config: BimesterConfig) -> dict:
    return {
        "startDate": config.start_text,
        "endDate": config.end_text,
        "dates": [{"date": format_date(d.day), "isChecked": d.counts} for d in config.days],
    }


def year_from_document(year: int, doc: Mapping[str, Any] | None) -> AcademicYear:
    doc = doc or {}
    return AcademicYear(
        year=year,
        bimesters={number: config_from_document(number, doc.get(key)) for number, key in BIMESTER_KEYS.items()},
    )


def year_to_document(academic_year: AcademicYear) -> dict:
    out: dict[str, dict] = {}
    for number, key in BIMESTER_KEYS.items():
        config = academic_year.bimesters.get(number) or BimesterConfig(number=number)
        out[key] = config_to_document(config)
    return out
