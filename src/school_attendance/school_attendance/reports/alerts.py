from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..absences.model import StudentAggregate
from ..common.numbers import percent, round_half_up
from ..core.constants import (
    AT_RISK_ABSENCE_PERCENT,
    GOOD_FREQUENCY_PERCENT,
    NEAR_LIMIT_ABSENCE_PERCENT,
    WARNING_FREQUENCY_PERCENT,
)
from ..core.enums import AlertLevel, FrequencyBand


@dataclass(frozen=True)
class Kpis:
    total_students: int
    compliant: int
    near_limit: int
    at_risk: int
    percent_compliant: float
    mean_absences_per_school_day: float


def alert_level(absence_percent: float) -> AlertLevel:
    if absence_percent >= AT_RISK_ABSENCE_PERCENT:
        return AlertLevel.AT_RISK
    if absence_percent >= NEAR_LIMIT_ABSENCE_PERCENT:
        return AlertLevel.NEAR_LIMIT
    return AlertLevel.REGULAR


def frequency_band(attendance_percent: float) -> FrequencyBand:
    if attendance_percent >= GOOD_FREQUENCY_PERCENT:
        return FrequencyBand.GOOD
    if attendance_percent >= WARNING_FREQUENCY_PERCENT:
        return FrequencyBand.WARNING
    return FrequencyBand.CRITICAL


def students_at(level: AlertLevel, aggregates: Iterable[StudentAggregate]) -> list[StudentAggregate]:
    """Students at an alert level, worst first."""
    out = [a for a in aggregates if alert_level(a.absence_percent) is level]
    out.sort(key=lambda a: a.absence_percent, reverse=True)
    return out


def compute_kpis(aggregates: Sequence[StudentAggregate], school_days: int) -> Kpis:
    levels = [alert_level(a.absence_percent) for a in aggregates]
    total = len(aggregates)
    at_risk = levels.count(AlertLevel.AT_RISK)
    compliant = total - at_risk
    mean = round_half_up(sum(a.total for a in aggregates) / school_days, 1) if school_days else 0.0
    return Kpis(
        total_students=total,
        compliant=compliant,
        near_limit=levels.count(AlertLevel.NEAR_LIMIT),
        at_risk=at_risk,
        percent_compliant=round_half_up(percent(compliant, total), 1),
        mean_absences_per_school_day=mean,
    )
