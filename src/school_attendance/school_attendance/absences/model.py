from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AbsenceEvent:
    """One absence mark: a student missed school on ``day``.

    ``turma`` is the class at the time the mark was made. ``doc_id`` is the
    store id, only needed to delete duplicates.
    """

    student_id: str
    turma: str
    day: date
    doc_id: str = ""
    justified: bool = False


@dataclass(frozen=True)
class AggregationFilter:
    """Dashboard filter bar.

    ``bimesters`` empty means every bimester. A window with a missing bound
    matches nothing.
    """

    window_start: Optional[date] = None
    window_end: Optional[date] = None
    bimesters: frozenset[int] = field(default_factory=frozenset)
    exclude_justified: bool = False

    def in_window(self, day: date) -> bool:
        if not self.window_start or not self.window_end:
            return False
        return self.window_start <= day <= self.window_end

    def accepts_bimester(self, number: int) -> bool:
        if not self.bimesters:
            return True
        return number != 0 and number in self.bimesters


@dataclass(frozen=True)
class StudentAggregate:
    """Read-model: absences of one student per bimester. Never persisted."""

    student_id: str
    turma: str
    name: str
    b1: int
    b2: int
    b3: int
    b4: int
    school_days: int
    absence_percent: float
    attendance_percent: float

    @property
    def total(self) -> int:
        return self.b1 + self.b2 + self.b3 + self.b4

    def for_bimester(self, number: int) -> int:
        return {1: self.b1, 2: self.b2, 3: self.b3, 4: self.b4}.get(number, 0)


@dataclass(frozen=True)
class TurmaAggregate:
    turma: str
    students: int
    mean_absences: float
    mean_attendance_percent: float


@dataclass(frozen=True)
class TurmaBimesterRow:
    """Absences of a whole turma per bimester (heatmap row)."""

    turma: str
    b1: int
    b2: int
    b3: int
    b4: int

    @property
    def values(self) -> tuple[int, int, int, int]:
        return (self.b1, self.b2, self.b3, self.b4)


@dataclass(frozen=True)
class DayOfWeekAggregate:
    """Absence counts per weekday, 0=Sunday .. 6=Saturday."""

    overall: tuple[int, ...]
    by_turma: dict[str, tuple[int, ...]]
