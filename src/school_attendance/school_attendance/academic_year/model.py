from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_date


@dataclass(frozen=True)
class SchoolDay:
    """A calendar day of a bimester and whether it counts as a school day."""

    day: date
    counts: bool


@dataclass(frozen=True)
class BimesterRange:
    number: int
    start: date
    end: date

    @property
    def is_well_formed(self) -> bool:
        return self.start <= self.end

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end


@dataclass(frozen=True)
class BimesterConfig:
    """One bimester as stored in the academic-year document."""

    number: int
    start_text: str = ""
    end_text: str = ""
    days: tuple[SchoolDay, ...] = field(default_factory=tuple)

    @property
    def range(self) -> Optional[BimesterRange]:
        start = parse_date(self.start_text)
        end = parse_date(self.end_text)
        if not start or not end:
            return None
        return BimesterRange(number=self.number, start=start, end=end)


@dataclass(frozen=True)
class AcademicYear:
    year: int
    bimesters: dict[int, BimesterConfig] = field(default_factory=dict)

    def ranges(self) -> dict[int, BimesterRange]:
        out: dict[int, BimesterRange] = {}
        for number, config in self.bimesters.items():
            r = config.range
            if r:
                out[number] = r
        return out

    def calendars(self) -> dict[int, tuple[SchoolDay, ...]]:
        return {number: config.days for number, config in self.bimesters.items()}


@dataclass(frozen=True)
class SchoolDayTotals:
    """Counted school days per bimester, for the year, and inside a window.

    ``annual`` and ``in_window`` count distinct days, so they can be smaller
    than the sum of the bimesters when calendars overlap.
    """

    b1: int = 0
    b2: int = 0
    b3: int = 0
    b4: int = 0
    annual: int = 0
    in_window: int = 0
