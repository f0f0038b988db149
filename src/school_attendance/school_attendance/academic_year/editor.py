from __future__ import annotations

import logging
from datetime import date

from ..common.datetime_utils import format_date, format_masked_input, parse_date
from ..core.enums import CalendarSyncState
from .bimester_calendar import build_calendar, toggle
from .model import BimesterConfig, SchoolDay

logger = logging.getLogger(__name__)


def _normalize(text: str) -> str:
    # Complete dates in either accepted format are stored as dd/mm/yyyy;
    # anything else is partial typing and gets the input mask.
    parsed = parse_date(text)
    if parsed:
        return format_date(parsed)
    return format_masked_input(text)


class BimesterEditor:
    """Editing state of one bimester card.

    While SYNCED the day list follows persisted data and start/end. Any user
    edit moves it to DIVERGED for good: from then on background reloads are
    ignored and the day list is rebuilt only when start or end actually
    change.
    """

    def __init__(self, number: int):
        self.number = number
        self.start_text = ""
        self.end_text = ""
        self.days: tuple[SchoolDay, ...] = ()
        self.state = CalendarSyncState.SYNCED

    @classmethod
    def from_config(cls, config: BimesterConfig) -> "BimesterEditor":
        editor = cls(config.number)
        editor.load_persisted(config)
        return editor

    def load_persisted(self, config: BimesterConfig) -> bool:
        """Adopt stored data. Returns False when ignored (DIVERGED)."""
        if self.state is CalendarSyncState.DIVERGED:
            logger.debug("bimester %s diverged; ignoring persisted reload", self.number)
            return False

        self.start_text = config.start_text
        self.end_text = config.end_text
        if config.days:
            self.days = tuple(config.days)
        else:
            self.days = build_calendar(parse_date(self.start_text), parse_date(self.end_text))
        return True

    def edit_start(self, text: str) -> None:
        normalized = _normalize(text)
        self.state = CalendarSyncState.DIVERGED
        if normalized == self.start_text:
            return
        self.start_text = normalized
        self._rebuild()

    def edit_end(self, text: str) -> None:
        normalized = _normalize(text)
        self.state = CalendarSyncState.DIVERGED
        if normalized == self.end_text:
            return
        self.end_text = normalized
        self._rebuild()

    def toggle_day(self, day: date) -> None:
        self.state = CalendarSyncState.DIVERGED
        self.days = toggle(self.days, day)

    def _rebuild(self) -> None:
        start = parse_date(self.start_text)
        end = parse_date(self.end_text)
        if not start or not end:
            # Incomplete or invalid text: keep the last good calendar.
            return
        self.days = build_calendar(start, end)

    def snapshot(self) -> BimesterConfig:
        return BimesterConfig(
            number=self.number,
            start_text=self.start_text,
            end_text=self.end_text,
            days=self.days,
        )
