from __future__ import annotations

from datetime import date
from typing import Iterable

from .model import AbsenceEvent


def _groups(events: Iterable[AbsenceEvent]) -> dict[tuple[str, date], list[AbsenceEvent]]:
    groups: dict[tuple[str, date], list[AbsenceEvent]] = {}
    for ev in events:
        groups.setdefault((ev.student_id, ev.day), []).append(ev)
    return groups


def find_duplicates(events: Iterable[AbsenceEvent]) -> list[AbsenceEvent]:
    """Every member of each (student, day) group that has more than one event.

    The whole group is returned so the operator sees which mark survives.
    """

    return [ev for group in _groups(events).values() if len(group) > 1 for ev in group]


def select_for_removal(events: Iterable[AbsenceEvent]) -> list[AbsenceEvent]:
    """Removal policy: keep the first event of each group (store order)."""
    return [ev for group in _groups(events).values() if len(group) > 1 for ev in group[1:]]
