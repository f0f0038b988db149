from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from .model import AbsenceEvent


class AbsenceRepository(Protocol):
    def list_all(self) -> Sequence[AbsenceEvent]:
        """All absence marks in store order."""

        raise NotImplementedError

    def delete_many(self, doc_ids: Iterable[str]) -> int:
        """Delete marks by store id. Returns how many rows went away."""

        raise NotImplementedError
