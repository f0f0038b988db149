from __future__ import annotations

from typing import Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    def list_all(self) -> Sequence[Student]:
        """Whole roster, including records whose id is still empty."""

        raise NotImplementedError

    def upsert(self, student: Student) -> None:
        raise NotImplementedError
