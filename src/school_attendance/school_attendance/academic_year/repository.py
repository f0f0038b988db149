from __future__ import annotations

from typing import Optional, Protocol


class AcademicYearRepository(Protocol):
    def get_document(self, school_year: int) -> Optional[dict]:
        """Stored academic-year document, or None if never saved."""

        raise NotImplementedError

    def save_document(self, school_year: int, document: dict) -> None:
        raise NotImplementedError
