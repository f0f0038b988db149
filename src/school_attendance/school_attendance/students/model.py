from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student on the roster. Identity is ``student_id``."""

    student_id: str
    turma: str
    name: str
    status: str = "ATIVO"
    welfare_flag: bool = False
    shift: Optional[str] = None
