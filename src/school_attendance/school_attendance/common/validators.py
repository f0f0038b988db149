from __future__ import annotations

from ..core.exceptions import ValidationError
from .turma import is_valid_turma


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} inválido")
    return value.strip()


def require_turma(value: str) -> str:
    value = require_non_empty(value, "Turma").upper()
    if not is_valid_turma(value):
        raise ValidationError(f"Turma inválida: {value} (ex.: 9A)")
    return value
