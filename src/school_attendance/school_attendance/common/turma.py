from __future__ import annotations

import re
from typing import Iterable

_TURMA_RE = re.compile(r"^(\d+)([A-Za-z]+)$")


def is_valid_turma(label: str) -> bool:
    return bool(_TURMA_RE.match((label or "").strip()))


def turma_sort_key(label: str) -> tuple:
    """Order "9A" < "9B" < "10A": numeric grade first, then the letters.

    Labels that do not look like <number><letters> go last, alphabetically.
    """

    m = _TURMA_RE.match((label or "").strip())
    if not m:
        return (1, 0, label or "")
    return (0, int(m.group(1)), m.group(2))


def sort_turmas(labels: Iterable[str]) -> list[str]:
    return sorted(set(labels), key=turma_sort_key)
