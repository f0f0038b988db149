"""Monthly absence report for students in the cash-transfer programme."""

from __future__ import annotations

import csv
import io
from typing import Iterable, Optional, Sequence

from ..absences.aggregator import monthly_absences
from ..absences.model import AbsenceEvent
from ..students.model import Student

MONTH_LABELS = {
    1: "Jan", 2: "Fev", 3: "Mar", 4: "Abr", 5: "Mai", 6: "Jun",
    7: "Jul", 8: "Ago", 9: "Set", 10: "Out", 11: "Nov", 12: "Dez",
}


def build_rows(
    students: Sequence[Student],
    events: Sequence[AbsenceEvent],
    *,
    months: Iterable[int] = range(1, 13),
    year: Optional[int] = None,
) -> list[dict]:
    months = sorted(set(months))
    rows = []
    for s in students:
        per_month = monthly_absences(s.student_id, events, year=year)
        row = {"estudante_id": s.student_id, "nome": s.name, "turma": s.turma}
        for m in months:
            row[MONTH_LABELS[m]] = per_month[m]
        row["total"] = sum(per_month[m] for m in months)
        rows.append(row)
    return rows


def to_csv_bytes(rows: Sequence[dict]) -> bytes:
    """CSV with BOM so spreadsheet apps pick up UTF-8 names."""
    if not rows:
        return "".encode("utf-8-sig")
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(rows[0].keys()), extrasaction="ignore")
    writer.writeheader()
    writer.writerows(rows)
    return out.getvalue().encode("utf-8-sig")
