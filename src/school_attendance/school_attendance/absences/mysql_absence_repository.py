from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..common.datetime_utils import parse_date
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AbsenceEvent
from .repository import AbsenceRepository

logger = logging.getLogger(__name__)


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AbsenceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT doc_id, student_id, turma, absence_date, justified
                FROM absences
                ORDER BY created_at, doc_id
                """
            )
            rows = fetchall(cur)

        events: list[AbsenceEvent] = []
        for r in rows:
            # absence_date is stored as yyyy-mm-dd text.
            day = parse_date(str(r["absence_date"]))
            if not day:
                logger.warning("skipping absence %s with bad date %r", r["doc_id"], r["absence_date"])
                continue
            events.append(
                AbsenceEvent(
                    student_id=str(r["student_id"]),
                    turma=str(r.get("turma") or ""),
                    day=day,
                    doc_id=str(r["doc_id"]),
                    justified=bool(r.get("justified")),
                )
            )
        return events

    def delete_many(self, doc_ids: Iterable[str]) -> int:
        ids = [str(i) for i in doc_ids]
        if not ids:
            return 0
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM absences WHERE doc_id IN ({placeholders})", tuple(ids))
            return int(cur.rowcount or 0)
