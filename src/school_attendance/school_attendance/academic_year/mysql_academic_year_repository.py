from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import AcademicYearRepository


class MySQLAcademicYearRepository(AcademicYearRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_document(self, school_year: int) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT document FROM academic_years WHERE school_year=%s", (int(school_year),))
            r = fetchone(cur)
            if not r:
                return None
            raw = r["document"]
            if isinstance(raw, (bytes, bytearray)):
                raw = raw.decode("utf-8")
            return json.loads(raw) if isinstance(raw, str) else dict(raw)

    def save_document(self, school_year: int, document: dict) -> None:
        payload = json.dumps(document, ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO academic_years(school_year, document)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE document=VALUES(document)
                """,
                (int(school_year), payload),
            )
