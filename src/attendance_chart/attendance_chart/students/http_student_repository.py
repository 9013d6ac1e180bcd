from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from ..core.exceptions import FetchFailure
from ..datasource.connection import ApiConnection
from ..datasource.http_base import fetch_records
from .model import StudentRecord

logger = logging.getLogger(__name__)


class HttpStudentRepository:
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_roster(self) -> Sequence[StudentRecord]:
        rows = fetch_records(self._conn, self._conn.config.students_url, source="students")
        try:
            return self._rows_to_roster(rows)
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Student payload has an unusable record: %s", e)
            raise FetchFailure("Failed to fetch students (bad record)", source="students") from e

    @staticmethod
    def _rows_to_roster(rows: List[Dict[str, Any]]) -> tuple[StudentRecord, ...]:
        seen: set[int] = set()
        roster: list[StudentRecord] = []
        for r in rows:
            student_id = int(r["id"])
            if student_id in seen:
                # Roster is a set keyed on id: first record wins.
                logger.warning("Duplicate student id %s in roster, keeping the first", student_id)
                continue
            seen.add(student_id)
            roster.append(StudentRecord(id=student_id, name=str(r.get("name", ""))))
        return tuple(roster)
