from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from ..common.datetime_utils import is_iso_date
from ..core.exceptions import FetchFailure
from ..datasource.connection import ApiConnection
from ..datasource.http_base import fetch_records
from .model import AttendanceLogEntry

logger = logging.getLogger(__name__)


class HttpAttendanceRepository:
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_logs(self) -> Sequence[AttendanceLogEntry]:
        rows = fetch_records(self._conn, self._conn.config.attendance_url, source="attendance logs")
        try:
            return self._rows_to_logs(rows)
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Attendance payload has an unusable record: %s", e)
            raise FetchFailure("Failed to fetch attendance logs (bad record)", source="attendance logs") from e

    @staticmethod
    def _rows_to_logs(rows: List[Dict[str, Any]]) -> tuple[AttendanceLogEntry, ...]:
        # Permissive pass-through: odd or repeated dates are kept, only reported.
        seen: set[str] = set()
        logs: list[AttendanceLogEntry] = []
        for r in rows:
            day = str(r["date"])
            if not is_iso_date(day):
                logger.warning("Attendance log date %r is not YYYY-MM-DD", day)
            if day in seen:
                logger.warning("Attendance log date %s appears more than once", day)
            seen.add(day)
            present = tuple(int(i) for i in (r.get("present") or ()))
            logs.append(AttendanceLogEntry(date=day, present_ids=present))
        return tuple(logs)
