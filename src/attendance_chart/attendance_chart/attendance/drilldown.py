from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import to_display_date
from ..core.constants import UNKNOWN_STUDENT_LABEL
from ..core.enums import AttendanceStatus
from ..students.model import StudentRecord
from .model import AttendanceLogEntry, HistoryRow


def find_log(day: str, logs: Sequence[AttendanceLogEntry]) -> Optional[AttendanceLogEntry]:
    # First match wins when the source repeats a date.
    return next((log for log in logs if log.date == day), None)


def present_names_for_date(
    day: Optional[str],
    roster: Sequence[StudentRecord],
    logs: Sequence[AttendanceLogEntry],
) -> list[str]:
    """Names of the students present on `day`, in the log's order.

    Every present id yields exactly one row; ids missing from the roster
    render as "ID: <id>" instead of being dropped.
    """
    if not day or not roster:
        return []

    log = find_log(day, logs)
    if log is None:
        return []

    names = {s.id: s.name for s in roster}
    return [names.get(i, UNKNOWN_STUDENT_LABEL.format(id=i)) for i in log.present_ids]


def history_for_student(student_id: Optional[int], logs: Sequence[AttendanceLogEntry]) -> list[HistoryRow]:
    """Present/Absent per log entry for one student, sorted by "MM-DD".

    The sort is lexicographic on month-day, so it is only date-correct within one year.
    """
    if student_id is None or not logs:
        return []

    rows = [
        HistoryRow(
            date=to_display_date(log.date),
            status=AttendanceStatus.PRESENT if student_id in log.present_ids else AttendanceStatus.ABSENT,
        )
        for log in logs
    ]
    rows.sort(key=lambda r: r.date)
    return rows
