from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import to_display_date
from ..common.number_utils import percentage
from ..students.model import StudentRecord
from .model import AttendanceLogEntry, DailyAggregate


def aggregate(roster: Sequence[StudentRecord], logs: Sequence[AttendanceLogEntry]) -> list[DailyAggregate]:
    """Turn (roster, logs) into one chart bar per log entry.

    Output keeps the source order of `logs` (it drives the x-axis); nothing is sorted.
    An empty roster yields 0% bars instead of dividing by zero.
    """
    total = len(roster)
    return [
        DailyAggregate(
            display_date=to_display_date(log.date),
            full_date=log.date,
            percentage=percentage(len(log.present_ids), total),
            present_ids=tuple(log.present_ids),
        )
        for log in logs
    ]


def tooltip_label(bar: DailyAggregate, roster_size: int) -> str:
    """Bar tooltip, e.g. "75% (3/4)" or "33.3% (1/3)" (no trailing ".0")."""
    return f"{bar.percentage:g}% ({len(bar.present_ids)}/{roster_size})"
