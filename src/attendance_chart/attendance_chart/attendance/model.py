from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceLogEntry:
    """Thực thể miền (domain): Bản ghi điểm danh của một ngày."""

    date: str
    present_ids: tuple[int, ...]


@dataclass(frozen=True)
class DailyAggregate:
    """Read-model for one chart bar (derived, never persisted)."""

    display_date: str
    full_date: str
    percentage: float
    present_ids: tuple[int, ...]


@dataclass(frozen=True)
class HistoryRow:
    date: str
    status: AttendanceStatus
