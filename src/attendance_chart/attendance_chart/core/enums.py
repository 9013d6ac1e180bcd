from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh của một học sinh trong một ngày."""

    PRESENT = "Present"
    ABSENT = "Absent"


class LoadState(str, Enum):
    """Vòng đời dữ liệu dashboard (trang được phép hiển thị gì)."""

    LOADING = "loading"
    FAILED = "failed"
    EMPTY = "empty"
    READY = "ready"
