from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceLogEntry


class AttendanceRepository(Protocol):
    def get_logs(self) -> Sequence[AttendanceLogEntry]:
        """Fetch every per-day log in source order; raises FetchFailure when the source fails."""

        raise NotImplementedError
