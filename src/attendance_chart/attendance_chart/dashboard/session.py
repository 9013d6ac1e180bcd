from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Optional, Sequence

from ..attendance.aggregator import aggregate
from ..attendance.model import AttendanceLogEntry, DailyAggregate
from ..attendance.repository import AttendanceRepository
from ..core.constants import FETCH_FAILURE_MESSAGE
from ..core.enums import LoadState
from ..core.exceptions import FetchFailure
from ..students.model import StudentRecord
from ..students.repository import StudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    state: LoadState
    error: Optional[str]
    roster: tuple[StudentRecord, ...]
    logs: tuple[AttendanceLogEntry, ...]
    chart: tuple[DailyAggregate, ...]
    chart_roster_size: int = 0


class DashboardSession:
    """Owns the roster store, the log store and the last computed chart.

    Both fetches run concurrently. Each completion is staged on the calling
    thread; the two stores are swapped in together only when both fetches of
    the same load succeeded, and a failure discards whatever was staged. The
    chart is recomputed only when both new stores are non-empty, otherwise the
    previous chart is kept (with the roster size it was computed from). Every
    load gets a generation number and completions from an older load are
    discarded.
    """

    def __init__(self, students: StudentRepository, attendance: AttendanceRepository):
        self._students = students
        self._attendance = attendance
        self._lock = threading.RLock()
        self._generation = 0
        self._staged_roster: Optional[tuple[StudentRecord, ...]] = None
        self._staged_logs: Optional[tuple[AttendanceLogEntry, ...]] = None
        self._state = LoadState.LOADING
        self._error: Optional[str] = None
        self._roster: tuple[StudentRecord, ...] = ()
        self._logs: tuple[AttendanceLogEntry, ...] = ()
        self._chart: tuple[DailyAggregate, ...] = ()
        self._chart_roster_size = 0

    def load(self) -> LoadState:
        generation = self.begin_load()
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="attendance-fetch") as pool:
            futures = {
                pool.submit(self._students.get_roster): self.commit_roster,
                pool.submit(self._attendance.get_logs): self.commit_logs,
            }
            for fut in as_completed(futures):
                try:
                    result = fut.result()
                except FetchFailure as e:
                    self.fail(generation, e)
                except Exception as e:
                    logger.exception("Unexpected error while fetching dashboard data")
                    self.fail(generation, e)
                else:
                    futures[fut](generation, result)
        return self.snapshot().state

    def begin_load(self) -> int:
        with self._lock:
            self._generation += 1
            self._staged_roster = None
            self._staged_logs = None
            self._state = LoadState.LOADING
            self._error = None
            return self._generation

    def commit_roster(self, generation: int, roster: Sequence[StudentRecord]) -> None:
        with self._lock:
            if self._is_stale(generation, "roster"):
                return
            self._staged_roster = tuple(roster)
            self._swap_if_complete()

    def commit_logs(self, generation: int, logs: Sequence[AttendanceLogEntry]) -> None:
        with self._lock:
            if self._is_stale(generation, "attendance logs"):
                return
            self._staged_logs = tuple(logs)
            self._swap_if_complete()

    def fail(self, generation: int, error: Exception) -> None:
        with self._lock:
            if self._is_stale(generation, "failure"):
                return
            source = getattr(error, "source", None) or "unknown source"
            logger.error("Dashboard load %s failed (%s): %s", generation, source, error)
            self._state = LoadState.FAILED
            self._error = FETCH_FAILURE_MESSAGE
            self._staged_roster = None
            self._staged_logs = None

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                state=self._state,
                error=self._error,
                roster=self._roster,
                logs=self._logs,
                chart=self._chart,
                chart_roster_size=self._chart_roster_size,
            )

    def _is_stale(self, generation: int, what: str) -> bool:
        if generation != self._generation:
            logger.info("Discarding stale %s from load %s (current %s)", what, generation, self._generation)
            return True
        if self._state == LoadState.FAILED:
            logger.info("Discarding %s from failed load %s", what, generation)
            return True
        return False

    def _swap_if_complete(self) -> None:
        if self._staged_roster is None or self._staged_logs is None:
            return

        self._roster, self._logs = self._staged_roster, self._staged_logs
        self._staged_roster = self._staged_logs = None

        if self._roster and self._logs:
            self._chart = tuple(aggregate(self._roster, self._logs))
            self._chart_roster_size = len(self._roster)
            self._state = LoadState.READY
        else:
            self._state = LoadState.EMPTY
