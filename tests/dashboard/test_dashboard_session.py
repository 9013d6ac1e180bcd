from __future__ import annotations

from dataclasses import dataclass, field

from src.attendance_chart.attendance_chart.attendance.model import AttendanceLogEntry
from src.attendance_chart.attendance_chart.core.enums import LoadState
from src.attendance_chart.attendance_chart.core.exceptions import FetchFailure
from src.attendance_chart.attendance_chart.dashboard.session import DashboardSession
from src.attendance_chart.attendance_chart.students.model import StudentRecord

ROSTER = tuple(StudentRecord(id=i, name=n) for i, n in [(1, "An"), (2, "Binh"), (3, "Chi"), (4, "Dung")])
LOGS = (AttendanceLogEntry(date="2025-05-01", present_ids=(1, 2, 3)),)


@dataclass
class InMemoryStudents:
    roster: tuple = ROSTER
    error: Exception | None = None
    calls: int = 0

    def get_roster(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.roster


@dataclass
class InMemoryAttendance:
    logs: tuple = LOGS
    error: Exception | None = None
    calls: int = 0

    def get_logs(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.logs


def test_session_starts_loading_with_empty_stores():
    snap = DashboardSession(InMemoryStudents(), InMemoryAttendance()).snapshot()
    assert snap.state == LoadState.LOADING
    assert snap.chart == ()


def test_load_fetches_both_and_aggregates():
    students, attendance = InMemoryStudents(), InMemoryAttendance()
    session = DashboardSession(students, attendance)

    assert session.load() == LoadState.READY

    snap = session.snapshot()
    assert students.calls == 1 and attendance.calls == 1
    assert snap.roster == ROSTER
    assert [(a.display_date, a.percentage) for a in snap.chart] == [("05-01", 75.0)]


def test_either_failure_flips_to_failed_with_generic_message():
    session = DashboardSession(
        InMemoryStudents(),
        InMemoryAttendance(error=FetchFailure("HTTP 500", source="attendance logs")),
    )

    assert session.load() == LoadState.FAILED
    snap = session.snapshot()
    assert snap.error == "Failed to fetch attendance data."


def test_unexpected_error_also_fails_the_load():
    session = DashboardSession(InMemoryStudents(error=RuntimeError("bug")), InMemoryAttendance())
    assert session.load() == LoadState.FAILED


def test_empty_logs_is_empty_state_not_error():
    session = DashboardSession(InMemoryStudents(), InMemoryAttendance(logs=()))
    assert session.load() == LoadState.EMPTY
    assert session.snapshot().chart == ()


def test_chart_waits_for_both_stores():
    session = DashboardSession(InMemoryStudents(), InMemoryAttendance())
    generation = session.begin_load()

    session.commit_logs(generation, LOGS)
    assert session.snapshot().chart == ()
    assert session.snapshot().state == LoadState.LOADING

    session.commit_roster(generation, ROSTER)
    assert len(session.snapshot().chart) == 1
    assert session.snapshot().state == LoadState.READY


def test_previous_chart_kept_when_a_refetch_returns_empty_roster():
    students = InMemoryStudents()
    session = DashboardSession(students, InMemoryAttendance())
    session.load()

    students.roster = ()
    session.load()

    snap = session.snapshot()
    assert snap.state == LoadState.EMPTY
    assert snap.roster == ()
    assert [a.percentage for a in snap.chart] == [75.0]
    assert snap.chart_roster_size == 4


def test_stale_completion_is_discarded():
    session = DashboardSession(InMemoryStudents(), InMemoryAttendance())
    old = session.begin_load()
    new = session.begin_load()

    newer_logs = (AttendanceLogEntry(date="2025-05-02", present_ids=(4,)),)
    session.commit_roster(new, ROSTER)
    session.commit_logs(new, newer_logs)
    # The older request finishes last and must not overwrite newer data.
    session.commit_logs(old, LOGS)
    session.fail(old, FetchFailure("late timeout"))

    snap = session.snapshot()
    assert snap.state == LoadState.READY
    assert [a.full_date for a in snap.chart] == ["2025-05-02"]


def test_reload_after_failure_recovers():
    attendance = InMemoryAttendance(error=FetchFailure("down"))
    session = DashboardSession(InMemoryStudents(), attendance)
    assert session.load() == LoadState.FAILED

    attendance.error = None
    assert session.load() == LoadState.READY
    assert session.snapshot().error is None


def test_partial_refetch_keeps_both_previous_stores():
    students, attendance = InMemoryStudents(), InMemoryAttendance()
    session = DashboardSession(students, attendance)
    session.load()

    students.roster = ROSTER[:2]
    attendance.error = FetchFailure("HTTP 500", source="attendance logs")
    assert session.load() == LoadState.FAILED

    snap = session.snapshot()
    assert snap.roster == ROSTER
    assert snap.logs == LOGS
    assert [a.percentage for a in snap.chart] == [75.0]


def test_failed_then_empty_refetch_never_mixes_roster_and_logs():
    students, attendance = InMemoryStudents(), InMemoryAttendance()
    session = DashboardSession(students, attendance)
    session.load()

    students.roster = ROSTER[:2]
    attendance.error = FetchFailure("HTTP 500", source="attendance logs")
    session.load()

    attendance.error = None
    attendance.logs = ()
    assert session.load() == LoadState.EMPTY

    snap = session.snapshot()
    assert snap.roster == ROSTER[:2]
    assert snap.logs == ()
    assert all(0.0 <= a.percentage <= 100.0 for a in snap.chart)
    assert snap.chart_roster_size == 4


def test_completion_after_failure_in_same_load_is_discarded():
    session = DashboardSession(InMemoryStudents(), InMemoryAttendance())
    generation = session.begin_load()

    session.fail(generation, FetchFailure("down", source="students"))
    session.commit_logs(generation, LOGS)

    snap = session.snapshot()
    assert snap.state == LoadState.FAILED
    assert snap.logs == ()
