from __future__ import annotations

from dataclasses import dataclass

from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.repository import AttendanceRepository
from .core.constants import DEFAULT_FETCH_TIMEOUT, DEFAULT_REPORT_TITLE
from .dashboard.service import DashboardService
from .dashboard.session import DashboardSession
from .datasource.connection import ApiConfig, ApiConnection
from .students.http_student_repository import HttpStudentRepository
from .students.repository import StudentRepository


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    dashboard_session: DashboardSession
    dashboard_service: DashboardService


def build_container(
    *,
    api_config: dict | None = None,
    students_repo: StudentRepository | None = None,
    attendance_repo: AttendanceRepository | None = None,
    title: str = DEFAULT_REPORT_TITLE,
) -> Container:
    """Wire repositories and services.

    Repositories can be injected (tests, offline demos); otherwise both are
    HTTP-backed from `api_config`.
    """
    if students_repo is None or attendance_repo is None:
        if api_config is None:
            raise ValueError("api_config is required when repositories are not injected")
        config = ApiConfig(
            students_url=str(api_config["students_url"]),
            attendance_url=str(api_config["attendance_url"]),
            timeout=float(api_config.get("timeout", DEFAULT_FETCH_TIMEOUT)),
        )
        conn = ApiConnection(config)
        students_repo = students_repo or HttpStudentRepository(conn)
        attendance_repo = attendance_repo or HttpAttendanceRepository(conn)

    dashboard_session = DashboardSession(students_repo, attendance_repo)
    dashboard_service = DashboardService(dashboard_session, title=title)

    return Container(
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        dashboard_session=dashboard_session,
        dashboard_service=dashboard_service,
    )
