from __future__ import annotations

from typing import Optional

from ..attendance.aggregator import tooltip_label
from ..attendance.drilldown import history_for_student, present_names_for_date
from ..common.datetime_utils import to_long_label
from ..core.constants import DEFAULT_REPORT_TITLE, EMPTY_STUDENT_CHOICE_LABEL, FALLBACK_STUDENT_NAME
from ..core.enums import LoadState
from ..core.exceptions import FetchFailure
from ..selection.model import SelectionState
from ..selection.reducer import select_bar
from ..students.model import StudentChoice
from .session import DashboardSession, SessionSnapshot
from .view import ChartBar, DashboardView


class DashboardService:
    """Use case: build the dashboard page (chart + drill-downs) from the session stores."""

    def __init__(self, session: DashboardSession, *, title: str = DEFAULT_REPORT_TITLE):
        self._session = session
        self._title = title

    def reload(self, selection: SelectionState) -> DashboardView:
        self._session.load()
        return self.build_view(selection)

    def build_view(self, selection: SelectionState) -> DashboardView:
        snap = self._session.snapshot()
        if snap.state in {LoadState.LOADING, LoadState.FAILED}:
            # Failure halts rendering of both chart and drill-downs.
            return DashboardView(state=snap.state, title=self._title, error=snap.error)

        chart = tuple(
            ChartBar(
                display_date=a.display_date,
                full_date=a.full_date,
                percentage=a.percentage,
                present_ids=a.present_ids,
                tooltip=tooltip_label(a, snap.chart_roster_size),
                highlighted=a.full_date == selection.selected_date,
            )
            for a in self._visible_chart(snap)
        )

        day = selection.selected_date
        names = tuple(present_names_for_date(day, snap.roster, snap.logs))

        student_id = selection.selected_student_id
        history = tuple(history_for_student(student_id, snap.logs))

        return DashboardView(
            state=snap.state,
            title=self._title,
            roster_size=len(snap.roster),
            chart=chart,
            selected_date=day,
            selected_date_label=to_long_label(day) if day else None,
            present_names=names,
            no_present_message=f"No students recorded as present for {day}." if day and not names else None,
            selected_student_id=student_id,
            selected_student_name=self._student_name(snap, student_id),
            history=history,
            no_history_message=(
                "No attendance data found for this period for the selected student."
                if student_id is not None and not history
                else None
            ),
        )

    def activate_bar(self, selection: SelectionState, index: int) -> SelectionState:
        snap = self._require_available()
        return select_bar(selection, self._visible_chart(snap), index)

    def student_choices(self) -> list[StudentChoice]:
        snap = self._require_available()
        choices = [StudentChoice(value="", label=EMPTY_STUDENT_CHOICE_LABEL)]
        choices.extend(StudentChoice(value=str(s.id), label=s.name) for s in snap.roster)
        return choices

    def export_rows(self) -> list[dict]:
        """Chart rows for CSV export, in chart order."""
        snap = self._require_available()
        roster_size = snap.chart_roster_size
        return [
            {
                "date": a.full_date,
                "display_date": a.display_date,
                "percentage": a.percentage,
                "present": len(a.present_ids),
                "roster_size": roster_size,
            }
            for a in self._visible_chart(snap)
        ]

    def _require_available(self) -> SessionSnapshot:
        snap = self._session.snapshot()
        if snap.state == LoadState.FAILED:
            raise FetchFailure(snap.error or "Failed to fetch attendance data.")
        return snap

    @staticmethod
    def _visible_chart(snap: SessionSnapshot):
        # An empty load shows the "no data" state, never a chart kept from an earlier load.
        return snap.chart if snap.state == LoadState.READY else ()

    @staticmethod
    def _student_name(snap: SessionSnapshot, student_id: Optional[int]) -> Optional[str]:
        if student_id is None:
            return None
        student = next((s for s in snap.roster if s.id == student_id), None)
        return student.name if student else FALLBACK_STUDENT_NAME
