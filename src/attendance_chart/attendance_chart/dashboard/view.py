from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import HistoryRow
from ..core.enums import LoadState


@dataclass(frozen=True)
class ChartBar:
    display_date: str
    full_date: str
    percentage: float
    present_ids: tuple[int, ...]
    tooltip: str
    highlighted: bool


@dataclass(frozen=True)
class DashboardView:
    """Everything the page renders for one request."""

    state: LoadState
    title: str
    error: Optional[str] = None
    roster_size: int = 0
    chart: tuple[ChartBar, ...] = ()
    selected_date: Optional[str] = None
    selected_date_label: Optional[str] = None
    present_names: tuple[str, ...] = ()
    no_present_message: Optional[str] = None
    selected_student_id: Optional[int] = None
    selected_student_name: Optional[str] = None
    history: tuple[HistoryRow, ...] = ()
    no_history_message: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "title": self.title,
            "error": self.error,
            "roster_size": self.roster_size,
            "chart": [
                {
                    "display_date": b.display_date,
                    "full_date": b.full_date,
                    "percentage": b.percentage,
                    "present_ids": list(b.present_ids),
                    "tooltip": b.tooltip,
                    "highlighted": b.highlighted,
                }
                for b in self.chart
            ],
            "selected_date": self.selected_date,
            "selected_date_label": self.selected_date_label,
            "present_names": list(self.present_names),
            "no_present_message": self.no_present_message,
            "selected_student_id": self.selected_student_id,
            "selected_student_name": self.selected_student_name,
            "history": [{"date": h.date, "status": h.status.value} for h in self.history],
            "no_history_message": self.no_history_message,
        }
