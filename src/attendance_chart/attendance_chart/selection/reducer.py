from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..attendance.model import DailyAggregate
from ..common.validators import require_index
from .model import SelectionState


def select_date(state: SelectionState, day: str) -> SelectionState:
    """Set the selected day; re-selecting the same day keeps it selected (no toggle)."""
    return replace(state, selected_date=day)


def select_student(state: SelectionState, student_id: Optional[int]) -> SelectionState:
    """Set the selected student; None is the valid "no student" choice."""
    return replace(state, selected_student_id=student_id)


def select_bar(state: SelectionState, chart: Sequence[DailyAggregate], index: int) -> SelectionState:
    """Chart event: bar `index` activated, payload = chart[index]."""
    payload = chart[require_index(index, len(chart))]
    return select_date(state, payload.full_date)
