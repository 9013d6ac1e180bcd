from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SelectionState:
    """Chosen day and chosen student; the two axes are independent.

    Both None is the idle state. Nothing ever resets either axis implicitly.
    """

    selected_date: Optional[str] = None
    selected_student_id: Optional[int] = None

    def to_session(self) -> dict:
        return {
            "selected_date": self.selected_date,
            "selected_student_id": self.selected_student_id,
        }

    @classmethod
    def from_session(cls, data: Optional[dict]) -> "SelectionState":
        if not data:
            return cls()
        student_id = data.get("selected_student_id")
        return cls(
            selected_date=data.get("selected_date") or None,
            selected_student_id=int(student_id) if student_id is not None else None,
        )
