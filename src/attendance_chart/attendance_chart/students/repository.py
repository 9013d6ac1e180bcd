from __future__ import annotations

from typing import Protocol, Sequence

from .model import StudentRecord


class StudentRepository(Protocol):
    def get_roster(self) -> Sequence[StudentRecord]:
        """Fetch the full roster; raises FetchFailure when the source fails."""

        raise NotImplementedError
