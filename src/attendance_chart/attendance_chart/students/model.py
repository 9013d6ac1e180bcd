from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentRecord:
    """Thực thể miền (domain): Học sinh trong danh sách lớp.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập HTTP).
    """

    id: int
    name: str


@dataclass(frozen=True)
class StudentChoice:
    """One option of the student-choice control ("" is the empty choice)."""

    value: str
    label: str
