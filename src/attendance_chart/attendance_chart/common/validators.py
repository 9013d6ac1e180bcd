from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_student_choice(value: Any) -> Optional[int]:
    """Normalize the student-choice control value.

    The empty option ("" or null) means "no student selected".
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid student id: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text, 10)
    except ValueError:
        raise ValidationError(f"Invalid student id: {value!r}") from None


def require_index(value: Any, size: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Invalid bar index: {value!r}")
    if value < 0 or value >= size:
        raise ValidationError(f"Bar index {value} out of range (0..{size - 1})")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()
