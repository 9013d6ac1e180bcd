from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import PERCENTAGE_DECIMALS


def percentage(part: int, whole: int, *, decimals: int = PERCENTAGE_DECIMALS) -> float:
    """part / whole * 100 rounded half-up; 0.0 when whole is 0.

    Decimal keeps ties exact (1/16 -> 6.25 -> 6.3), which float round() would not.
    """
    if whole <= 0:
        return 0.0
    raw = Decimal(part) * 100 / Decimal(whole)
    quantum = Decimal(1).scaleb(-decimals)
    return float(raw.quantize(quantum, rounding=ROUND_HALF_UP))
