"""Fixed-point bounds shared by the card use cases

Balances, amounts, fuel prices and liters are stored as Numeric(18, 6):
at most 12 integer digits and 6 decimal places.
"""

from decimal import Decimal
from typing import Optional

DECIMAL_QUANTUM = Decimal("0.000001")
MAX_MAGNITUDE = Decimal("1000000000000")


def fits_column(value: Optional[Decimal]) -> bool:
    """True if value is stored by a Numeric(18, 6) column without rounding or overflow"""
    if value is None or not value.is_finite():
        return False
    if abs(value) >= MAX_MAGNITUDE:
        return False
    return value == value.quantize(DECIMAL_QUANTUM)
