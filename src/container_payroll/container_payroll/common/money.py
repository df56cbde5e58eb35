from __future__ import annotations

from decimal import Decimal
from typing import Union

Number = Union[int, float]


def to_decimal(value: Union[Number, str, Decimal]) -> Decimal:
    """Load a stored amount. Floats go through str() so 42.5 stays Decimal('42.5')."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("amount must be numeric")
    return Decimal(str(value))


def to_json_number(value: Decimal) -> Number:
    """Store an amount as a JSON number: int when integral, float otherwise."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
