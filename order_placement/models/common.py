from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal(value: Any) -> Decimal:
    """
    Normalize a monetary value to Decimal.
    Floats go through str() so 0.1 becomes Decimal('0.1') rather than its binary expansion.
    NaN and infinities are rejected: they have no meaning as an amount and cannot be compared.
    """
    if isinstance(value, bool):
        raise TypeError("Monetary value cannot be a bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a valid amount: {value!r}") from e
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise TypeError(f"Unsupported monetary value: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Amount must be a finite number: {value!r}")
    return result
