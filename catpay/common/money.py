"""Conversions between major currency units (reais) and cents."""

from decimal import ROUND_HALF_UP, Decimal


def to_cents(value: float | int | Decimal) -> int:
    """Convert a major-unit amount to integer cents, rounding half-up.

    Raises ValueError for NaN and infinities.
    """

    amount = value if isinstance(value, Decimal) else Decimal(repr(value))
    if not amount.is_finite():
        raise ValueError(f"Cannot convert non-finite amount to cents: {value!r}")
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(value: int) -> float:
    return value / 100
