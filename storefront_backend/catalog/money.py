# catalog/money.py

"""
Fixed-point currency helpers.

Prices, line totals and purchase totals are Decimal values quantized to
2 places with ROUND_HALF_UP; floats never enter money arithmetic.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value) -> Decimal:
    """
    Quantize any numeric-ish input to 2dp.

    Raises ValueError for blanks and values that do not parse as a finite decimal.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError("amount is required")
    if isinstance(value, bool):
        raise ValueError("amount must be a number")

    try:
        dec = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount: {value!r}") from exc

    if not dec.is_finite():
        raise ValueError(f"invalid amount: {value!r}")

    try:
        return dec.quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        # More integer digits than the context precision allows.
        raise ValueError(f"invalid amount: {value!r}") from exc


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    return to_money(unit_price * Decimal(int(quantity)))
