from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_amount(value: Decimal | str | int | float) -> Decimal:
    if isinstance(value, Decimal):
        amount = value
    else:
        # floats are converted through str()
        try:
            amount = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"not a decimal amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"amount must be finite, got {value!r}")
    return amount


def non_negative_amount(value: Decimal | str | int | float, field: str = "amount") -> Decimal:
    amount = to_amount(value)
    if amount < 0:
        raise ValueError(f"{field} must be >= 0")
    return amount


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    return f"${round_money(value)}"


def format_percent(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"
