"""
Money Utilities - Decimal helpers for product prices.

Prices are carried as Decimal; floats only appear at the JSON boundary.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Union

Number = Union[str, int, float, Decimal]

# Two decimal places
MONEY_PRECISION = Decimal("0.01")


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Returns Decimal("0") for None or unparseable input.
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 9.99 stays 9.99 and not 9.9900000000000002131...
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Number) -> Decimal:
    """Round to cents, half up."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Number]) -> Decimal:
    total = Decimal("0")
    for value in values:
        total += to_decimal(value)
    return round_money(total)


def format_money(value: Number, symbol: str = "$") -> str:
    """Format as e.g. "$9.99"."""
    return f"{symbol}{round_money(value):.2f}"


def to_float(value: Number) -> float:
    """Convert to float for JSON serialization. Use only at API boundaries."""
    return float(to_decimal(value))
