"""Decimal helpers for currency arithmetic"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
CENT = Decimal("0.01")
RUPEE = Decimal("1")


def to_decimal(value: Number) -> Decimal:
    """Convert caller input to Decimal; floats go through str() to drop binary noise"""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half-up"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_rupee(value: Decimal) -> Decimal:
    """Round to a whole rupee, half-up"""
    return value.quantize(RUPEE, rounding=ROUND_HALF_UP)
