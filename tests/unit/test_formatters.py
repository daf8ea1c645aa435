"""Unit tests for rupee formatting and month arithmetic"""

import pytest
from datetime import date
from decimal import Decimal
from pocket_guard.utils.date_utils import add_months
from pocket_guard.utils.formatters import format_inr, group_indian
from pocket_guard.utils.money import round_currency, round_rupee, to_decimal


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (150000, "1,50,000"),
        (5000000, "50,00,000"),
        (12345678, "1,23,45,678"),
        (-2500, "-2,500"),
    ],
)
def test_group_indian(value, expected):
    assert group_indian(value) == expected


def test_format_inr():
    assert format_inr(150000) == "₹1,50,000"
    assert format_inr(Decimal("1234567.891"), show_paise=True) == "₹12,34,567.89"
    assert format_inr(-2500) == "-₹2,500"
    assert format_inr("25000.5", show_paise=True) == "₹25,000.50"


def test_money_rounding_is_half_up():
    assert round_currency(Decimal("2.675")) == Decimal("2.68")
    assert round_currency(Decimal("-2.675")) == Decimal("-2.68")
    assert round_rupee(Decimal("6.5")) == Decimal("7")
    assert round_rupee(Decimal("7.49")) == Decimal("7")


def test_to_decimal_avoids_float_noise():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("43957.94") == Decimal("43957.94")
    assert to_decimal(12) == Decimal("12")


@pytest.mark.parametrize(
    "start,months,expected",
    [
        (date(2024, 4, 1), 11, date(2025, 3, 1)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 12, 15), 0, date(2024, 12, 15)),
        (date(2024, 6, 30), 240, date(2044, 6, 30)),
    ],
)
def test_add_months(start, months, expected):
    assert add_months(start, months) == expected
