"""Rupee formatting for human-readable messages"""

from decimal import Decimal

from pocket_guard.utils.money import Number, round_currency, to_decimal


def group_indian(whole: int) -> str:
    """Group digits the Indian way: 1500000 -> 15,00,000"""
    digits = str(abs(whole))
    if len(digits) <= 3:
        grouped = digits
    else:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        grouped = ",".join(pairs) + "," + tail
    return f"-{grouped}" if whole < 0 else grouped


def format_inr(amount: Number, show_paise: bool = False) -> str:
    """Format an amount as rupees: 150000 -> ₹1,50,000 (₹1,50,000.00 with paise)"""
    value = round_currency(to_decimal(amount))
    sign = "-" if value < 0 else ""
    value = abs(value)
    whole = int(value)
    text = f"{sign}₹{group_indian(whole)}"
    if show_paise:
        paise = int((value - Decimal(whole)) * 100)
        text += f".{paise:02d}"
    return text
