"""ITR-1 income-tax liability engine (FY 2024-25 slabs)"""

from decimal import Decimal
from typing import List

from pocket_guard.domain.models import TaxCalculationResult, TaxInputs, TaxSlab
from pocket_guard.utils.formatters import format_inr
from pocket_guard.utils.money import Number, ZERO, round_currency, round_rupee, to_decimal

TAX_SLABS: tuple[TaxSlab, ...] = (
    TaxSlab(Decimal("0"), Decimal("300000"), Decimal("0")),
    TaxSlab(Decimal("300000"), Decimal("600000"), Decimal("0.05")),
    TaxSlab(Decimal("600000"), Decimal("900000"), Decimal("0.10")),
    TaxSlab(Decimal("900000"), Decimal("1200000"), Decimal("0.15")),
    TaxSlab(Decimal("1200000"), Decimal("1500000"), Decimal("0.20")),
    TaxSlab(Decimal("1500000"), None, Decimal("0.30")),
)

HEALTH_EDUCATION_CESS_RATE = Decimal("0.04")

# Standard deduction: 50% of salary, capped
STANDARD_DEDUCTION_RATE = Decimal("0.5")
STANDARD_DEDUCTION_MAX = Decimal("50000")

MAX_80C = Decimal("150000")


def deduction_80d_limit(age: int) -> Decimal:
    """80D cap by age band: under 60, senior (60-79), very senior (80+)"""
    if age >= 80:
        return Decimal("100000")
    elif age >= 60:
        return Decimal("50000")
    else:
        return Decimal("25000")


def calculate_tax_on_income(taxable_income: Number) -> Decimal:
    """
    Slab tax before cess, unrounded.

    Each slab whose lower bound is below the income contributes
    (min(income, upper) - lower) × rate, so the result is continuous and
    non-decreasing in income.

    Example:
        600000 → 300000 × 5% = 15000 (the 10% slab contributes nothing)
    """
    taxable_income = to_decimal(taxable_income)
    if taxable_income <= 0:
        return ZERO

    tax = ZERO
    for slab in TAX_SLABS:
        if taxable_income <= slab.lower_bound:
            break
        ceiling = taxable_income if slab.upper_bound is None else min(taxable_income, slab.upper_bound)
        tax += (ceiling - slab.lower_bound) * slab.rate

    return tax


def calculate_tax_liability(inputs: TaxInputs) -> TaxCalculationResult:
    """
    Compute ITR-1 taxable income, tax with 4% cess and the refund position.

    Never raises: negative intermediate incomes are clamped to zero instead of
    rejected. Deduction caps are not applied here (see validators).

    Rounding:
    - tax_liability to the whole rupee, cess rounded together with tax
    - every other field to 2 decimal places
    - refund_or_balance > 0 means a refund is due, < 0 a balance payable
    """
    gross_salary = to_decimal(inputs.gross_salary)
    hra = to_decimal(inputs.hra_received)
    lta = to_decimal(inputs.lta_transport_allowance)
    house_property = to_decimal(inputs.house_property_income)
    other_income = to_decimal(inputs.other_income)
    tds = to_decimal(inputs.tds_deducted)

    gross_income = gross_salary + house_property + other_income

    standard_deduction = min(gross_salary * STANDARD_DEDUCTION_RATE, STANDARD_DEDUCTION_MAX)
    salary_income = gross_salary - hra - lta - standard_deduction

    income_before_deductions = max(salary_income + house_property + other_income, ZERO)

    total_deductions = (
        to_decimal(inputs.deduction_80c)
        + to_decimal(inputs.deduction_80d)
        + to_decimal(inputs.deduction_80e)
        + to_decimal(inputs.home_loan_interest)
    )

    taxable_income = max(income_before_deductions - total_deductions, ZERO)

    slab_tax = calculate_tax_on_income(taxable_income)
    tax_liability = round_rupee(slab_tax * (1 + HEALTH_EDUCATION_CESS_RATE))

    refund_or_balance = tds - tax_liability

    if gross_income > 0:
        effective_rate = tax_liability / gross_income * 100
    else:
        effective_rate = ZERO

    return TaxCalculationResult(
        gross_income=round_currency(gross_income),
        total_deductions=round_currency(total_deductions),
        standard_deduction=round_currency(standard_deduction),
        taxable_income=round_currency(taxable_income),
        tax_liability=tax_liability,
        refund_or_balance=round_currency(refund_or_balance),
        effective_tax_rate_percent=round_currency(effective_rate),
    )


def get_tax_savings_suggestions(current_80c: Number, current_80d: Number, age: int) -> List[str]:
    """Headroom left under 80C and 80D, as one message per section"""
    suggestions = []

    gap_80c = MAX_80C - to_decimal(current_80c)
    if gap_80c > 0:
        suggestions.append(
            f"You can save up to {format_inr(gap_80c)} more under section 80C (ELSS, PPF, Insurance, etc.)"
        )

    gap_80d = deduction_80d_limit(age) - to_decimal(current_80d)
    if gap_80d > 0:
        suggestions.append(
            f"You can save up to {format_inr(gap_80d)} more under section 80D (Health Insurance)"
        )

    return suggestions
