"""Month-by-month amortization schedule for EMI loans"""

from datetime import date
from decimal import Decimal
from typing import List

from pocket_guard.domain.emi import calculate_emi, check_loan_parameters, monthly_rate
from pocket_guard.domain.exceptions import InvalidMonthParameter
from pocket_guard.domain.models import AmortizationRow, LoanTerms, ScheduleTotals
from pocket_guard.utils.date_utils import add_months
from pocket_guard.utils.money import Number, ZERO, round_currency, to_decimal


def generate_amortization_schedule(
    principal: Number,
    annual_rate_percent: Number,
    tenure_months: int,
    start_date: date,
) -> List[AmortizationRow]:
    """
    Split each installment into interest and principal.

    Rounding policy:
    - interest = round(balance × r, 2)
    - principal portion = round(EMI - interest, 2)
    - balance = round(balance - principal portion, 2), never below zero
    Every value is rounded to the cent before it feeds the next month.

    The final month repays whatever balance is left, so the last row always
    closes at 0.00 and principal portions sum exactly to the principal. Its
    installment differs from the EMI by the accumulated rounding drift.

    Raises:
        InvalidLoanParameters: Propagated from calculate_emi
    """
    emi_result = calculate_emi(principal, annual_rate_percent, tenure_months, start_date)
    monthly_emi = emi_result.monthly_emi
    rate = monthly_rate(to_decimal(annual_rate_percent))

    balance = round_currency(to_decimal(principal))
    schedule = []

    for month in range(1, tenure_months + 1):
        interest = round_currency(balance * rate)
        principal_portion = round_currency(monthly_emi - interest)

        # Last month (or an overshoot) takes exactly what is outstanding
        if month == tenure_months or principal_portion > balance:
            principal_portion = balance

        balance = round_currency(balance - principal_portion)
        if balance < 0:
            balance = round_currency(ZERO)

        schedule.append(
            AmortizationRow(
                month=month,
                date=add_months(start_date, month - 1),
                principal_portion=principal_portion,
                interest_portion=interest,
                remaining_balance=balance,
            )
        )

    return schedule


def generate_schedule_for_terms(terms: LoanTerms) -> List[AmortizationRow]:
    """Schedule for a stored loan"""
    return generate_amortization_schedule(
        terms.principal, terms.annual_rate_percent, terms.tenure_months, terms.start_date
    )


def remaining_balance_at_month(terms: LoanTerms, month: int) -> Decimal:
    """
    Outstanding balance after the installment of `month` is paid.

    Raises:
        InvalidLoanParameters: When the loan terms themselves are invalid (checked first)
        InvalidMonthParameter: When month is outside [1, tenure_months]
    """
    check_loan_parameters(
        to_decimal(terms.principal), to_decimal(terms.annual_rate_percent), terms.tenure_months
    )

    if isinstance(month, bool) or not isinstance(month, int) or month < 1 or month > terms.tenure_months:
        raise InvalidMonthParameter(
            f"Month must be between 1 and {terms.tenure_months}, got {month}"
        )

    schedule = generate_schedule_for_terms(terms)
    return schedule[month - 1].remaining_balance


def schedule_totals(schedule: List[AmortizationRow]) -> ScheduleTotals:
    """Sum principal and interest paid across a schedule"""
    total_principal = sum((row.principal_portion for row in schedule), ZERO)
    total_interest = sum((row.interest_portion for row in schedule), ZERO)

    return ScheduleTotals(
        total_principal=round_currency(total_principal),
        total_interest=round_currency(total_interest),
        total_paid=round_currency(total_principal + total_interest),
    )
