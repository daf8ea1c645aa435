"""EMI calculation for reducing-balance loans"""

from datetime import date
from decimal import Decimal

from pocket_guard.domain.exceptions import InvalidLoanParameters
from pocket_guard.domain.models import EMIResult, LoanTerms
from pocket_guard.utils.date_utils import add_months, today
from pocket_guard.utils.money import Number, ZERO, round_currency, to_decimal

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Annual percentage rate -> monthly fractional rate (12% -> 0.01)"""
    return annual_rate_percent / MONTHS_PER_YEAR / 100


def check_loan_parameters(principal: Decimal, annual_rate_percent: Decimal, tenure_months: int) -> None:
    """Raise InvalidLoanParameters before any computation runs"""
    if principal <= 0:
        raise InvalidLoanParameters(f"Principal must be greater than 0, got {principal}")
    if annual_rate_percent < 0:
        raise InvalidLoanParameters(f"Annual interest rate cannot be negative, got {annual_rate_percent}")
    if isinstance(tenure_months, bool) or not isinstance(tenure_months, int) or tenure_months <= 0:
        raise InvalidLoanParameters(f"Tenure must be a positive whole number of months, got {tenure_months}")


def unrounded_emi(principal: Decimal, rate: Decimal, tenure_months: int) -> Decimal:
    """
    Standard reducing-balance installment at full precision.

    EMI = P × r × (1 + r)^n / ((1 + r)^n - 1), or P / n when r is zero.
    """
    if rate == 0:
        return principal / tenure_months
    growth = (1 + rate) ** tenure_months
    return principal * rate * growth / (growth - 1)


def calculate_emi(
    principal: Number,
    annual_rate_percent: Number,
    tenure_months: int,
    start_date: date | None = None,
) -> EMIResult:
    """
    Compute the monthly installment and loan totals.

    Monetary outputs are rounded to 2 decimal places (half-up). total_payable is
    the rounded installment times the tenure, so a borrower paying monthly_emi
    every month pays exactly total_payable. Interest-free loans repay the
    principal itself.

    Args:
        principal: Amount borrowed, > 0
        annual_rate_percent: Nominal annual rate in percent, >= 0
        tenure_months: Number of monthly installments, > 0
        start_date: Loan start; end_date is this plus tenure_months months (default: today)

    Raises:
        InvalidLoanParameters: On non-positive principal/tenure or negative rate
    """
    principal = to_decimal(principal)
    annual_rate_percent = to_decimal(annual_rate_percent)
    check_loan_parameters(principal, annual_rate_percent, tenure_months)

    if start_date is None:
        start_date = today()
    end_date = add_months(start_date, tenure_months)

    rate = monthly_rate(annual_rate_percent)
    emi = unrounded_emi(principal, rate, tenure_months)

    # Zero rate: no interest accrues and the installments repay exactly the principal
    if rate == 0:
        return EMIResult(
            monthly_emi=round_currency(emi),
            total_payable=round_currency(principal),
            total_interest=round_currency(ZERO),
            end_date=end_date,
        )

    monthly_emi = round_currency(emi)
    total_payable = round_currency(monthly_emi * tenure_months)

    return EMIResult(
        monthly_emi=monthly_emi,
        total_payable=total_payable,
        total_interest=round_currency(total_payable - principal),
        end_date=end_date,
    )


def calculate_emi_for_terms(terms: LoanTerms) -> EMIResult:
    """calculate_emi anchored on the loan's own start date"""
    return calculate_emi(terms.principal, terms.annual_rate_percent, terms.tenure_months, terms.start_date)
