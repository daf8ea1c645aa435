"""Unit tests for amortization schedule generation"""

import pytest
from datetime import date
from decimal import Decimal
from pocket_guard.domain.amortization import (
    generate_amortization_schedule,
    generate_schedule_for_terms,
    remaining_balance_at_month,
    schedule_totals,
)
from pocket_guard.domain.exceptions import InvalidLoanParameters, InvalidMonthParameter
from pocket_guard.domain.models import AmortizationRow, LoanTerms


def test_schedule_rows_match_cent_rounding(two_month_loan: LoanTerms):
    """
    Month 1: interest 1200.00 × 1% = 12.00, principal 609.01 - 12.00 = 597.01
    Month 2: interest 602.99 × 1% = 6.0299 → 6.03, closes the remaining 602.99
    """
    schedule = generate_schedule_for_terms(two_month_loan)

    assert schedule == [
        AmortizationRow(
            month=1,
            date=date(2024, 1, 15),
            principal_portion=Decimal("597.01"),
            interest_portion=Decimal("12.00"),
            remaining_balance=Decimal("602.99"),
        ),
        AmortizationRow(
            month=2,
            date=date(2024, 2, 15),
            principal_portion=Decimal("602.99"),
            interest_portion=Decimal("6.03"),
            remaining_balance=Decimal("0.00"),
        ),
    ]


def test_schedule_zero_rate_last_month_absorbs_remainder():
    """₹1,000 over 3 months: 333.33 + 333.33 + 333.34"""
    schedule = generate_amortization_schedule(1000, 0, 3, date(2024, 1, 1))

    assert [row.principal_portion for row in schedule] == [
        Decimal("333.33"),
        Decimal("333.33"),
        Decimal("333.34"),
    ]
    assert [row.remaining_balance for row in schedule] == [
        Decimal("666.67"),
        Decimal("333.34"),
        Decimal("0.00"),
    ]
    assert all(row.interest_portion == 0 for row in schedule)


def test_schedule_reference_loan():
    """₹5 lakh at 10% for 12 months starting 2024-04-01"""
    schedule = generate_amortization_schedule(500000, 10, 12, date(2024, 4, 1))

    assert len(schedule) == 12
    assert [row.month for row in schedule] == list(range(1, 13))
    assert schedule[0].date == date(2024, 4, 1)
    assert schedule[-1].date == date(2025, 3, 1)
    # 500000 × 10 / 1200 = 4166.666...
    assert schedule[0].interest_portion == Decimal("4166.67")
    assert schedule[-1].remaining_balance == Decimal("0")


def test_schedule_principal_sums_to_loan():
    principal = Decimal("2500000")
    schedule = generate_amortization_schedule(principal, "8.75", 240, date(2024, 6, 1))

    total = sum(row.principal_portion for row in schedule)
    assert abs(total - principal) <= Decimal("0.01") * len(schedule)
    assert schedule[-1].remaining_balance == 0


def test_schedule_balance_never_increases():
    schedule = generate_amortization_schedule(3000000, "9.1", 300, date(2023, 11, 5))

    balances = [row.remaining_balance for row in schedule]
    assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
    assert all(balance >= 0 for balance in balances)


def test_schedule_interest_follows_previous_balance():
    """Each month's interest is the previous closing balance at the monthly rate"""
    schedule = generate_amortization_schedule(750000, 12, 36, date(2024, 1, 1))

    for previous, current in zip(schedule, schedule[1:]):
        expected = (previous.remaining_balance * Decimal("0.01")).quantize(Decimal("0.01"))
        assert abs(current.interest_portion - expected) <= Decimal("0.01")


def test_schedule_dates_advance_by_calendar_month():
    schedule = generate_amortization_schedule(10000, 10, 3, date(2024, 1, 31))
    assert [row.date for row in schedule] == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31)]


def test_schedule_is_recomputed_identically():
    first = generate_amortization_schedule(640000, "7.25", 48, date(2024, 2, 1))
    second = generate_amortization_schedule(640000, "7.25", 48, date(2024, 2, 1))
    assert first == second


def test_schedule_propagates_invalid_loan_parameters():
    with pytest.raises(InvalidLoanParameters):
        generate_amortization_schedule(0, 10, 12, date(2024, 1, 1))


def test_remaining_balance_at_month(two_month_loan: LoanTerms):
    assert remaining_balance_at_month(two_month_loan, 1) == Decimal("602.99")
    assert remaining_balance_at_month(two_month_loan, 2) == Decimal("0.00")


@pytest.mark.parametrize("month", [0, -1, 3])
def test_remaining_balance_rejects_out_of_range_month(two_month_loan: LoanTerms, month: int):
    with pytest.raises(InvalidMonthParameter):
        remaining_balance_at_month(two_month_loan, month)


@pytest.mark.parametrize("tenure_months", [0, -3])
def test_remaining_balance_reports_invalid_loan_before_month(tenure_months: int):
    """A loan with no installments is a bad loan, not a bad month"""
    terms = LoanTerms(Decimal("1200"), Decimal("12"), tenure_months, date(2024, 1, 15))

    with pytest.raises(InvalidLoanParameters):
        remaining_balance_at_month(terms, 1)


def test_schedule_totals(two_month_loan: LoanTerms):
    totals = schedule_totals(generate_schedule_for_terms(two_month_loan))

    assert totals.total_principal == Decimal("1200.00")
    assert totals.total_interest == Decimal("18.03")
    assert totals.total_paid == Decimal("1218.03")
