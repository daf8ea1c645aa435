"""POST /v1/loans/* - EMI, amortization and outstanding-balance endpoints"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from pocket_guard.api.v1.schemas import (
    LoanRequest,
    RemainingBalanceRequest,
    EMIResponse,
    AmortizationResponse,
    AmortizationRowSchema,
    RemainingBalanceResponse,
)
from pocket_guard.api.dependencies import get_request_id
from pocket_guard.domain.models import EMIResult, LoanTerms
from pocket_guard.domain.emi import calculate_emi
from pocket_guard.domain.amortization import (
    generate_amortization_schedule,
    remaining_balance_at_month,
    schedule_totals,
)
from pocket_guard.domain.exceptions import InvalidLoanParameters, InvalidMonthParameter
from pocket_guard.infrastructure.observability.metrics import record_calculation
from pocket_guard.infrastructure.observability.logging import log_calculation
from pocket_guard.utils.date_utils import today

router = APIRouter()


def _emi_response(result: EMIResult) -> EMIResponse:
    return EMIResponse(
        monthly_emi=result.monthly_emi,
        total_payable=result.total_payable,
        total_interest=result.total_interest,
        end_date=result.end_date,
    )


@router.post("/loans/emi", response_model=EMIResponse)
def create_emi_quote(request_body: LoanRequest, request: Request):
    """
    Monthly installment, total payable and total interest for a loan.

    end_date is anchored on start_date (today when omitted).
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = calculate_emi(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_months,
            request_body.start_date or today(),
        )
    except InvalidLoanParameters as e:
        logging.warning(f"Invalid loan parameters: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_calculation("emi")
    log_calculation(request_id, "emi", (time.time() - start_time) * 1000, tenure_months=request_body.tenure_months)

    return _emi_response(result)


@router.post("/loans/amortization", response_model=AmortizationResponse)
def create_amortization_schedule(request_body: LoanRequest, request: Request):
    """
    Full month-by-month schedule with the EMI summary.

    Returns:
        One row per month; the last row's balance is 0
    """
    start_time = time.time()
    request_id = get_request_id(request)
    start_date = request_body.start_date or today()

    try:
        emi = calculate_emi(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_months,
            start_date,
        )
        schedule = generate_amortization_schedule(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_months,
            start_date,
        )
    except InvalidLoanParameters as e:
        logging.warning(f"Invalid loan parameters: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    totals = schedule_totals(schedule)

    record_calculation("amortization")
    log_calculation(request_id, "amortization", (time.time() - start_time) * 1000, rows=len(schedule))

    return AmortizationResponse(
        emi=_emi_response(emi),
        total_principal=totals.total_principal,
        total_interest=totals.total_interest,
        schedule=[
            AmortizationRowSchema(
                month=row.month,
                due_date=row.date,
                principal_portion=row.principal_portion,
                interest_portion=row.interest_portion,
                remaining_balance=row.remaining_balance,
            )
            for row in schedule
        ],
    )


@router.post("/loans/remaining-balance", response_model=RemainingBalanceResponse)
def get_remaining_balance(request_body: RemainingBalanceRequest, request: Request):
    """Outstanding balance after the given month's installment"""
    start_time = time.time()
    request_id = get_request_id(request)

    terms = LoanTerms(
        principal=request_body.principal,
        annual_rate_percent=request_body.annual_rate_percent,
        tenure_months=request_body.tenure_months,
        start_date=request_body.start_date or today(),
    )

    try:
        balance = remaining_balance_at_month(terms, request_body.month)
    except (InvalidLoanParameters, InvalidMonthParameter) as e:
        logging.warning(f"Invalid remaining-balance request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_calculation("remaining_balance")
    log_calculation(request_id, "remaining_balance", (time.time() - start_time) * 1000, month=request_body.month)

    return RemainingBalanceResponse(month=request_body.month, remaining_balance=balance)
