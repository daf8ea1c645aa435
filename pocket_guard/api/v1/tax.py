"""POST /v1/tax/* - ITR-1 liability calculation and filing-readiness checks"""

import time
from fastapi import APIRouter, Request

from pocket_guard.api.v1.schemas import (
    TaxCalculationRequest,
    TaxCalculationResponse,
    DeductionLimitsRequest,
    FilingDataRequest,
    ValidationResponse,
)
from pocket_guard.api.dependencies import get_request_id
from pocket_guard.domain.models import TaxInputs
from pocket_guard.domain.tax import calculate_tax_liability, get_tax_savings_suggestions
from pocket_guard.domain.validators import validate_deduction_limits, validate_tax_data_for_filing
from pocket_guard.infrastructure.observability.metrics import record_calculation, validation_failure_counter
from pocket_guard.infrastructure.observability.logging import log_calculation, log_rule_violations

router = APIRouter()


@router.post("/tax/calculate", response_model=TaxCalculationResponse)
def calculate_tax(request_body: TaxCalculationRequest, request: Request):
    """
    Compute ITR-1 tax liability with cess and the refund position.

    Deduction caps are not enforced here; call /tax/validate-deductions first.
    Savings suggestions are included when age is given.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    inputs = TaxInputs(**request_body.model_dump(exclude={"age"}))
    result = calculate_tax_liability(inputs)

    suggestions = []
    if request_body.age is not None:
        suggestions = get_tax_savings_suggestions(
            request_body.deduction_80c, request_body.deduction_80d, request_body.age
        )

    record_calculation("tax")
    log_calculation(
        request_id,
        "tax",
        (time.time() - start_time) * 1000,
        refund_due=result.refund_or_balance > 0,
        suggestions=len(suggestions),
    )

    return TaxCalculationResponse(
        gross_income=result.gross_income,
        total_deductions=result.total_deductions,
        standard_deduction=result.standard_deduction,
        taxable_income=result.taxable_income,
        tax_liability=result.tax_liability,
        refund_or_balance=result.refund_or_balance,
        effective_tax_rate_percent=result.effective_tax_rate_percent,
        suggestions=suggestions,
    )


@router.post("/tax/validate-deductions", response_model=ValidationResponse)
def check_deduction_limits(request_body: DeductionLimitsRequest, request: Request):
    """Report every deduction that exceeds its statutory cap"""
    result = validate_deduction_limits(
        request_body.deduction_80c,
        request_body.deduction_80d,
        request_body.deduction_80e,
        request_body.home_loan_interest,
        request_body.age,
    )
    if not result.is_valid:
        validation_failure_counter.labels(rule_set="deductions").inc()
        log_rule_violations(get_request_id(request), "deductions", result.errors)

    return ValidationResponse(is_valid=result.is_valid, errors=result.errors)


@router.post("/tax/validate-filing", response_model=ValidationResponse)
def check_filing_data(request_body: FilingDataRequest, request: Request):
    """Report every reason the data cannot be filed as ITR-1"""
    result = validate_tax_data_for_filing(
        request_body.gross_salary,
        request_body.pan,
        request_body.aadhaar,
        request_body.tds_deducted,
    )
    if not result.is_valid:
        validation_failure_counter.labels(rule_set="filing").inc()
        log_rule_violations(get_request_id(request), "filing", result.errors)

    return ValidationResponse(is_valid=result.is_valid, errors=result.errors)
