"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from decimal import Decimal
from typing import Annotated, List, Optional

from pocket_guard.config import settings

# Rupee amount within the range the engine rounds exactly
Amount = Annotated[Decimal, Field(ge=-settings.max_amount_inr, le=settings.max_amount_inr)]


class LoanRequest(BaseModel):
    """Loan terms; sign checks happen in the engine, upper bounds here"""

    principal: Decimal = Field(..., le=settings.max_amount_inr, description="Amount borrowed in INR")
    annual_rate_percent: Decimal = Field(
        ..., le=settings.max_annual_rate_percent, description="Nominal annual interest rate in percent"
    )
    tenure_months: int = Field(..., le=settings.max_tenure_months, description="Number of monthly installments")
    start_date: Optional[date] = Field(None, description="Loan start date (default: today)")


class RemainingBalanceRequest(LoanRequest):
    """Request body for POST /v1/loans/remaining-balance"""

    month: int = Field(..., description="Schedule month, 1-based")


class EMIResponse(BaseModel):
    """Response for POST /v1/loans/emi"""

    monthly_emi: Decimal
    total_payable: Decimal
    total_interest: Decimal
    end_date: date


class AmortizationRowSchema(BaseModel):
    """Single month in an amortization schedule"""

    month: int
    due_date: date
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


class AmortizationResponse(BaseModel):
    """Response for POST /v1/loans/amortization"""

    emi: EMIResponse
    total_principal: Decimal
    total_interest: Decimal
    schedule: List[AmortizationRowSchema]


class RemainingBalanceResponse(BaseModel):
    """Response for POST /v1/loans/remaining-balance"""

    month: int
    remaining_balance: Decimal


class TaxCalculationRequest(BaseModel):
    """Request body for POST /v1/tax/calculate"""

    gross_salary: Amount = Decimal("0")
    hra_received: Amount = Decimal("0")
    lta_transport_allowance: Amount = Decimal("0")
    deduction_80c: Amount = Decimal("0")
    deduction_80d: Amount = Decimal("0")
    deduction_80e: Amount = Decimal("0")
    home_loan_interest: Amount = Decimal("0")
    house_property_income: Amount = Decimal("0")
    other_income: Amount = Decimal("0")
    tds_deducted: Amount = Decimal("0")
    age: Optional[int] = Field(None, ge=0, description="Taxpayer age; enables savings suggestions")


class TaxCalculationResponse(BaseModel):
    """Response for POST /v1/tax/calculate"""

    gross_income: Decimal
    total_deductions: Decimal
    standard_deduction: Decimal
    taxable_income: Decimal
    tax_liability: Decimal
    refund_or_balance: Decimal
    effective_tax_rate_percent: Decimal
    suggestions: List[str] = []


class DeductionLimitsRequest(BaseModel):
    """Request body for POST /v1/tax/validate-deductions"""

    deduction_80c: Amount = Decimal("0")
    deduction_80d: Amount = Decimal("0")
    deduction_80e: Amount = Decimal("0")
    home_loan_interest: Amount = Decimal("0")
    age: int = Field(..., ge=0)


class FilingDataRequest(BaseModel):
    """Request body for POST /v1/tax/validate-filing"""

    gross_salary: Amount
    pan: str = ""
    aadhaar: str = ""
    tds_deducted: Amount = Decimal("0")


class ValidationResponse(BaseModel):
    """Outcome of a rule set"""

    is_valid: bool
    errors: List[str]


class PANEligibilityRequest(BaseModel):
    """Request body for POST /v1/pan/eligibility"""

    pan: str = Field(..., min_length=1)
    income: Decimal


class PANEligibilityResponse(BaseModel):
    """Response for POST /v1/pan/eligibility"""

    eligible: bool
    reason: Optional[str] = None
