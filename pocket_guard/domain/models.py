"""Domain models - immutable value objects produced and consumed by the engine"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class LoanTerms:
    """Loan inputs as stored by the caller"""

    principal: Decimal
    annual_rate_percent: Decimal
    tenure_months: int
    start_date: date


@dataclass(frozen=True)
class EMIResult:
    """Monthly installment and loan totals"""

    monthly_emi: Decimal
    total_payable: Decimal
    total_interest: Decimal
    end_date: date


@dataclass(frozen=True)
class AmortizationRow:
    """Single month in an amortization schedule"""

    month: int
    date: date
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class ScheduleTotals:
    """Aggregate of an amortization schedule"""

    total_principal: Decimal
    total_interest: Decimal
    total_paid: Decimal


@dataclass(frozen=True)
class TaxInputs:
    """Annual salary, income and deduction figures for ITR-1"""

    gross_salary: Decimal = Decimal("0")
    hra_received: Decimal = Decimal("0")
    lta_transport_allowance: Decimal = Decimal("0")
    deduction_80c: Decimal = Decimal("0")
    deduction_80d: Decimal = Decimal("0")
    deduction_80e: Decimal = Decimal("0")
    home_loan_interest: Decimal = Decimal("0")
    house_property_income: Decimal = Decimal("0")
    other_income: Decimal = Decimal("0")
    tds_deducted: Decimal = Decimal("0")


@dataclass(frozen=True)
class TaxCalculationResult:
    """Output of the ITR-1 liability computation"""

    gross_income: Decimal
    total_deductions: Decimal
    standard_deduction: Decimal
    taxable_income: Decimal
    tax_liability: Decimal
    refund_or_balance: Decimal
    effective_tax_rate_percent: Decimal


@dataclass(frozen=True)
class TaxSlab:
    """Income bracket taxed at a marginal rate; upper_bound None = unbounded"""

    lower_bound: Decimal
    upper_bound: Optional[Decimal]
    rate: Decimal


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a rule set; one message per failed rule"""

    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FilingEligibility:
    """Whether a PAN may file ITR-1"""

    eligible: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class PANVerificationResult:
    """Response of the PAN verification service"""

    verified: bool
    pan: str
    name: Optional[str] = None
    entity_type: str = "Individual"
    status: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None
