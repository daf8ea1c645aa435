"""Deduction limits and ITR-1 eligibility rules

Every rule set reports all violations in one pass: a failed rule appends a
message and evaluation continues.
"""

import logging
import re
from decimal import Decimal
from typing import List, Optional, Protocol

from pocket_guard.domain.exceptions import PANVerificationError
from pocket_guard.domain.models import FilingEligibility, PANVerificationResult, ValidationResult
from pocket_guard.domain.tax import MAX_80C, deduction_80d_limit
from pocket_guard.infrastructure.observability.metrics import pan_verification_failures_counter
from pocket_guard.utils.formatters import format_inr
from pocket_guard.utils.money import Number, to_decimal

PAN_PATTERN = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
AADHAAR_PATTERN = re.compile(r"^[0-9]{12}$")
FISCAL_YEAR_PATTERN = re.compile(r"^\d{4}-\d{2}$")

# ITR-1 is only for total income below ₹50 lakh
ITR1_INCOME_CEILING = Decimal("5000000")

MAX_80E = Decimal("100000")
MAX_HOME_LOAN_INTEREST = Decimal("200000")

LOAN_TYPES = ("Home", "Auto", "Personal", "Education", "Other")


class PANVerifier(Protocol):
    """Anything that can check a PAN against government records"""

    async def verify_pan(
        self, pan: str, name: Optional[str] = None, date_of_birth: Optional[str] = None
    ) -> PANVerificationResult: ...


def is_valid_pan(pan: str | None) -> bool:
    """PAN format AAAAA9999A, case-insensitive"""
    return bool(pan) and PAN_PATTERN.match(pan.upper()) is not None


def is_valid_aadhaar(aadhaar: str | None) -> bool:
    return bool(aadhaar) and AADHAAR_PATTERN.match(aadhaar) is not None


def is_valid_fiscal_year(fiscal_year: str | None) -> bool:
    """Fiscal year label like 2024-25"""
    return bool(fiscal_year) and FISCAL_YEAR_PATTERN.match(fiscal_year) is not None


def is_valid_loan_type(loan_type: str | None) -> bool:
    return loan_type in LOAN_TYPES


def is_itr1_income(income: Number) -> bool:
    return to_decimal(income) < ITR1_INCOME_CEILING


def validate_deduction_limits(
    deduction_80c: Number,
    deduction_80d: Number,
    deduction_80e: Number,
    home_loan_interest: Number,
    age: int,
) -> ValidationResult:
    """
    Check Chapter VI-A deduction caps.

    Limits:
    - 80C: ₹1,50,000
    - 80D: ₹25,000 under 60, ₹50,000 for 60-79, ₹1,00,000 for 80+
    - 80E: ₹1,00,000
    - Home loan interest: ₹2,00,000
    """
    errors: List[str] = []

    if to_decimal(deduction_80c) > MAX_80C:
        errors.append(f"Deduction under 80C exceeds maximum limit of {format_inr(MAX_80C)}")

    limit_80d = deduction_80d_limit(age)
    if to_decimal(deduction_80d) > limit_80d:
        errors.append(f"Deduction under 80D exceeds maximum limit of {format_inr(limit_80d)}")

    if to_decimal(deduction_80e) > MAX_80E:
        errors.append(f"Deduction under 80E exceeds maximum limit of {format_inr(MAX_80E)}")

    if to_decimal(home_loan_interest) > MAX_HOME_LOAN_INTEREST:
        errors.append(
            f"Home loan interest deduction exceeds maximum limit of {format_inr(MAX_HOME_LOAN_INTEREST)}"
        )

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_tax_data_for_filing(
    gross_salary: Number,
    pan: str | None,
    aadhaar: str | None,
    tds_deducted: Number,
) -> ValidationResult:
    """Check that a return qualifies for ITR-1 and carries usable identifiers"""
    errors: List[str] = []

    if not is_itr1_income(gross_salary):
        errors.append(f"Income exceeds {format_inr(ITR1_INCOME_CEILING)} limit for ITR-1")

    if not pan or len(pan) != 10:
        errors.append("Invalid PAN format")

    if not is_valid_aadhaar(aadhaar):
        errors.append("Invalid Aadhaar format")

    if to_decimal(tds_deducted) < 0:
        errors.append("TDS deducted cannot be negative")

    return ValidationResult(is_valid=not errors, errors=errors)


async def validate_pan_for_itr_filing(
    pan: str | None,
    income: Number,
    verifier: PANVerifier,
) -> FilingEligibility:
    """
    Decide whether a PAN may file ITR-1.

    Checks format, then the income ceiling, then asks the verifier. Never
    raises: a verifier failure is reported as ineligible.
    """
    if not is_valid_pan(pan):
        return FilingEligibility(eligible=False, reason="Invalid PAN format")

    if not is_itr1_income(income):
        return FilingEligibility(
            eligible=False,
            reason=f"Income exceeds {format_inr(ITR1_INCOME_CEILING)} limit. Use ITR-2 or higher forms.",
        )

    try:
        result = await verifier.verify_pan(pan.upper())
    except PANVerificationError as e:
        logging.warning(f"PAN verification unavailable: {e}", extra={"step": "pan_eligibility"})
        return FilingEligibility(eligible=False, reason="Could not validate PAN")
    except Exception as e:
        pan_verification_failures_counter.inc()
        logging.error(f"Unexpected PAN verification failure: {e}", extra={"step": "pan_eligibility"})
        return FilingEligibility(eligible=False, reason="Could not validate PAN")

    if not result.verified:
        return FilingEligibility(
            eligible=False,
            reason="PAN verification failed. Please verify your PAN details.",
        )

    return FilingEligibility(eligible=True)
