"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from typing import Optional
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pocket_guard.api.main import create_app
from pocket_guard.domain.exceptions import PANVerificationError
from pocket_guard.domain.models import LoanTerms, PANVerificationResult, TaxInputs
from pocket_guard.infrastructure.clients.pan import PANVerificationClient


class StubVerifier:
    """In-memory PAN verifier recording every PAN it is asked about"""

    def __init__(self, verified: bool = True, error: Optional[Exception] = None):
        self.verified = verified
        self.error = error
        self.calls: list[str] = []

    async def verify_pan(self, pan: str, name: Optional[str] = None, date_of_birth: Optional[str] = None):
        self.calls.append(pan)
        if self.error is not None:
            raise self.error
        return PANVerificationResult(verified=self.verified, pan=pan, name=name)


@pytest.fixture
def app() -> FastAPI:
    """Application wired with a mock-mode PAN client (no API key)"""
    return create_app(pan_verifier=PANVerificationClient(api_key=""))


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def verifier() -> StubVerifier:
    return StubVerifier()


@pytest.fixture
def rejecting_verifier() -> StubVerifier:
    return StubVerifier(verified=False)


@pytest.fixture
def unavailable_verifier() -> StubVerifier:
    return StubVerifier(error=PANVerificationError("PAN verification timeout after 15.0s"))


@pytest.fixture
def faulty_verifier() -> StubVerifier:
    """Verifier failing with an error the PAN client would never raise"""
    return StubVerifier(error=RuntimeError("verifier crashed"))


@pytest.fixture
def two_month_loan() -> LoanTerms:
    """₹1,200 at 12% over 2 months: r = 1% exactly, small enough to check by hand"""
    return LoanTerms(
        principal=Decimal("1200"),
        annual_rate_percent=Decimal("12"),
        tenure_months=2,
        start_date=date(2024, 1, 15),
    )


@pytest.fixture
def ten_lakh_taxable_inputs() -> TaxInputs:
    """Salary of ₹10.5 lakh: after the ₹50,000 standard deduction, exactly ₹10 lakh is taxable"""
    return TaxInputs(
        gross_salary=Decimal("1050000"),
        tds_deducted=Decimal("70000"),
    )
