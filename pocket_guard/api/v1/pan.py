"""POST /v1/pan/eligibility - ITR-1 filing eligibility for a PAN"""

import time
from fastapi import APIRouter, Depends, Request

from pocket_guard.api.v1.schemas import PANEligibilityRequest, PANEligibilityResponse
from pocket_guard.api.dependencies import get_pan_verifier, get_request_id
from pocket_guard.domain.validators import PANVerifier, validate_pan_for_itr_filing
from pocket_guard.infrastructure.observability.metrics import record_eligibility
from pocket_guard.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post("/pan/eligibility", response_model=PANEligibilityResponse)
async def check_pan_eligibility(
    request_body: PANEligibilityRequest,
    request: Request,
    verifier: PANVerifier = Depends(get_pan_verifier),
):
    """
    Check PAN format, the ITR-1 income ceiling and government verification.

    Flow:
    1. Reject malformed PANs
    2. Reject incomes at or above ₹50 lakh
    3. Ask the verification service; outages count as ineligible
    """
    start_time = time.time()
    request_id = get_request_id(request)

    eligibility = await validate_pan_for_itr_filing(request_body.pan, request_body.income, verifier)

    record_eligibility(eligibility.eligible)
    log_calculation(
        request_id,
        "pan_eligibility",
        (time.time() - start_time) * 1000,
        eligible=eligibility.eligible,
    )

    return PANEligibilityResponse(eligible=eligibility.eligible, reason=eligibility.reason)
