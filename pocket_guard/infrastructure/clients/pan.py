"""PAN verification HTTP client for ITR-1 filing eligibility"""

import httpx
from typing import Optional
from pocket_guard.domain.models import PANVerificationResult
from pocket_guard.domain.exceptions import PANVerificationError
from pocket_guard.config import settings
from pocket_guard.infrastructure.observability.metrics import (
    pan_verification_latency_histogram,
    pan_verification_failures_counter,
)


class PANVerificationClient:
    """
    Client for the government PAN verification API.

    Without an API key the client runs in mock mode and reports every
    well-formed request as verified, so development setups need no
    credentials. Construct once at startup and inject it where needed.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.government_pan_verification_url
        self.api_key = api_key if api_key is not None else settings.government_api_key
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    @property
    def mock_mode(self) -> bool:
        return not self.api_key

    async def verify_pan(
        self,
        pan: str,
        name: Optional[str] = None,
        date_of_birth: Optional[str] = None,
    ) -> PANVerificationResult:
        """
        Verify a PAN against government records.

        Raises:
            PANVerificationError: On timeout, HTTP errors, or invalid response
        """
        pan = pan.upper()

        if self.mock_mode:
            return PANVerificationResult(
                verified=True,
                pan=pan,
                name=name,
                status="Active",
                message="PAN verified successfully (mock mode)",
            )

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                with pan_verification_latency_histogram.time():
                    response = await client.post(
                        self.base_url,
                        json={"pan": pan, "name": name, "date_of_birth": date_of_birth},
                        headers={"Authorization": f"Bearer {self.api_key}"},
                    )
                response.raise_for_status()
                data = response.json()

                if not data.get("success", True):
                    return PANVerificationResult(
                        verified=False,
                        pan=pan,
                        error=data.get("error") or "PAN verification failed",
                    )

                return PANVerificationResult(
                    verified=True,
                    pan=pan,
                    name=data.get("name") or name,
                    entity_type=data.get("entity_type") or "Individual",
                    status="Active",
                    message="PAN verified successfully",
                )

            except httpx.TimeoutException as e:
                pan_verification_failures_counter.inc()
                raise PANVerificationError(f"PAN verification timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                pan_verification_failures_counter.inc()
                raise PANVerificationError(f"PAN verification error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                pan_verification_failures_counter.inc()
                raise PANVerificationError(f"Could not connect to verification service: {e}") from e
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                pan_verification_failures_counter.inc()
                raise PANVerificationError(f"Invalid verification response: {e}") from e
