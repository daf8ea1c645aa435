"""Pocket Guard finance engine - HTTP entry point

Serves EMI quotes, amortization schedules, ITR-1 tax computation and filing
eligibility. Run with: uvicorn pocket_guard.api.main:app
"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from pocket_guard.api.middleware import RequestIDMiddleware, MetricsMiddleware
from pocket_guard.api.v1 import loans, tax, pan
from pocket_guard.domain.validators import PANVerifier
from pocket_guard.infrastructure.clients.pan import PANVerificationClient
from pocket_guard.infrastructure.observability.logging import setup_logging
from pocket_guard.config import settings

setup_logging(settings.log_level)


def create_app(pan_verifier: PANVerifier | None = None) -> FastAPI:
    """
    Build the calculation API.

    Args:
        pan_verifier: PAN verification backend shared by every request
            (default: PANVerificationClient from settings, mock mode without a key)
    """
    app = FastAPI(
        title="Pocket Guard Finance Engine",
        description="EMI amortization and ITR-1 tax calculation service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.pan_verifier = pan_verifier or PANVerificationClient()

    # Last added runs first: request ID is set before latency is measured
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "service": settings.service_name,
            "pan_verification": "mock" if getattr(app.state.pan_verifier, "mock_mode", False) else "live",
        }

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(loans.router, prefix="/v1", tags=["loans"])
    app.include_router(tax.router, prefix="/v1", tags=["tax"])
    app.include_router(pan.router, prefix="/v1", tags=["pan"])

    return app


app = create_app()
