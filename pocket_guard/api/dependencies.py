"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from pocket_guard.infrastructure.clients.pan import PANVerificationClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_pan_verifier(request: Request) -> PANVerificationClient:
    """Provide the PAN verification client built at application startup"""
    return request.app.state.pan_verifier
