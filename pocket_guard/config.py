"""Configuration management using Pydantic Settings"""

from decimal import Decimal
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "pocket-guard-engine"
    log_level: str = "INFO"

    # PAN verification (mock mode when no API key is set)
    government_pan_verification_url: str = "https://api.nsdl.co.in/v1/pan/verify"
    government_api_key: Optional[str] = None

    # HTTP Client
    http_timeout_seconds: float = 15.0

    # Largest tenure accepted at the API boundary; schedules grow linearly with it
    max_tenure_months: int = 600

    # Largest rupee amount (principal, salary, deduction) accepted at the API boundary
    max_amount_inr: Decimal = Decimal("100000000000")
    max_annual_rate_percent: Decimal = Decimal("100")


settings = Settings()
