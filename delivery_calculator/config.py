"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Venue API
    venue_api_base_url: str = (
        "https://consumer-api.development.dev.woltapi.com/home-assignment-api/v1"
    )
    venue_api_timeout_seconds: float = 5.0  # httpx default

    # Display
    currency: str = "EUR"

    # Geolocation source; both unset => location lookup is unsupported
    user_latitude: Optional[float] = None
    user_longitude: Optional[float] = None

    # Rate limiting (per client IP)
    rate_limit: str = "100/minute"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
