"""FastAPI dependency injection helpers."""

from fastapi import Request

from delivery_calculator.infrastructure.geolocation import GeolocationProvider
from delivery_calculator.infrastructure.venue_client import VenueApiClient


def get_venue_client(request: Request) -> VenueApiClient:
    """Venue client bound to the application's shared HTTP client."""
    return VenueApiClient(request.app.state.http_client)


def get_geolocation(request: Request) -> GeolocationProvider:
    return request.app.state.geolocation
