"""
Shared test fixtures.

The remote venue API is replaced by an in-process ``httpx.MockTransport``
so tests run without network access.  ``FakeVenueApi`` records every
request it receives, which lets tests assert that no lookup happened.
"""

from __future__ import annotations

import copy
from typing import AsyncGenerator, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from delivery_calculator.infrastructure.geolocation import (
    GeolocationProvider,
    UnavailableGeolocationProvider,
)
from delivery_calculator.infrastructure.venue_client import VenueApiClient

VENUE_API_BASE_URL = "https://venue-api.test/v1"
VENUE_SLUG = "home-assignment-venue-helsinki"

# Coordinates are [longitude, latitude]
STATIC_PAYLOAD = {
    "venue_raw": {
        "name": "Home Assignment Venue Helsinki",
        "location": {"coordinates": [24.93, 60.17]},
    }
}

DYNAMIC_PAYLOAD = {
    "venue_raw": {
        "delivery_specs": {
            "order_minimum_no_surcharge": 1000,
            "delivery_pricing": {
                "base_price": 190,
                "distance_ranges": [
                    {"min": 0, "max": 500, "a": 0, "b": 0, "flag": None},
                    {"min": 500, "max": 0, "a": 0, "b": 0, "flag": None},
                ],
            },
        }
    }
}


# ── Fake venue API ────────────────────────────────────────────────────


class FakeVenueApi:
    """Serves the static / dynamic venue endpoints for ``VENUE_SLUG``."""

    def __init__(self) -> None:
        self.payloads = {
            "static": copy.deepcopy(STATIC_PAYLOAD),
            "dynamic": copy.deepcopy(DYNAMIC_PAYLOAD),
        }
        self.status_codes = {"static": 200, "dynamic": 200}
        self.raw_bodies: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.rstrip("/").split("/")
        # .../venues/<slug>/<endpoint>
        if len(parts) < 3 or parts[-3] != "venues" or parts[-2] != VENUE_SLUG:
            return httpx.Response(404, json={"message": "Venue not found"})

        endpoint = parts[-1]
        if endpoint not in self.payloads:
            return httpx.Response(404, json={"message": "Not found"})
        if endpoint in self.raw_bodies:
            return httpx.Response(
                self.status_codes[endpoint], content=self.raw_bodies[endpoint]
            )
        return httpx.Response(
            self.status_codes[endpoint], json=self.payloads[endpoint]
        )


class FixedGeolocation(GeolocationProvider):
    def __init__(self, coordinate):
        self.coordinate = coordinate

    def locate(self):
        return self.coordinate


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def venue_api() -> FakeVenueApi:
    return FakeVenueApi()


@pytest_asyncio.fixture
async def venue_client(venue_api: FakeVenueApi) -> AsyncGenerator[VenueApiClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(venue_api.handler)) as http:
        yield VenueApiClient(http, base_url=VENUE_API_BASE_URL)


@pytest.fixture
def geolocation() -> list[Optional[GeolocationProvider]]:
    """Mutable slot; tests swap in a provider before calling the API."""
    return [UnavailableGeolocationProvider()]


@pytest_asyncio.fixture
async def client(
    venue_client: VenueApiClient, geolocation: list
) -> AsyncGenerator[AsyncClient, None]:
    """AsyncClient against the app, with venue API and geolocation faked."""
    from delivery_calculator.api.app import create_app
    from delivery_calculator.api.dependencies import get_geolocation, get_venue_client
    from delivery_calculator.api.middleware import limiter

    app = create_app()
    app.dependency_overrides[get_venue_client] = lambda: venue_client
    app.dependency_overrides[get_geolocation] = lambda: geolocation[0]

    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
