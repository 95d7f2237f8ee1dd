"""
Venue API client
================

GET {base}/venues/{slug}/static  -- venue coordinates
GET {base}/venues/{slug}/dynamic -- delivery pricing parameters

Every failure (transport error, non-2xx status, non-JSON body, missing or
ill-typed keys, out-of-range coordinates) is collapsed into a single
``FetchError`` carrying a generic, user-facing message.  The underlying
cause is logged, never surfaced.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
import pydantic

from delivery_calculator.config import settings
from delivery_calculator.domain.entities import Coordinate, DeliveryPricingSpec
from delivery_calculator.domain.errors import FetchError, ValidationError
from delivery_calculator.infrastructure.venue_schemas import (
    DynamicVenueResponse,
    StaticVenueResponse,
)

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch venue data. Please check the venue slug."


class VenueApiClient:
    def __init__(self, http: httpx.AsyncClient, base_url: str | None = None):
        self.http = http
        self.base_url = (base_url or settings.venue_api_base_url).rstrip("/")

    async def get_location(self, slug: str) -> Coordinate:
        """Return the venue's coordinates from the *static* endpoint."""
        payload = await self._get_json(slug, "static")
        try:
            lng, lat = StaticVenueResponse.model_validate(
                payload
            ).venue_raw.location.coordinates
            return Coordinate(latitude=lat, longitude=lng)
        except (pydantic.ValidationError, ValidationError) as exc:
            raise self._failure(slug, "static", exc) from exc

    async def get_delivery_specs(self, slug: str) -> DeliveryPricingSpec:
        """Return the venue's pricing parameters from the *dynamic* endpoint."""
        payload = await self._get_json(slug, "dynamic")
        try:
            specs = DynamicVenueResponse.model_validate(payload).venue_raw.delivery_specs
        except pydantic.ValidationError as exc:
            raise self._failure(slug, "dynamic", exc) from exc
        return DeliveryPricingSpec(
            order_minimum_no_surcharge=specs.order_minimum_no_surcharge,
            base_price=specs.delivery_pricing.base_price,
        )

    # ── Internals ─────────────────────────────────────────────────────

    def _url(self, slug: str, endpoint: str) -> str:
        return f"{self.base_url}/venues/{quote(slug, safe='')}/{endpoint}"

    async def _get_json(self, slug: str, endpoint: str) -> Any:
        try:
            response = await self.http.get(self._url(slug, endpoint))
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise self._failure(slug, endpoint, exc) from exc

    @staticmethod
    def _failure(slug: str, endpoint: str, exc: Exception) -> FetchError:
        logger.warning("Venue %s lookup failed for %r: %s", endpoint, slug, exc)
        return FetchError(FETCH_FAILED_MESSAGE)
