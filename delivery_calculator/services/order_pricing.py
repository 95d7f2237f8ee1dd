"""
Order pricing pipeline
======================

validate form -> fetch venue location -> fetch delivery specs
              -> distance_meters -> compute_price

The pipeline is linear: a ``ValidationError`` short-circuits before any
network call, a ``FetchError`` before any computation.  No partial results
are ever returned.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Optional

from delivery_calculator.domain.distance import distance_meters
from delivery_calculator.domain.entities import Coordinate, PriceBreakdown
from delivery_calculator.domain.errors import ValidationError
from delivery_calculator.domain.pricing import compute_price
from delivery_calculator.infrastructure.venue_client import VenueApiClient

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all fields."

# Raw values are read by browsers; keep them within Number.MAX_SAFE_INTEGER
MAX_SAFE_INTEGER = 2**53 - 1
MAX_CART_VALUE = Decimal(MAX_SAFE_INTEGER) / 100


@dataclass(frozen=True)
class OrderForm:
    """The four raw user inputs, exactly as typed."""

    venue_slug: Optional[str] = None
    cart_value: Optional[str] = None
    user_latitude: Optional[str] = None
    user_longitude: Optional[str] = None

    def missing_fields(self) -> list[str]:
        return [
            f.name
            for f in fields(self)
            if getattr(self, f.name) is None or not getattr(self, f.name).strip()
        ]


async def calculate_order_price(
    form: OrderForm, venues: VenueApiClient
) -> PriceBreakdown:
    """Run the full pipeline for one form submission."""
    missing = form.missing_fields()
    if missing:
        logger.info("Rejected order form, missing %s", ", ".join(missing))
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    cart_value = _parse_cart_value(form.cart_value)
    user = Coordinate(
        latitude=_parse_float(form.user_latitude, "User latitude"),
        longitude=_parse_float(form.user_longitude, "User longitude"),
    )
    slug = form.venue_slug.strip()

    venue = await venues.get_location(slug)
    spec = await venues.get_delivery_specs(slug)

    distance = distance_meters(user, venue)
    breakdown = compute_price(cart_value, distance, spec)
    logger.info(
        "Priced order for %s: distance=%dm total=%d",
        slug,
        breakdown.delivery_distance,
        breakdown.total_price,
    )
    return breakdown


# ── Parsing ───────────────────────────────────────────────────────────


def _parse_cart_value(raw: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise ValidationError("Cart value must be a number") from None
    if not value.is_finite() or value < 0:
        raise ValidationError("Cart value must be a non-negative number")
    if value > MAX_CART_VALUE:
        raise ValidationError(f"Cart value must not exceed {MAX_CART_VALUE} EUR")
    return value


def _parse_float(raw: str, label: str) -> float:
    try:
        value = float(raw.strip())
    except ValueError:
        raise ValidationError(f"{label} must be a number") from None
    if not math.isfinite(value):
        raise ValidationError(f"{label} must be a finite number")
    return value
