"""
Value objects for a single price calculation.

None of these outlive the request that created them: they are frozen
dataclasses, built, read and discarded.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ValidationError


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValidationError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValidationError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True)
class DeliveryPricingSpec:
    """Venue-supplied pricing parameters, in minor currency units."""

    order_minimum_no_surcharge: int
    base_price: int


@dataclass(frozen=True)
class PriceBreakdown:
    cart_value: int
    small_order_surcharge: int
    delivery_fee: int
    delivery_distance: int  # meters
    total_price: int
