"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from delivery_calculator.domain.entities import PriceBreakdown
from delivery_calculator.domain.formatting import format_distance, format_money


# ── Requests ──────────────────────────────────────────────────────────


class OrderPriceRequest(BaseModel):
    """Raw form fields.  Presence and format are checked by the service."""

    venue_slug: Optional[str] = Field(
        None, examples=["home-assignment-venue-helsinki"]
    )
    cart_value: Optional[str] = Field(
        None, description="Cart value in EUR, e.g. ``10.00``."
    )
    user_latitude: Optional[str] = None
    user_longitude: Optional[str] = None

    model_config = {"coerce_numbers_to_str": True}


# ── Responses ─────────────────────────────────────────────────────────


class DisplayValue(BaseModel):
    output: str
    raw: int


class PriceBreakdownResponse(BaseModel):
    cart_value: DisplayValue
    small_order_surcharge: DisplayValue
    delivery_fee: DisplayValue
    delivery_distance: DisplayValue
    total_price: DisplayValue

    @classmethod
    def from_breakdown(
        cls, breakdown: PriceBreakdown, currency: str = "EUR"
    ) -> PriceBreakdownResponse:
        def money(minor: int) -> DisplayValue:
            return DisplayValue(output=format_money(minor, currency), raw=minor)

        return cls(
            cart_value=money(breakdown.cart_value),
            small_order_surcharge=money(breakdown.small_order_surcharge),
            delivery_fee=money(breakdown.delivery_fee),
            delivery_distance=DisplayValue(
                output=format_distance(breakdown.delivery_distance),
                raw=breakdown.delivery_distance,
            ),
            total_price=money(breakdown.total_price),
        )


class LocationResponse(BaseModel):
    latitude: float
    longitude: float


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
