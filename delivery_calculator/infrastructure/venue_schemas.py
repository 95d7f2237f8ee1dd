"""
Pydantic models for the two venue API payloads.

Only the keys the calculator reads are declared; everything else in the
response is ignored.

Static endpoint::

    {"venue_raw": {"location": {"coordinates": [lon, lat]}}}

Dynamic endpoint::

    {"venue_raw": {"delivery_specs": {
        "order_minimum_no_surcharge": 1000,
        "delivery_pricing": {"base_price": 190, ...}}}}
"""

from pydantic import BaseModel


# ── Static ────────────────────────────────────────────────────────────


class VenueLocation(BaseModel):
    coordinates: tuple[float, float]  # GeoJSON order: longitude, latitude


class StaticVenueRaw(BaseModel):
    location: VenueLocation


class StaticVenueResponse(BaseModel):
    venue_raw: StaticVenueRaw


# ── Dynamic ───────────────────────────────────────────────────────────


class DeliveryPricing(BaseModel):
    base_price: int


class DeliverySpecs(BaseModel):
    order_minimum_no_surcharge: int
    delivery_pricing: DeliveryPricing


class DynamicVenueRaw(BaseModel):
    delivery_specs: DeliverySpecs


class DynamicVenueResponse(BaseModel):
    venue_raw: DynamicVenueRaw
