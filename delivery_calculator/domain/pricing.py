"""
Delivery Pricing Engine  (Strategy Pattern)
===========================================

Formula
-------
Total = Cart_Value + Small_Order_Surcharge + Delivery_Fee

* **Small_Order_Surcharge** = max(Order_Minimum_No_Surcharge - Cart_Value, 0)
* **Delivery_Fee**          = Base_Price + round(Distance_m / 100)

All amounts are integers in minor currency units (cents).  Rounding is
half-up (ties away from zero for the non-negative values handled here), so
``1.5 -> 2`` and ``14.99 -> 15``.

Complexity: O(1) per price calculation.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from .entities import DeliveryPricingSpec, PriceBreakdown
from .errors import ValidationError

Number = Union[int, float, Decimal]

METERS_PER_FEE_UNIT = 100


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, ties away from zero.

    Precision is widened to hold every integer digit of ``value``.
    """
    d = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + 2)
        return int(d.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_minor_units(amount: Number) -> int:
    """Convert a major-unit amount (``10.5`` EUR) to minor units (``1050``)."""
    d = Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(d.as_tuple().digits) + 3)
        minor = d * 100
    return round_half_up(minor)


# ── Strategy hierarchy ────────────────────────────────────────────────


class DeliveryFeeStrategy(ABC):
    @abstractmethod
    def calculate(self, distance_m: float, spec: DeliveryPricingSpec) -> int: ...


class LinearDistanceFee(DeliveryFeeStrategy):
    """Base price plus one minor unit per 100 m, rounded half-up."""

    def __init__(self, meters_per_unit: int = METERS_PER_FEE_UNIT):
        self.meters_per_unit = meters_per_unit

    def calculate(self, distance_m: float, spec: DeliveryPricingSpec) -> int:
        return spec.base_price + round_half_up(distance_m / self.meters_per_unit)


# ── Engine facade ─────────────────────────────────────────────────────


class PricingEngine:
    """High-level API used by the order pricing service."""

    def __init__(self, fee_strategy: DeliveryFeeStrategy | None = None):
        self.fee_strategy = fee_strategy or LinearDistanceFee()

    @staticmethod
    def small_order_surcharge(cart_value: int, spec: DeliveryPricingSpec) -> int:
        return max(spec.order_minimum_no_surcharge - cart_value, 0)

    def compute_price(
        self,
        cart_value_eur: Number,
        distance: float,
        spec: DeliveryPricingSpec,
    ) -> PriceBreakdown:
        _check_non_negative("Cart value", cart_value_eur)
        _check_non_negative("Distance", distance)

        cart_value = to_minor_units(cart_value_eur)
        surcharge = self.small_order_surcharge(cart_value, spec)
        delivery_fee = self.fee_strategy.calculate(distance, spec)

        return PriceBreakdown(
            cart_value=cart_value,
            small_order_surcharge=surcharge,
            delivery_fee=delivery_fee,
            delivery_distance=round_half_up(distance),
            total_price=cart_value + surcharge + delivery_fee,
        )


def _check_non_negative(label: str, value: Number) -> None:
    try:
        finite = math.isfinite(value)
    except (TypeError, ValueError, InvalidOperation):
        finite = False
    if not finite or value < 0:
        raise ValidationError(f"{label} must be a finite non-negative number")


_default_engine = PricingEngine()


def compute_price(
    cart_value_eur: Number, distance: float, spec: DeliveryPricingSpec
) -> PriceBreakdown:
    """Price one order with the default (linear distance) fee rule."""
    return _default_engine.compute_price(cart_value_eur, distance, spec)
