"""
Pricing endpoint
================

POST /api/v1/delivery-order-price -- validate, fetch venue data, price the order
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from delivery_calculator.api.dependencies import get_venue_client
from delivery_calculator.api.middleware import limiter
from delivery_calculator.api.schemas import (
    ErrorResponse,
    OrderPriceRequest,
    PriceBreakdownResponse,
)
from delivery_calculator.config import settings
from delivery_calculator.domain.errors import FetchError, ValidationError
from delivery_calculator.infrastructure.venue_client import VenueApiClient
from delivery_calculator.services.order_pricing import (
    OrderForm,
    calculate_order_price,
)

router = APIRouter(tags=["pricing"])


@router.post(
    "/delivery-order-price",
    response_model=PriceBreakdownResponse,
    summary="Calculate the delivery order price",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid input."},
        502: {"model": ErrorResponse, "description": "Venue data could not be fetched."},
    },
)
@limiter.limit(lambda: settings.rate_limit)  # read per request
async def delivery_order_price(
    request: Request,
    body: OrderPriceRequest,
    venues: VenueApiClient = Depends(get_venue_client),
):
    form = OrderForm(
        venue_slug=body.venue_slug,
        cart_value=body.cart_value,
        user_latitude=body.user_latitude,
        user_longitude=body.user_longitude,
    )
    try:
        breakdown = await calculate_order_price(form, venues)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except FetchError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return PriceBreakdownResponse.from_breakdown(breakdown, settings.currency)
