"""
FastAPI application factory.

* Registers the pricing and location routes.
* Opens / closes the shared venue-API HTTP client via lifespan events.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from delivery_calculator.api.middleware import limiter
from delivery_calculator.api.routes import location, pricing
from delivery_calculator.config import settings
from delivery_calculator.infrastructure.geolocation import provider_from_settings
from delivery_calculator.infrastructure.http_client import (
    close_http_client,
    create_http_client,
)

logging.basicConfig(level=logging.INFO)


def _invalid_request_detail(errors) -> str:
    fields = [
        e["loc"][-1]
        for e in errors
        if len(e.get("loc", ())) > 1 and isinstance(e["loc"][-1], str)
    ]
    if not fields:
        return "Request body must be a JSON object."
    return "Invalid value for " + ", ".join(dict.fromkeys(fields))


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies like any other input error: 400, one message."""
    return JSONResponse(
        status_code=400, content={"detail": _invalid_request_detail(exc.errors())}
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the HTTP client on startup; close it on shutdown."""
    app.state.http_client = create_http_client()
    app.state.geolocation = provider_from_settings(settings)
    yield
    await close_http_client(app.state.http_client)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Delivery Order Price Calculator API",
        description=(
            "Prices a delivery order from a venue slug, a cart value and the "
            "user's location: small order surcharge, distance-based delivery "
            "fee and total, each as a display string and a raw value."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Body errors share the {"detail": "<message>"} shape of domain errors
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    # Routers
    app.include_router(pricing.router, prefix="/api/v1")
    app.include_router(location.router, prefix="/api/v1")

    return app
