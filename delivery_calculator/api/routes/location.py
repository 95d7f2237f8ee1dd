"""
Location & health endpoints
===========================

GET /api/v1/location -- the user's current position, if a provider supports it
GET /api/v1/health   -- simple health check
"""

from fastapi import APIRouter, Depends, HTTPException

from delivery_calculator.api.dependencies import get_geolocation
from delivery_calculator.api.schemas import ErrorResponse, HealthResponse, LocationResponse
from delivery_calculator.domain.errors import GeolocationUnavailable
from delivery_calculator.infrastructure.geolocation import GeolocationProvider

router = APIRouter(tags=["location"])


@router.get(
    "/location",
    response_model=LocationResponse,
    summary="Get the user's current location",
    responses={503: {"model": ErrorResponse, "description": "Geolocation unsupported."}},
)
async def get_location(geolocation: GeolocationProvider = Depends(get_geolocation)):
    try:
        coordinate = geolocation.locate()
    except GeolocationUnavailable as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    return LocationResponse(
        latitude=coordinate.latitude, longitude=coordinate.longitude
    )


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()
