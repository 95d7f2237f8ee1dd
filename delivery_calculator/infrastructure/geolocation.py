"""
Geolocation providers.

A server has no device to ask, so the user's location comes from
configuration (``USER_LATITUDE`` / ``USER_LONGITUDE``).  When nothing is
configured the lookup is unsupported: callers get ``GeolocationUnavailable``
and fall back to manual coordinate entry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal

from delivery_calculator.config import Settings
from delivery_calculator.domain.entities import Coordinate
from delivery_calculator.domain.errors import GeolocationUnavailable

# Same precision the form fields are filled with
COORDINATE_STEP = Decimal("0.00001")


class GeolocationProvider(ABC):
    @abstractmethod
    def locate(self) -> Coordinate:
        """Return the user's current position or raise ``GeolocationUnavailable``."""


class StaticGeolocationProvider(GeolocationProvider):
    def __init__(self, latitude: float, longitude: float):
        self.coordinate = Coordinate(
            latitude=_to_fixed(latitude),
            longitude=_to_fixed(longitude),
        )

    def locate(self) -> Coordinate:
        return self.coordinate


class UnavailableGeolocationProvider(GeolocationProvider):
    def locate(self) -> Coordinate:
        raise GeolocationUnavailable("Geolocation is not supported.")


def provider_from_settings(settings: Settings) -> GeolocationProvider:
    if settings.user_latitude is None or settings.user_longitude is None:
        return UnavailableGeolocationProvider()
    return StaticGeolocationProvider(settings.user_latitude, settings.user_longitude)


def _to_fixed(value: float) -> float:
    """Five-decimal rounding of the exact binary value, ties away from zero."""
    if not -180 <= value <= 180:
        return value  # left for Coordinate to reject
    return float(Decimal(value).quantize(COORDINATE_STEP, rounding=ROUND_HALF_UP))
