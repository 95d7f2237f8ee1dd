"""
Distance calculation using the Haversine formula.

Assumption
----------
Delivery distance is the great-circle distance between the user and the
venue on a spherical Earth, not a road distance.  A routing-service client
returning real courier distances would replace this module.

Complexity: O(1) per call.
"""

import math

from .entities import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Return the great-circle distance in **meters** between two points."""
    lat1_r, lat2_r = math.radians(a.latitude), math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    h = min(h, 1.0)  # float drift near antipodes
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c
