"""
Error taxonomy.

Each failure is scoped to a single user action; the API layer maps every
type to exactly one status code.
"""


class ValidationError(Exception):
    """A required input is missing or cannot be used for a calculation."""


class FetchError(Exception):
    """A venue lookup failed (transport, non-2xx, malformed payload)."""


class GeolocationUnavailable(Exception):
    """The platform cannot supply the user's current location."""
