"""Shared async HTTP client, opened and closed with the application."""

import logging

import httpx

from delivery_calculator.config import settings

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """Build the pooled client used for all venue API calls."""
    client = httpx.AsyncClient(timeout=settings.venue_api_timeout_seconds)
    logger.info(
        "HTTP client initialized (timeout=%.1fs)", settings.venue_api_timeout_seconds
    )
    return client


async def close_http_client(client: httpx.AsyncClient) -> None:
    await client.aclose()
    logger.info("HTTP client closed")
