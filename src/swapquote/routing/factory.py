"""Factory for creating the upstream quote provider."""

import logging
from typing import Optional

import httpx

from swapquote.config import Settings, get_settings
from swapquote.routing.base import QuoteProvider

logger = logging.getLogger(__name__)


def create_openocean_provider(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> QuoteProvider:
    """Create OpenOcean provider from settings.

    Args:
        settings: Application settings (uses cached settings if omitted)
        http_client: Shared HTTP client for upstream calls
    """
    from swapquote.routing.openocean import OpenOceanProvider

    settings = settings or get_settings()
    if not settings.openocean_api_key:
        logger.info("OPENOCEAN_API_KEY not set - using public rate limits")

    return OpenOceanProvider(
        api_key=settings.openocean_api_key,
        base_url=settings.openocean_api_url,
        timeout=settings.upstream_timeout_seconds,
        http_client=http_client,
    )


def create_quote_provider(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> QuoteProvider:
    """Create the quote provider used by the enrichment service."""
    provider = create_openocean_provider(settings=settings, http_client=http_client)
    logger.info(f"Using {provider.name} quote provider ({len(provider.supported_chains)} chains)")
    return provider
