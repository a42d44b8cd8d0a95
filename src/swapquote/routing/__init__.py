"""Routing module for upstream swap quotes.

Providers:
- OpenOcean: EVM DEX aggregator (Ethereum, BNB Chain, Polygon, Arbitrum,
  Optimism, Base, Avalanche)
"""

from swapquote.routing.base import QuoteParams, QuoteProvider, RawUpstreamQuote
from swapquote.routing.factory import create_openocean_provider, create_quote_provider
from swapquote.routing.openocean import OpenOceanProvider

__all__ = [
    # Base classes
    "QuoteParams",
    "QuoteProvider",
    "RawUpstreamQuote",
    # Providers
    "OpenOceanProvider",
    # Factory functions
    "create_openocean_provider",
    "create_quote_provider",
]
