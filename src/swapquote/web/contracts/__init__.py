"""Request and response contracts for the web layer."""

from swapquote.web.contracts.quotes import (
    EnrichedQuote,
    ErrorResponse,
    ExecutionTx,
    QuoteRequest,
    RawQuoteResponse,
    TokenDescriptor,
)
from swapquote.web.contracts.assets import (
    ChainInfo,
    ChainListResponse,
    TokenInfoResponse,
    TokenListResponse,
)

__all__ = [
    # Quote contracts
    "QuoteRequest",
    "EnrichedQuote",
    "ExecutionTx",
    "TokenDescriptor",
    "RawQuoteResponse",
    "ErrorResponse",
    # Chain contracts
    "ChainInfo",
    "ChainListResponse",
    "TokenInfoResponse",
    "TokenListResponse",
]
