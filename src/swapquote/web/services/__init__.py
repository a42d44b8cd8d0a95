"""Web services for read-only quote operations.

SECURITY: These services MUST NOT sign or broadcast transactions.
"""

from swapquote.web.services.chain_service import ChainService
from swapquote.web.services.quote_service import QuoteEnrichmentService

__all__ = [
    "ChainService",
    "QuoteEnrichmentService",
]
