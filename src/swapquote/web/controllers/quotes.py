"""Quote API endpoints."""

import re
from typing import Optional

from fastapi import APIRouter, Depends, Query

from swapquote.config import Settings
from swapquote.errors import InvalidRequest, InvalidSlippage
from swapquote.web.contracts.quotes import (
    EnrichedQuote,
    ErrorResponse,
    QuoteRequest,
    RawQuoteResponse,
)
from swapquote.web.controllers.deps import get_app_settings, get_quote_service
from swapquote.web.services.quote_service import QuoteEnrichmentService

router = APIRouter(prefix="/api", tags=["quotes"])

# ASCII digits only; int() alone would also take "1_0" and non-Latin digits
INTEGER_RE = re.compile(r"-?[0-9]{1,20}")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    502: {"model": ErrorResponse, "description": "Upstream or quote sanity failure"},
    503: {"model": ErrorResponse, "description": "Upstream or gas price unavailable"},
}


def parse_quote_query(
    chain_id: Optional[str] = Query(None, alias="chainId"),
    in_token_address: Optional[str] = Query(None, alias="inTokenAddress"),
    out_token_address: Optional[str] = Query(None, alias="outTokenAddress"),
    amount: Optional[str] = Query(None),
    account: Optional[str] = Query(None),
    slippage_bps: Optional[str] = Query(None, alias="slippageBps"),
    gas_price: Optional[str] = Query(None, alias="gasPrice"),
    settings: Settings = Depends(get_app_settings),
) -> QuoteRequest:
    """Build a QuoteRequest from raw query parameters.

    Only type coercion happens here; the service does the validation.
    """
    parsed_chain_id = None
    if chain_id:
        if not INTEGER_RE.fullmatch(chain_id):
            raise InvalidRequest("Invalid chainId", "chainId must be a valid number")
        parsed_chain_id = int(chain_id)

    if slippage_bps is None or slippage_bps == "":
        parsed_slippage = settings.default_slippage_bps
    else:
        if not INTEGER_RE.fullmatch(slippage_bps):
            raise InvalidSlippage(slippage_bps)
        parsed_slippage = int(slippage_bps)

    return QuoteRequest(
        chain_id=parsed_chain_id,
        token_in=in_token_address or None,
        token_out=out_token_address or None,
        amount_in=amount or None,
        account=account or None,
        slippage_bps=parsed_slippage,
        gas_price=gas_price or None,
    )


@router.get("/swap/quote", response_model=EnrichedQuote, responses=ERROR_RESPONSES)
async def get_swap_quote(
    request: QuoteRequest = Depends(parse_quote_query),
    service: QuoteEnrichmentService = Depends(get_quote_service),
) -> EnrichedQuote:
    """Get an enriched swap quote.

    Returns the upstream quote with minimum received under slippage, gas
    cost and human-readable amounts. This is a READ-ONLY operation.
    """
    return await service.get_enriched_quote(request)


@router.get("/quote", response_model=RawQuoteResponse, responses=ERROR_RESPONSES)
async def get_raw_quote(
    request: QuoteRequest = Depends(parse_quote_query),
    service: QuoteEnrichmentService = Depends(get_quote_service),
) -> RawQuoteResponse:
    """Get the upstream quote without enrichment or rate checks."""
    raw = await service.get_raw_quote(request)
    return RawQuoteResponse(**raw.to_dict())
