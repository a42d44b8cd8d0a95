"""Chain and token information API endpoints."""

from fastapi import APIRouter, Depends

from swapquote.web.contracts.assets import ChainListResponse, TokenListResponse
from swapquote.web.controllers.deps import get_chain_service
from swapquote.web.services.chain_service import ChainService

router = APIRouter(prefix="/api/chains", tags=["chains"])


@router.get("", response_model=ChainListResponse)
async def get_chains(service: ChainService = Depends(get_chain_service)) -> ChainListResponse:
    """Get list of supported chains."""
    return service.get_supported_chains()


@router.get("/{chain_id}/tokens", response_model=TokenListResponse)
async def get_chain_tokens(
    chain_id: int,
    service: ChainService = Depends(get_chain_service),
) -> TokenListResponse:
    """Get curated tokens and the default swap pair for a chain."""
    return service.get_chain_tokens(chain_id)
