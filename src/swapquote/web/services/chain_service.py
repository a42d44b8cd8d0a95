"""Chain service for chain metadata and curated token lists."""

import logging
from typing import Optional

from swapquote.chains import CHAINS
from swapquote.config import Settings, get_settings
from swapquote.errors import UnsupportedChain
from swapquote.tokens import TokenRegistry, is_native_token
from swapquote.web.contracts.assets import (
    ChainInfo,
    ChainListResponse,
    TokenInfoResponse,
    TokenListResponse,
)

logger = logging.getLogger(__name__)


class ChainService:
    """Service for chain metadata.

    This is a READ-ONLY service over the static registries.
    """

    def __init__(
        self,
        token_registry: Optional[TokenRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        self.token_registry = token_registry or TokenRegistry()
        self.settings = settings or get_settings()

    def get_supported_chains(self) -> ChainListResponse:
        """Get list of supported chains."""
        legacy = self.settings.legacy_gas_chains
        chains = [
            ChainInfo(
                chain_id=chain.chain_id,
                name=chain.name,
                native_asset=chain.symbol,
                upstream_slug=chain.upstream_slug,
                explorer_url=chain.explorer_url,
                legacy_gas=chain.chain_id in legacy,
            )
            for chain in CHAINS.values()
        ]
        return ChainListResponse(chains=chains, total=len(chains))

    def get_chain_tokens(self, chain_id: int) -> TokenListResponse:
        """Get curated tokens and the default pair for a chain.

        Raises:
            UnsupportedChain: If the chain is not in the registry
        """
        if chain_id not in CHAINS:
            raise UnsupportedChain(chain_id)

        tokens = [
            TokenInfoResponse(
                address=token.address,
                symbol=token.symbol,
                name=token.name,
                decimals=token.decimals,
                is_native=is_native_token(token.address),
            )
            for token in self.token_registry.get_tokens_for_chain(chain_id)
        ]
        default_in, default_out = self.token_registry.get_default_tokens(chain_id)
        return TokenListResponse(
            chain_id=chain_id,
            tokens=tokens,
            default_token_in=default_in,
            default_token_out=default_out,
            total=len(tokens),
        )
