"""Chain and token information contracts."""

from pydantic import Field

from swapquote.web.contracts.quotes import CamelModel


class TokenInfoResponse(CamelModel):
    """Information about a curated token."""

    address: str = Field(..., description="Token address (native sentinel for native asset)")
    symbol: str = Field(..., description="Token symbol")
    name: str = Field(..., description="Full token name")
    decimals: int = Field(..., description="Token decimals")
    is_native: bool = Field(default=False, description="Whether this is the chain's native asset")


class TokenListResponse(CamelModel):
    """Curated tokens and default pair for a chain."""

    chain_id: int
    tokens: list[TokenInfoResponse] = Field(default_factory=list)
    default_token_in: str
    default_token_out: str
    total: int = Field(default=0, description="Total number of tokens")


class ChainInfo(CamelModel):
    """Information about a supported blockchain."""

    chain_id: int = Field(..., description="EVM chain ID (1 for Ethereum, etc.)")
    name: str = Field(..., description="Chain display name")
    native_asset: str = Field(..., description="Native asset symbol")
    upstream_slug: str = Field(..., description="Aggregator chain code")
    explorer_url: str = Field(..., description="Block explorer URL")
    legacy_gas: bool = Field(default=False, description="Priced with legacy gas price")


class ChainListResponse(CamelModel):
    """Response containing list of supported chains."""

    chains: list[ChainInfo] = Field(default_factory=list)
    total: int = Field(default=0)
