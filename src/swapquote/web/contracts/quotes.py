"""Quote request and response contracts.

Response models serialize with camelCase keys to match the public API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QuoteRequest(BaseModel):
    """Request for an enriched swap quote.

    Fields are deliberately loose; the enrichment service validates them so
    every rejection maps to a typed error.
    """

    chain_id: Optional[int] = Field(None, description="EVM chain ID")
    token_in: Optional[str] = Field(None, description="Input token address or native sentinel")
    token_out: Optional[str] = Field(None, description="Output token address or native sentinel")
    amount_in: Optional[str] = Field(None, description="Input amount in base units")
    account: Optional[str] = Field(None, description="Address that will execute the swap")
    slippage_bps: int = Field(default=100, description="Slippage tolerance in basis points")
    gas_price: Optional[str] = Field(None, description="Gas price override in wei")


class CamelModel(BaseModel):
    """Base for models exposed with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TokenDescriptor(CamelModel):
    """Resolved token metadata."""

    address: str = Field(..., description="Token address")
    symbol: str = Field(..., description="Token symbol")
    decimals: int = Field(..., description="Token decimals")


class ExecutionTx(CamelModel):
    """Call target, call data and native value for the swap transaction."""

    to: str = Field(..., description="Router/contract address")
    data: str = Field(..., description="Calldata (hex)")
    value: str = Field(default="0", description="Native value to attach (wei)")


class EnrichedQuote(CamelModel):
    """Slippage-adjusted quote with gas cost and display amounts.

    Raw fields are authoritative; human-readable fields are derived.
    """

    chain_id: int
    slippage_bps: int

    in_amount_raw: str = Field(..., description="Input amount (base units) echoed upstream")
    in_amount: str = Field(..., description="Human-readable input amount")
    out_amount_raw: str = Field(..., description="Output amount (base units) from upstream")
    out_amount: str = Field(..., description="Human-readable output amount")
    min_received_raw: str = Field(..., description="Minimum output after slippage (base units)")
    min_received: str = Field(..., description="Human-readable minimum output")

    estimated_gas: str = Field(..., description="Estimated gas units")
    gas_price_wei: str = Field(..., description="Gas price used (wei)")
    gas_cost_wei: str = Field(..., description="estimatedGas * gasPriceWei")
    gas_cost_native: str = Field(..., description="Gas cost in native asset")

    token_in: Optional[TokenDescriptor] = None
    token_out: Optional[TokenDescriptor] = None
    tx: ExecutionTx
    rate_checked: bool = Field(default=False, description="Whether the rate guard ran")


class RawQuoteResponse(CamelModel):
    """Upstream quote passed through without enrichment."""

    in_amount: str
    out_amount: str
    estimated_gas: str
    to: str
    data: str
    value: str = "0"


class ErrorResponse(BaseModel):
    """Error body returned with every non-200 response."""

    error: str
    details: Optional[str] = None
    timestamp: str
