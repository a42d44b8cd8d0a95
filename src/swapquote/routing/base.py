"""Abstract quote provider interface for upstream aggregators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class QuoteParams:
    """Normalized parameters for an upstream swap quote."""

    chain_id: int
    token_in: str
    token_out: str
    amount_in: str  # Base units, decimal integer string
    slippage_percent: Decimal  # Upstream interfaces are percentage based
    account: Optional[str] = None
    gas_price: Optional[str] = None  # Wei, decimal integer string


@dataclass(frozen=True)
class RawUpstreamQuote:
    """Swap quote as returned by the aggregator, before enrichment.

    All fields are copied verbatim from the upstream payload.
    """

    in_amount: str
    out_amount: str
    estimated_gas: str
    to: str
    data: str
    value: str = "0"

    def to_dict(self) -> dict:
        """Convert to the wire shape used by the raw quote endpoint."""
        return {
            "inAmount": self.in_amount,
            "outAmount": self.out_amount,
            "estimatedGas": self.estimated_gas,
            "to": self.to,
            "data": self.data,
            "value": self.value,
        }


class QuoteProvider(ABC):
    """Abstract base class for swap quote providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        pass

    @property
    @abstractmethod
    def supported_chains(self) -> list[int]:
        """EVM chain IDs this provider can quote on."""
        pass

    @abstractmethod
    async def get_quote(self, params: QuoteParams) -> RawUpstreamQuote:
        """
        Get a swap quote.

        Args:
            params: Normalized quote parameters

        Returns:
            RawUpstreamQuote with amounts and execution call data

        Raises:
            UnsupportedChain: If the chain has no upstream mapping
            UpstreamTransportError: On non-success HTTP status
            UpstreamLogicError: On an upstream-reported failure
        """
        pass

    def supports_chain(self, chain_id: int) -> bool:
        """Check if this provider supports the chain."""
        return chain_id in self.supported_chains

    async def close(self) -> None:
        """Release provider resources."""
        return None
