"""Pytest configuration and fixtures."""

import os
from typing import Optional

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "true"
os.environ["OPENOCEAN_API_KEY"] = ""
os.environ["LEGACY_GAS_CHAIN_IDS"] = "56"

from swapquote.chains import CHAINS
from swapquote.config import Settings
from swapquote.gas import ClientCache, GasResolver
from swapquote.routing.base import QuoteParams, QuoteProvider, RawUpstreamQuote
from swapquote.tokens import TokenRegistry
from swapquote.web.services.quote_service import QuoteEnrichmentService

USDC_ETH = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
DAI_ETH = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
UNKNOWN_TOKEN = "0x1111111111111111111111111111111111111111"
ACCOUNT = "0x2222222222222222222222222222222222222222"

BASE_FEE = 30_000_000_000  # 30 gwei
PRIORITY_FEE = 1_500_000_000  # 1.5 gwei
LEGACY_GAS_PRICE = 3_000_000_000  # 3 gwei


class FakeEth:
    """Stand-in for web3's AsyncEth module."""

    def __init__(
        self,
        gas_price: int = LEGACY_GAS_PRICE,
        base_fee: Optional[int] = BASE_FEE,
        priority_fee: int = PRIORITY_FEE,
        error: Optional[Exception] = None,
    ):
        self._gas_price = gas_price
        self._base_fee = base_fee
        self._priority_fee = priority_fee
        self._error = error
        self.calls: list[str] = []

    async def _value(self, name: str, value):
        self.calls.append(name)
        if self._error:
            raise self._error
        return value

    @property
    def gas_price(self):
        return self._value("gas_price", self._gas_price)

    @property
    def max_priority_fee(self):
        return self._value("max_priority_fee", self._priority_fee)

    async def get_block(self, block_identifier):
        block = {} if self._base_fee is None else {"baseFeePerGas": self._base_fee}
        return await self._value(f"get_block:{block_identifier}", block)


class FakeWeb3:
    """Stand-in for AsyncWeb3 bound to one RPC URL."""

    def __init__(self, rpc_url: str, **eth_kwargs):
        self.rpc_url = rpc_url
        self.eth = FakeEth(**eth_kwargs)


class FakeWeb3Factory:
    """Client factory that records every client it builds."""

    def __init__(self, **eth_kwargs):
        self.eth_kwargs = eth_kwargs
        self.created: list[FakeWeb3] = []

    def __call__(self, rpc_url: str) -> FakeWeb3:
        client = FakeWeb3(rpc_url, **self.eth_kwargs)
        self.created.append(client)
        return client


class FakeQuoteProvider(QuoteProvider):
    """Quote provider returning a canned upstream quote."""

    def __init__(
        self,
        quote: Optional[RawUpstreamQuote] = None,
        error: Optional[Exception] = None,
    ):
        self.quote = quote or make_raw_quote()
        self.error = error
        self.calls: list[QuoteParams] = []

    @property
    def name(self) -> str:
        return "Fake"

    @property
    def supported_chains(self) -> list[int]:
        return list(CHAINS.keys())

    async def get_quote(self, params: QuoteParams) -> RawUpstreamQuote:
        self.calls.append(params)
        if self.error:
            raise self.error
        return self.quote


def make_raw_quote(
    in_amount: str = "1000000000000000000",
    out_amount: str = "950000000",
    estimated_gas: str = "210000",
    value: str = "1000000000000000000",
) -> RawUpstreamQuote:
    """Build an upstream quote (defaults: 1 ETH -> 950 USDC)."""
    return RawUpstreamQuote(
        in_amount=in_amount,
        out_amount=out_amount,
        estimated_gas=estimated_gas,
        to="0x6352a56caadC4F1E25CD6c75970Fa768A3304e64",
        data="0x90411a32",
        value=value,
    )


@pytest.fixture
def settings() -> Settings:
    """Fresh settings instance (not the cached one)."""
    return Settings()


@pytest.fixture
def web3_factory() -> FakeWeb3Factory:
    return FakeWeb3Factory()


@pytest.fixture
def gas_resolver(settings, web3_factory) -> GasResolver:
    """Gas resolver with its own cache and fake RPC clients."""
    return GasResolver(settings=settings, cache=ClientCache(), client_factory=web3_factory)


@pytest.fixture
def provider() -> FakeQuoteProvider:
    return FakeQuoteProvider()


@pytest.fixture
def quote_service(provider, gas_resolver, settings) -> QuoteEnrichmentService:
    return QuoteEnrichmentService(
        provider=provider,
        gas_resolver=gas_resolver,
        token_registry=TokenRegistry(),
        settings=settings,
    )

