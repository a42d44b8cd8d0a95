"""Tests for per-chain gas price resolution."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import BASE_FEE, LEGACY_GAS_PRICE, PRIORITY_FEE, FakeWeb3Factory
from swapquote.config import Settings
from swapquote.errors import GasUnavailable
from swapquote.gas import ClientCache, GasResolver


class TestGasResolver:
    """Tests for GasResolver."""

    @pytest.mark.asyncio
    async def test_override_returned_unchanged(self, gas_resolver, web3_factory):
        """Caller-supplied gas price wins and no client is created."""
        price = await gas_resolver.resolve_gas_price(1, override="12345678901")

        assert price == "12345678901"
        assert web3_factory.created == []
        assert len(gas_resolver.cache) == 0

    @pytest.mark.asyncio
    async def test_eip1559_uses_max_fee(self, gas_resolver, web3_factory):
        """maxFeePerGas = base fee * 120% + priority fee."""
        price = await gas_resolver.resolve_gas_price(1)

        assert price == str(BASE_FEE * 120 // 100 + PRIORITY_FEE)
        assert price == "37500000000"
        eth = web3_factory.created[0].eth
        assert "get_block:latest" in eth.calls
        assert "gas_price" not in eth.calls

    @pytest.mark.asyncio
    async def test_legacy_chain_uses_gas_price(self, gas_resolver, web3_factory):
        """BNB Chain is priced with eth_gasPrice."""
        price = await gas_resolver.resolve_gas_price(56)

        assert price == str(LEGACY_GAS_PRICE)
        assert web3_factory.created[0].eth.calls == ["gas_price"]

    @pytest.mark.asyncio
    async def test_client_bound_to_chain_rpc(self, settings, gas_resolver, web3_factory):
        await gas_resolver.resolve_gas_price(137)

        assert web3_factory.created[0].rpc_url == settings.polygon_rpc_url

    @pytest.mark.asyncio
    async def test_missing_base_fee_raises(self, settings):
        """No silent fallback to zero when the block has no base fee."""
        resolver = GasResolver(
            settings=settings,
            cache=ClientCache(),
            client_factory=FakeWeb3Factory(base_fee=None),
        )

        with pytest.raises(GasUnavailable) as exc_info:
            await resolver.resolve_gas_price(1)

        assert exc_info.value.status_code == 503
        assert "baseFeePerGas" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_zero_gas_price_raises(self, settings):
        resolver = GasResolver(
            settings=settings,
            cache=ClientCache(),
            client_factory=FakeWeb3Factory(gas_price=0),
        )

        with pytest.raises(GasUnavailable):
            await resolver.resolve_gas_price(56)

    @pytest.mark.asyncio
    async def test_rpc_error_raises_gas_unavailable(self, settings):
        resolver = GasResolver(
            settings=settings,
            cache=ClientCache(),
            client_factory=FakeWeb3Factory(error=ConnectionError("429 Too Many Requests")),
        )

        with pytest.raises(GasUnavailable) as exc_info:
            await resolver.resolve_gas_price(1)

        assert "429 Too Many Requests" in exc_info.value.details
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_rpc_timeout_raises_gas_unavailable(self):
        """A hanging RPC call is cut off by the configured timeout."""
        settings = Settings(rpc_timeout_seconds=0.05)

        async def hang(*args, **kwargs):
            await asyncio.sleep(5)

        client = MagicMock()
        client.eth.get_block = hang
        resolver = GasResolver(settings=settings, cache=ClientCache(), client_factory=lambda url: client)

        with pytest.raises(GasUnavailable) as exc_info:
            await resolver.resolve_gas_price(1)

        assert "timed out" in exc_info.value.details

    @pytest.mark.asyncio
    async def test_no_rpc_url_raises(self):
        settings = Settings(eth_rpc_url="")
        resolver = GasResolver(settings=settings, cache=ClientCache(), client_factory=FakeWeb3Factory())

        with pytest.raises(GasUnavailable):
            await resolver.resolve_gas_price(1)

    @pytest.mark.asyncio
    async def test_custom_legacy_chain_list(self):
        settings = Settings(legacy_gas_chain_ids="1, 137")
        factory = FakeWeb3Factory()
        resolver = GasResolver(settings=settings, cache=ClientCache(), client_factory=factory)

        assert resolver.is_legacy(1)
        assert not resolver.is_legacy(56)
        assert await resolver.resolve_gas_price(1) == str(LEGACY_GAS_PRICE)


class TestClientCache:
    """Tests for the per-chain client cache."""

    @pytest.mark.asyncio
    async def test_client_reused_per_chain(self, gas_resolver, web3_factory):
        await gas_resolver.resolve_gas_price(1)
        await gas_resolver.resolve_gas_price(1)
        await gas_resolver.resolve_gas_price(10)

        assert len(web3_factory.created) == 2
        assert 1 in gas_resolver.cache
        assert 10 in gas_resolver.cache

    @pytest.mark.asyncio
    async def test_concurrent_first_use_is_consistent(self, gas_resolver):
        """Concurrent lookups for a cold chain agree and leave one cache entry."""
        prices = await asyncio.gather(*(gas_resolver.resolve_gas_price(8453) for _ in range(10)))

        assert len(set(prices)) == 1
        assert len(gas_resolver.cache) == 1

    @pytest.mark.asyncio
    async def test_fresh_cache_per_resolver(self, settings):
        """Injected caches keep resolvers isolated."""
        first = GasResolver(settings=settings, cache=ClientCache(), client_factory=FakeWeb3Factory())
        second = GasResolver(settings=settings, cache=ClientCache(), client_factory=FakeWeb3Factory())

        await first.resolve_gas_price(1)

        assert 1 in first.cache
        assert 1 not in second.cache

    def test_get_or_create_is_idempotent(self):
        cache = ClientCache()
        factory = MagicMock(side_effect=lambda: object())

        first = cache.get_or_create(1, factory)
        second = cache.get_or_create(1, factory)

        assert first is second
        factory.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_disconnects_and_clears(self):
        cache = ClientCache()
        client = MagicMock()
        client.provider.disconnect = AsyncMock()
        cache.get_or_create(1, lambda: client)

        await cache.close()

        client.provider.disconnect.assert_awaited_once()
        assert len(cache) == 0
