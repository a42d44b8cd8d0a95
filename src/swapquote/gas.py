"""Per-chain gas price resolution.

Legacy chains are priced with a single eth_gasPrice query; every other chain
uses an EIP-1559 estimate (latest base fee scaled up, plus the node's
suggested priority fee) and reports the maxFeePerGas component.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from swapquote.config import Settings, get_settings
from swapquote.errors import GasUnavailable

logger = logging.getLogger(__name__)


def create_web3_client(rpc_url: str) -> Any:
    """Create a read-only async web3 client for an RPC endpoint."""
    from web3 import AsyncWeb3

    return AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))


class ClientCache:
    """Per-chain network clients, created lazily and kept for the process lifetime.

    Clients are stateless and interchangeable, so two coroutines racing to
    create the first client for a chain is harmless: the later one is kept.
    """

    def __init__(self):
        self._clients: dict[int, Any] = {}

    def get_or_create(self, chain_id: int, factory: Callable[[], Any]) -> Any:
        """Get the cached client for a chain, creating it on first use."""
        client = self._clients.get(chain_id)
        if client is None:
            client = factory()
            self._clients[chain_id] = client
            logger.debug(f"Created network client for chain {chain_id}")
        return client

    def __contains__(self, chain_id: int) -> bool:
        return chain_id in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def clear(self) -> None:
        """Drop all cached clients."""
        self._clients.clear()

    async def close(self) -> None:
        """Disconnect cached clients and clear the cache."""
        for chain_id, client in list(self._clients.items()):
            provider = getattr(client, "provider", None)
            disconnect = getattr(provider, "disconnect", None)
            if disconnect is None:
                continue
            try:
                await disconnect()
            except Exception as e:
                logger.warning(f"Failed to disconnect client for chain {chain_id}: {e}")
        self.clear()


class GasResolver:
    """Resolves the gas price to quote with for a chain."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[ClientCache] = None,
        client_factory: Callable[[str], Any] = create_web3_client,
    ):
        """Initialize gas resolver.

        Args:
            settings: Application settings (RPC URLs, legacy chain list)
            cache: Client cache to use; a fresh one is created if omitted
            client_factory: Builds a client from an RPC URL
        """
        self.settings = settings or get_settings()
        self.cache = cache if cache is not None else ClientCache()
        self._client_factory = client_factory

    def is_legacy(self, chain_id: int) -> bool:
        """Check whether a chain is priced with legacy gas price."""
        return chain_id in self.settings.legacy_gas_chains

    async def resolve_gas_price(self, chain_id: int, override: Optional[str] = None) -> str:
        """Get the gas price in wei as an integer string.

        Args:
            chain_id: EVM chain ID
            override: Caller-supplied gas price, returned unchanged if given

        Raises:
            GasUnavailable: If no usable gas price could be obtained
        """
        if override is not None:
            return override

        rpc_url = self.settings.get_rpc_url(chain_id)
        if not rpc_url:
            raise GasUnavailable(chain_id, "no RPC endpoint configured")

        client = self.cache.get_or_create(chain_id, lambda: self._client_factory(rpc_url))
        legacy = self.is_legacy(chain_id)

        try:
            if legacy:
                fetch = self._legacy_gas_price(client)
            else:
                fetch = self._eip1559_max_fee(chain_id, client)
            price = await asyncio.wait_for(fetch, timeout=self.settings.rpc_timeout_seconds)
        except GasUnavailable:
            raise
        except asyncio.TimeoutError:
            logger.warning(f"Gas price query timed out on chain {chain_id}")
            raise GasUnavailable(chain_id, "RPC request timed out")
        except Exception as e:
            logger.warning(f"Gas price query failed on chain {chain_id}: {type(e).__name__}: {e}")
            raise GasUnavailable(chain_id, f"{type(e).__name__}: {e}") from e

        if price <= 0:
            raise GasUnavailable(chain_id, f"RPC returned non-positive gas price {price}")

        logger.debug(
            f"Gas price for chain {chain_id}: {price} wei "
            f"({'legacy' if legacy else 'eip1559'})"
        )
        return str(price)

    async def _legacy_gas_price(self, client: Any) -> int:
        """Network-wide gas price."""
        return int(await client.eth.gas_price)

    async def _eip1559_max_fee(self, chain_id: int, client: Any) -> int:
        """maxFeePerGas from the latest base fee and suggested priority fee."""
        block = await client.eth.get_block("latest")
        base_fee = block.get("baseFeePerGas")
        if base_fee is None:
            raise GasUnavailable(chain_id, "latest block has no baseFeePerGas")

        priority_fee = int(await client.eth.max_priority_fee)
        multiplier = self.settings.base_fee_multiplier_percent
        return int(base_fee) * multiplier // 100 + priority_fee
