"""EVM chain registry for supported networks.

Maps EVM chain IDs to display metadata and the upstream aggregator's own
chain identifier. RPC URLs live in settings so they can be overridden per
deployment.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChainConfig:
    """Configuration for an EVM network."""

    chain_id: int
    name: str
    symbol: str  # Native asset symbol
    upstream_slug: str  # OpenOcean chain code
    explorer_url: str


# ======================
# Chain Configurations
# ======================

CHAINS: dict[int, ChainConfig] = {
    1: ChainConfig(
        chain_id=1,
        name="Ethereum",
        symbol="ETH",
        upstream_slug="eth",
        explorer_url="https://etherscan.io",
    ),
    56: ChainConfig(
        chain_id=56,
        name="BNB Chain",
        symbol="BNB",
        upstream_slug="bsc",
        explorer_url="https://bscscan.com",
    ),
    137: ChainConfig(
        chain_id=137,
        name="Polygon",
        symbol="MATIC",
        upstream_slug="polygon",
        explorer_url="https://polygonscan.com",
    ),
    42161: ChainConfig(
        chain_id=42161,
        name="Arbitrum",
        symbol="ETH",
        upstream_slug="arbitrum",
        explorer_url="https://arbiscan.io",
    ),
    10: ChainConfig(
        chain_id=10,
        name="Optimism",
        symbol="ETH",
        upstream_slug="optimism",
        explorer_url="https://optimistic.etherscan.io",
    ),
    8453: ChainConfig(
        chain_id=8453,
        name="Base",
        symbol="ETH",
        upstream_slug="base",
        explorer_url="https://basescan.org",
    ),
    43114: ChainConfig(
        chain_id=43114,
        name="Avalanche C-Chain",
        symbol="AVAX",
        upstream_slug="avax",
        explorer_url="https://snowtrace.io",
    ),
}


def is_supported(chain_id: int) -> bool:
    """Check whether quotes can be requested on this chain."""
    return chain_id in CHAINS
