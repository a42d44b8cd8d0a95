"""Application configuration using pydantic-settings.

All upstream endpoints, RPC URLs and quote guard thresholds are read from
environment variables (or a local .env file).
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=True, description="Enable debug mode")

    # ======================
    # Upstream Aggregator (OpenOcean)
    # ======================
    openocean_api_url: str = Field(
        default="https://open-api.openocean.finance/v4",
        description="OpenOcean API base URL",
    )
    openocean_api_key: Optional[str] = Field(
        default=None, description="OpenOcean API key (sent as Bearer token)"
    )
    upstream_timeout_seconds: float = Field(
        default=30.0, description="Timeout for upstream quote requests"
    )

    # ======================
    # Chain RPC Endpoints
    # ======================
    eth_rpc_url: str = Field(default="https://eth.llamarpc.com", description="Ethereum RPC URL")
    bsc_rpc_url: str = Field(
        default="https://bsc-dataseed.binance.org", description="BNB Chain RPC URL"
    )
    polygon_rpc_url: str = Field(default="https://polygon-rpc.com", description="Polygon RPC URL")
    arbitrum_rpc_url: str = Field(
        default="https://arb1.arbitrum.io/rpc", description="Arbitrum One RPC URL"
    )
    optimism_rpc_url: str = Field(
        default="https://mainnet.optimism.io", description="Optimism RPC URL"
    )
    base_rpc_url: str = Field(default="https://mainnet.base.org", description="Base RPC URL")
    avax_rpc_url: str = Field(
        default="https://api.avax.network/ext/bc/C/rpc", description="Avalanche C-Chain RPC URL"
    )
    rpc_timeout_seconds: float = Field(default=10.0, description="Timeout for RPC gas queries")

    # ======================
    # Gas Pricing
    # ======================
    legacy_gas_chain_ids: str = Field(
        default="56",
        description="Comma-separated chain IDs priced with legacy eth_gasPrice",
    )
    base_fee_multiplier_percent: int = Field(
        default=120,
        description="Base fee multiplier (percent) used for EIP-1559 maxFeePerGas",
    )

    # ======================
    # Quote Guards
    # ======================
    default_slippage_bps: int = Field(
        default=100, description="Default slippage tolerance in basis points (1%)"
    )
    implausible_rate_multiplier: int = Field(
        default=1000,
        description="Reject quotes whose normalized output exceeds input by this factor",
    )

    @property
    def legacy_gas_chains(self) -> frozenset[int]:
        """Parse legacy gas chain IDs into a set of integers."""
        if not self.legacy_gas_chain_ids:
            return frozenset()
        return frozenset(
            int(cid.strip()) for cid in self.legacy_gas_chain_ids.split(",") if cid.strip()
        )

    def get_rpc_url(self, chain_id: int) -> str:
        """Get RPC URL for a specific EVM chain ID."""
        rpc_map = {
            1: self.eth_rpc_url,
            56: self.bsc_rpc_url,
            137: self.polygon_rpc_url,
            42161: self.arbitrum_rpc_url,
            10: self.optimism_rpc_url,
            8453: self.base_rpc_url,
            43114: self.avax_rpc_url,
        }
        return rpc_map.get(chain_id, "")

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "upstream": {
                "url": self.openocean_api_url,
                "api_key": "***" if self.openocean_api_key else "(not set)",
                "timeout": self.upstream_timeout_seconds,
            },
            "rpc": {
                "ETH": self.eth_rpc_url,
                "BNB": self.bsc_rpc_url,
                "POLYGON": self.polygon_rpc_url,
                "ARBITRUM": self.arbitrum_rpc_url,
                "OPTIMISM": self.optimism_rpc_url,
                "BASE": self.base_rpc_url,
                "AVAX": self.avax_rpc_url,
            },
            "gas": {
                "legacy_chains": sorted(self.legacy_gas_chains),
                "base_fee_multiplier_percent": self.base_fee_multiplier_percent,
            },
            "guards": {
                "default_slippage_bps": self.default_slippage_bps,
                "implausible_rate_multiplier": self.implausible_rate_multiplier,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
