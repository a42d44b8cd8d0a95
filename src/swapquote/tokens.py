"""Curated token registry.

Static (chain_id, address) -> metadata lookup. Addresses compare
case-insensitively; the native asset uses a placeholder address.
"""

from dataclasses import dataclass
from typing import Optional

# Native token placeholder address (no contract behind it)
NATIVE_TOKEN_ADDRESS = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"


@dataclass(frozen=True)
class TokenInfo:
    """Token metadata."""

    address: str
    symbol: str
    name: str
    decimals: int


def is_native_token(address: str) -> bool:
    """Check if an address is the native asset placeholder."""
    return address.lower() == NATIVE_TOKEN_ADDRESS.lower()


# Curated token lists per chain
CHAIN_TOKENS: dict[int, list[TokenInfo]] = {
    # Ethereum Mainnet
    1: [
        TokenInfo(NATIVE_TOKEN_ADDRESS, "ETH", "Ethereum", 18),
        TokenInfo("0xdAC17F958D2ee523a2206206994597C13D831ec7", "USDT", "Tether USD", 6),
        TokenInfo("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", "USDC", "USD Coin", 6),
        TokenInfo("0x6B175474E89094C44Da98b954EedeAC495271d0F", "DAI", "Dai Stablecoin", 18),
        TokenInfo("0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", "WBTC", "Wrapped BTC", 8),
    ],
    # BNB Chain (BEP20 stablecoins use 18 decimals)
    56: [
        TokenInfo(NATIVE_TOKEN_ADDRESS, "BNB", "BNB", 18),
        TokenInfo("0x55d398326f99059fF775485246999027B3197955", "USDT", "Tether USD", 18),
        TokenInfo("0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d", "USDC", "USD Coin", 18),
        TokenInfo("0xe9e7CEA3DedcA5984780Bafc599bD69ADd087D56", "BUSD", "BUSD Token", 18),
        TokenInfo("0x2170Ed0880ac9A755fd29B2688956BD959F933F8", "ETH", "Ethereum Token", 18),
    ],
    # Polygon
    137: [
        TokenInfo(NATIVE_TOKEN_ADDRESS, "MATIC", "Polygon", 18),
        TokenInfo("0xc2132D05D31c914a87C6611C10748AEb04B58e8F", "USDT", "Tether USD", 6),
        TokenInfo("0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359", "USDC", "USD Coin", 6),
        TokenInfo("0x8f3Cf7ad23Cd3CaDbD9735AFf958023239c6A063", "DAI", "Dai Stablecoin", 18),
        TokenInfo("0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619", "WETH", "Wrapped Ether", 18),
    ],
    # Arbitrum One
    42161: [
        TokenInfo(NATIVE_TOKEN_ADDRESS, "ETH", "Ethereum", 18),
        TokenInfo("0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", "USDT", "Tether USD", 6),
        TokenInfo("0xaf88d065e77c8cC2239327C5EDb3A432268e5831", "USDC", "USD Coin", 6),
        TokenInfo("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", "DAI", "Dai Stablecoin", 18),
        TokenInfo("0x2f2a2543B76A4166549F7aaB2e75Bef0aefC5B0f", "WBTC", "Wrapped BTC", 8),
    ],
    # Optimism
    10: [
        TokenInfo(NATIVE_TOKEN_ADDRESS, "ETH", "Ethereum", 18),
        TokenInfo("0x94b008aA00579c1307B0EF2c499aD98a8ce58e58", "USDT", "Tether USD", 6),
        TokenInfo("0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85", "USDC", "USD Coin", 6),
        TokenInfo("0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", "DAI", "Dai Stablecoin", 18),
        TokenInfo("0x68f180fcCe6836688e9084f035309E29Bf0A2095", "WBTC", "Wrapped BTC", 8),
    ],
    # Base
    8453: [
        TokenInfo(NATIVE_TOKEN_ADDRESS, "ETH", "Ethereum", 18),
        TokenInfo("0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913", "USDC", "USD Coin", 6),
        TokenInfo("0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb", "DAI", "Dai Stablecoin", 18),
        TokenInfo("0x4200000000000000000000000000000000000006", "WETH", "Wrapped Ether", 18),
    ],
    # Avalanche C-Chain
    43114: [
        TokenInfo(NATIVE_TOKEN_ADDRESS, "AVAX", "Avalanche", 18),
        TokenInfo("0x9702230A8Ea53601f5cD2dc00fDBc13d4dF4A8c7", "USDT", "Tether USD", 6),
        TokenInfo("0xB97EF9Ef8734C71904D8002F8b6Bc66Dd9c48a6E", "USDC", "USD Coin", 6),
        TokenInfo("0xd586E7F844cEa2F87f50152665BCbc2C279D8d70", "DAI", "Dai Stablecoin", 18),
        TokenInfo("0x49D5c2BdFfac6CE2BFdB6640F4F80f226bc10bAB", "WETH", "Wrapped Ether", 18),
    ],
}

# Default token selections per chain (native -> USDC)
DEFAULT_TOKENS: dict[int, tuple[str, str]] = {
    1: (NATIVE_TOKEN_ADDRESS, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"),
    56: (NATIVE_TOKEN_ADDRESS, "0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d"),
    137: (NATIVE_TOKEN_ADDRESS, "0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359"),
    42161: (NATIVE_TOKEN_ADDRESS, "0xaf88d065e77c8cC2239327C5EDb3A432268e5831"),
    10: (NATIVE_TOKEN_ADDRESS, "0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85"),
    8453: (NATIVE_TOKEN_ADDRESS, "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"),
    43114: (NATIVE_TOKEN_ADDRESS, "0xB97EF9Ef8734C71904D8002F8b6Bc66Dd9c48a6E"),
}


class TokenRegistry:
    """Lookup service over curated token lists."""

    def __init__(self, tokens: Optional[dict[int, list[TokenInfo]]] = None):
        self._tokens = tokens if tokens is not None else CHAIN_TOKENS

    def get_tokens_for_chain(self, chain_id: int) -> list[TokenInfo]:
        """Get curated tokens for a chain (empty if unknown)."""
        return list(self._tokens.get(chain_id, []))

    def find_token(self, chain_id: int, address: str) -> Optional[TokenInfo]:
        """Find a token by address in a chain's list."""
        wanted = address.lower()
        for token in self._tokens.get(chain_id, []):
            if token.address.lower() == wanted:
                return token
        return None

    def get_default_tokens(self, chain_id: int) -> tuple[str, str]:
        """Get default (token_in, token_out) pair for a chain."""
        return DEFAULT_TOKENS.get(chain_id, (NATIVE_TOKEN_ADDRESS, NATIVE_TOKEN_ADDRESS))
