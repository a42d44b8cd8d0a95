"""swapquote - validated, slippage-adjusted swap quotes from an upstream DEX aggregator."""

__version__ = "0.1.0"
