"""Typed failures raised while building an enriched quote.

Every fatal error carries the HTTP status class the API layer reports, so a
caller can tell bad input (400) from upstream trouble (502/503).
"""

import json
from typing import Any, Optional


class QuoteError(Exception):
    """Base class for quote failures that abort the request."""

    status_code: int = 500

    def __init__(self, error: str, details: Optional[str] = None):
        self.error = error
        self.details = details
        super().__init__(f"{error}: {details}" if details else error)


class InvalidRequest(QuoteError):
    """Missing or malformed request parameters."""

    status_code = 400


class UnsupportedChain(QuoteError):
    """Chain ID has no upstream mapping."""

    status_code = 400

    def __init__(self, chain_id: Any):
        self.chain_id = chain_id
        super().__init__(
            "Unsupported chain",
            f"Chain ID {chain_id} is not supported by OpenOcean",
        )


class InvalidSlippage(QuoteError):
    """Slippage tolerance outside the open interval (0, 10000) bps."""

    status_code = 400

    def __init__(self, slippage_bps: Any):
        self.slippage_bps = slippage_bps
        super().__init__(
            "Invalid slippage",
            f"slippageBps must be between 1 and 9999, got {slippage_bps}",
        )


class GasUnavailable(QuoteError):
    """No usable gas price could be obtained for the chain."""

    status_code = 503

    def __init__(self, chain_id: int, reason: str):
        self.chain_id = chain_id
        super().__init__("Gas price unavailable", f"Chain {chain_id}: {reason}")


class UpstreamTransportError(QuoteError):
    """Upstream answered with a non-success HTTP status."""

    status_code = 502

    def __init__(self, upstream_status: Optional[int], body: str):
        self.upstream_status = upstream_status
        self.body = body
        if upstream_status is None:
            error = "OpenOcean API unreachable"
        else:
            error = f"OpenOcean API error: {upstream_status}"
        super().__init__(error, body or None)


class UpstreamUnavailable(UpstreamTransportError):
    """Upstream is rate limiting, overloaded or unreachable."""

    status_code = 503


class UpstreamLogicError(QuoteError):
    """Upstream answered 2xx but its payload reports a failure."""

    status_code = 502

    def __init__(self, message: str, payload: Any = None):
        self.payload = payload
        details = None
        if isinstance(payload, str):
            details = payload
        elif payload is not None:
            details = json.dumps(payload, default=str)
        super().__init__(f"OpenOcean error: {message}", details)


class ImplausibleRate(QuoteError):
    """Normalized output exceeds normalized input by more than the allowed factor."""

    status_code = 502

    def __init__(self, normalized_in: int, normalized_out: int, multiplier: int):
        self.normalized_in = normalized_in
        self.normalized_out = normalized_out
        self.multiplier = multiplier
        super().__init__(
            "Implausible exchange rate",
            f"Quoted output is more than {multiplier}x the input "
            f"(normalized in={normalized_in}, out={normalized_out})",
        )


class FormattingDegraded(Exception):
    """A display value could not be derived; the raw value is shown instead.

    Never reaches the API caller.
    """
