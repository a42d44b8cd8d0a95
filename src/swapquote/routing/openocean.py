"""OpenOcean DEX aggregator integration.

Uses the OpenOcean v4 swap endpoint, which returns both the expected output
and the call data needed to execute the swap.
API docs: https://apis.openocean.finance/developer/apis/swap-api
"""

import logging
from decimal import Decimal
from typing import Any, Optional

import httpx

from swapquote.chains import CHAINS
from swapquote.errors import (
    UnsupportedChain,
    UpstreamLogicError,
    UpstreamTransportError,
    UpstreamUnavailable,
)
from swapquote.routing.base import QuoteParams, QuoteProvider, RawUpstreamQuote

logger = logging.getLogger(__name__)

# OpenOcean API endpoint
OPENOCEAN_API_V4 = "https://open-api.openocean.finance/v4"

# Payload status code meaning success
UPSTREAM_OK_CODE = 200

# HTTP statuses that mean "try again later" rather than "broken request"
RETRYABLE_STATUSES = (429, 503)

# EVM chain ID -> OpenOcean chain code
OPENOCEAN_CHAIN_IDS: dict[int, str] = {
    chain_id: chain.upstream_slug for chain_id, chain in CHAINS.items()
}

REQUIRED_FIELDS = ("inAmount", "outAmount", "estimatedGas", "to", "data")


def get_openocean_chain(chain_id: int) -> Optional[str]:
    """Get OpenOcean chain code for an EVM chain ID."""
    return OPENOCEAN_CHAIN_IDS.get(chain_id)


def format_percent(value: Decimal) -> str:
    """Render a percentage without exponent or trailing zeros."""
    return format(value.normalize(), "f")


class OpenOceanProvider(QuoteProvider):
    """OpenOcean DEX aggregator provider.

    Routing across liquidity sources happens upstream; this client only
    builds the request and maps the response envelope.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = OPENOCEAN_API_V4,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize OpenOcean provider.

        Args:
            api_key: OpenOcean API key (optional, raises rate limits)
            base_url: API base URL
            timeout: Request timeout in seconds
            http_client: Shared HTTP client (created lazily if omitted)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    @property
    def name(self) -> str:
        return "OpenOcean"

    @property
    def supported_chains(self) -> list[int]:
        return list(OPENOCEAN_CHAIN_IDS.keys())

    def _get_headers(self) -> dict:
        """Get API headers with authorization."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._http_client

    def build_params(self, params: QuoteParams) -> dict[str, str]:
        """Build the query parameters for a swap quote.

        Each parameter is set exactly once.
        """
        query = {
            "inTokenAddress": params.token_in,
            "outTokenAddress": params.token_out,
            "amount": params.amount_in,
            "slippage": format_percent(params.slippage_percent),
        }
        if params.gas_price:
            query["gasPrice"] = params.gas_price
        if params.account:
            query["account"] = params.account
        return query

    async def get_quote(self, params: QuoteParams) -> RawUpstreamQuote:
        """Get swap quote and execution data from OpenOcean.

        Args:
            params: Normalized quote parameters (amount in base units)

        Returns:
            RawUpstreamQuote copied verbatim from the response
        """
        chain_code = get_openocean_chain(params.chain_id)
        if not chain_code:
            raise UnsupportedChain(params.chain_id)

        url = f"{self.base_url}/{chain_code}/swap"
        query = self.build_params(params)
        client = await self._get_client()

        try:
            response = await client.get(url, headers=self._get_headers(), params=query)
        except httpx.TimeoutException as e:
            logger.warning(f"OpenOcean request timed out on {chain_code}: {e}")
            raise UpstreamUnavailable(None, f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            logger.warning(f"OpenOcean request failed on {chain_code}: {type(e).__name__}: {e}")
            raise UpstreamUnavailable(None, f"{type(e).__name__}: {e}") from e

        return self._parse_response(response)

    def _parse_response(self, response: httpx.Response) -> RawUpstreamQuote:
        """Map the OpenOcean response envelope to a quote or a typed error."""
        if response.status_code in RETRYABLE_STATUSES:
            logger.warning(f"OpenOcean API busy: {response.status_code} - {response.text}")
            raise UpstreamUnavailable(response.status_code, response.text)

        if not response.is_success:
            logger.warning(f"OpenOcean API error: {response.status_code} - {response.text}")
            raise UpstreamTransportError(response.status_code, response.text)

        try:
            payload: Any = response.json()
        except ValueError:
            raise UpstreamLogicError("Response is not valid JSON", response.text)

        if not isinstance(payload, dict):
            raise UpstreamLogicError("Unexpected response shape", payload)

        if payload.get("code") != UPSTREAM_OK_CODE:
            message = payload.get("message") or payload.get("error") or "Unknown error"
            logger.warning(f"OpenOcean returned code {payload.get('code')}: {message}")
            raise UpstreamLogicError(str(message), payload.get("data"))

        data = payload.get("data")
        if not isinstance(data, dict):
            raise UpstreamLogicError("Response has no quote data", payload)

        missing = [field for field in REQUIRED_FIELDS if data.get(field) is None]
        if missing:
            raise UpstreamLogicError(f"Quote is missing fields: {', '.join(missing)}", data)

        return RawUpstreamQuote(
            in_amount=str(data["inAmount"]),
            out_amount=str(data["outAmount"]),
            estimated_gas=str(data["estimatedGas"]),
            to=str(data["to"]),
            data=str(data["data"]),
            value=str(data.get("value") or "0"),
        )

    async def close(self) -> None:
        """Close HTTP client if this provider created it."""
        if self._http_client and self._owns_client:
            await self._http_client.aclose()
        self._http_client = None
