"""Quote enrichment service.

Fetches a swap quote from the upstream aggregator, rejects implausible
exchange rates and derives execution parameters (minimum received under
slippage, gas cost, display amounts). It does NOT sign or submit anything.

Structural problems (bad input, upstream failure, implausible rate) abort
with a typed error. Display problems only degrade the affected fields.
"""

import logging
import re
from decimal import Decimal
from typing import Optional

from swapquote.chains import is_supported
from swapquote.config import Settings, get_settings
from swapquote.errors import (
    FormattingDegraded,
    ImplausibleRate,
    InvalidRequest,
    InvalidSlippage,
    UnsupportedChain,
    UpstreamLogicError,
)
from swapquote.gas import GasResolver
from swapquote.routing.base import QuoteParams, QuoteProvider, RawUpstreamQuote
from swapquote.tokens import TokenInfo, TokenRegistry
from swapquote.units import (
    NATIVE_DECIMALS,
    apply_slippage,
    format_units,
    normalize_to_18,
    parse_base_units,
)
from swapquote.web.contracts.quotes import (
    EnrichedQuote,
    ExecutionTx,
    QuoteRequest,
    TokenDescriptor,
)

logger = logging.getLogger(__name__)

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")

MAX_SLIPPAGE_BPS = 10000


def _short(address: str) -> str:
    """Truncate an address for logging."""
    return address[:10] + "..."


class QuoteEnrichmentService:
    """Builds enriched, validated swap quotes.

    This is a READ-ONLY service; the returned call data is for client-side
    signing.
    """

    def __init__(
        self,
        provider: QuoteProvider,
        gas_resolver: GasResolver,
        token_registry: Optional[TokenRegistry] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize enrichment service.

        Args:
            provider: Upstream quote provider
            gas_resolver: Per-chain gas price resolver
            token_registry: Token metadata lookup
            settings: Application settings (guard thresholds)
        """
        self.provider = provider
        self.gas_resolver = gas_resolver
        self.token_registry = token_registry or TokenRegistry()
        self.settings = settings or get_settings()

    # ======================
    # Validation
    # ======================

    def validate_request(self, request: QuoteRequest) -> None:
        """Check a request before any network call.

        Raises:
            InvalidRequest: Missing or malformed parameters
            UnsupportedChain: Chain has no upstream mapping
            InvalidSlippage: Slippage outside (0, 10000) bps
        """
        required = (
            ("chainId", request.chain_id),
            ("inTokenAddress", request.token_in),
            ("outTokenAddress", request.token_out),
            ("amount", request.amount_in),
        )
        missing = [name for name, value in required if value is None or value == ""]
        if missing:
            raise InvalidRequest(
                "Missing required parameters",
                f"{', '.join(missing)} {'is' if len(missing) == 1 else 'are'} required",
            )

        if request.chain_id <= 0:
            raise InvalidRequest("Invalid chainId", "chainId must be a positive integer")

        if not is_supported(request.chain_id) or not self.provider.supports_chain(request.chain_id):
            raise UnsupportedChain(request.chain_id)

        if not 0 < request.slippage_bps < MAX_SLIPPAGE_BPS:
            raise InvalidSlippage(request.slippage_bps)

        for name, address in (
            ("inTokenAddress", request.token_in),
            ("outTokenAddress", request.token_out),
            ("account", request.account),
        ):
            if address is not None and not ADDRESS_RE.fullmatch(address):
                raise InvalidRequest("Invalid address", f"{name} must be a 0x-prefixed 40-hex address")

        try:
            amount = parse_base_units(request.amount_in)
        except ValueError:
            raise InvalidRequest("Invalid amount", "amount must be a uint256 integer in base units")
        if amount == 0:
            raise InvalidRequest("Invalid amount", "amount must be greater than zero")

        if request.gas_price is not None:
            try:
                parse_base_units(request.gas_price)
            except ValueError:
                raise InvalidRequest("Invalid gasPrice", "gasPrice must be a uint256 integer in wei")

    # ======================
    # Quotes
    # ======================

    async def get_enriched_quote(self, request: QuoteRequest) -> EnrichedQuote:
        """Get a validated, slippage-adjusted quote.

        Args:
            request: Quote request parameters

        Returns:
            EnrichedQuote with raw and human-readable amounts and gas cost
        """
        self.validate_request(request)
        chain_id = request.chain_id
        amount_in = parse_base_units(request.amount_in)

        logger.info(
            f"Quote request: chain={chain_id} in={_short(request.token_in)} "
            f"out={_short(request.token_out)} has_account={bool(request.account)} "
            f"slippage={request.slippage_bps}bps"
        )

        token_in = self.token_registry.find_token(chain_id, request.token_in)
        token_out = self.token_registry.find_token(chain_id, request.token_out)
        if token_in is None or token_out is None:
            logger.debug(f"Token metadata incomplete on chain {chain_id}; formatting degraded")

        gas_price_wei = await self.gas_resolver.resolve_gas_price(chain_id, request.gas_price)

        raw = await self.provider.get_quote(
            self._build_params(request, gas_price=gas_price_wei)
        )

        in_amount_raw = self._parse_upstream_amount(raw.in_amount, "inAmount")
        out_amount_raw = self._parse_upstream_amount(raw.out_amount, "outAmount")

        rate_checked = self.check_exchange_rate(amount_in, out_amount_raw, token_in, token_out)

        min_received_raw = apply_slippage(out_amount_raw, request.slippage_bps)

        in_decimals = token_in.decimals if token_in else None
        out_decimals = token_out.decimals if token_out else None
        gas_cost_wei, gas_cost_native = self.compute_gas_cost(raw.estimated_gas, gas_price_wei)

        logger.info(
            f"Quote success: chain={chain_id} out={out_amount_raw} "
            f"min={min_received_raw} gas={raw.estimated_gas}"
        )

        return EnrichedQuote(
            chain_id=chain_id,
            slippage_bps=request.slippage_bps,
            in_amount_raw=raw.in_amount,
            in_amount=self._display(in_amount_raw, in_decimals),
            out_amount_raw=raw.out_amount,
            out_amount=self._display(out_amount_raw, out_decimals),
            min_received_raw=str(min_received_raw),
            min_received=self._display(min_received_raw, out_decimals),
            estimated_gas=raw.estimated_gas,
            gas_price_wei=gas_price_wei,
            gas_cost_wei=gas_cost_wei,
            gas_cost_native=gas_cost_native,
            token_in=self._descriptor(token_in),
            token_out=self._descriptor(token_out),
            tx=ExecutionTx(to=raw.to, data=raw.data, value=raw.value),
            rate_checked=rate_checked,
        )

    async def get_raw_quote(self, request: QuoteRequest) -> RawUpstreamQuote:
        """Get the upstream quote without enrichment.

        Uses the caller's gas price if given; no gas resolution happens.
        """
        self.validate_request(request)
        return await self.provider.get_quote(
            self._build_params(request, gas_price=request.gas_price)
        )

    def _build_params(self, request: QuoteRequest, gas_price: Optional[str]) -> QuoteParams:
        """Convert a request to upstream parameters (bps -> percent happens here only)."""
        return QuoteParams(
            chain_id=request.chain_id,
            token_in=request.token_in,
            token_out=request.token_out,
            amount_in=str(parse_base_units(request.amount_in)),
            slippage_percent=Decimal(request.slippage_bps) / 100,
            account=request.account,
            gas_price=gas_price,
        )

    # ======================
    # Guards and derived values
    # ======================

    def check_exchange_rate(
        self,
        amount_in: int,
        amount_out: int,
        token_in: Optional[TokenInfo],
        token_out: Optional[TokenInfo],
    ) -> bool:
        """Reject grossly malformed quotes.

        Compares both amounts at 18 decimals. Without decimals for both sides
        no fair comparison is possible, so the check is skipped.

        Returns:
            True if the check ran, False if skipped

        Raises:
            ImplausibleRate: If normalized output exceeds the allowed multiple of input
        """
        if token_in is None or token_out is None:
            logger.debug("Skipping exchange rate check: token decimals unknown")
            return False

        normalized_in = normalize_to_18(amount_in, token_in.decimals)
        normalized_out = normalize_to_18(amount_out, token_out.decimals)
        multiplier = self.settings.implausible_rate_multiplier

        if normalized_out > multiplier * normalized_in:
            logger.error(
                f"Implausible rate {token_in.symbol}->{token_out.symbol}: "
                f"in={normalized_in} out={normalized_out} (>{multiplier}x)"
            )
            raise ImplausibleRate(normalized_in, normalized_out, multiplier)
        return True

    def compute_gas_cost(self, estimated_gas: str, gas_price_wei: str) -> tuple[str, str]:
        """Gas cost in wei and in native units.

        Failures are not fatal: both fields fall back to "0".
        """
        try:
            gas_units = parse_base_units(estimated_gas)
            gas_price = parse_base_units(gas_price_wei)
            cost_wei = gas_units * gas_price
            return str(cost_wei), format_units(cost_wei, NATIVE_DECIMALS)
        except (ValueError, FormattingDegraded) as e:
            logger.warning(f"Gas cost unavailable ({estimated_gas} x {gas_price_wei}): {e}")
            return "0", "0"

    def _display(self, raw: int, decimals: Optional[int]) -> str:
        """Human-readable amount, or the raw value when it cannot be derived."""
        if decimals is None:
            return str(raw)
        try:
            return format_units(raw, decimals)
        except FormattingDegraded as e:
            logger.warning(f"Formatting degraded for {raw}: {e}")
            return str(raw)

    @staticmethod
    def _descriptor(token: Optional[TokenInfo]) -> Optional[TokenDescriptor]:
        if token is None:
            return None
        return TokenDescriptor(address=token.address, symbol=token.symbol, decimals=token.decimals)

    @staticmethod
    def _parse_upstream_amount(value: str, field: str) -> int:
        try:
            return parse_base_units(value)
        except ValueError as e:
            raise UpstreamLogicError(f"{field} is not a uint256 base-unit integer", str(e)) from e
