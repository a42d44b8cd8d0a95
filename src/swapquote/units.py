"""Base-unit amount helpers.

Amounts travel as decimal integer strings in a token's smallest unit and are
handled as Python ints. Nothing here goes through float.
"""

import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from swapquote.errors import FormattingDegraded

NATIVE_DECIMALS = 18

_BASE_UNITS_RE = re.compile(r"^[0-9]+$")

# Every EVM amount is a uint256
MAX_BASE_UNITS = 2**256 - 1
_MAX_BASE_UNITS_DIGITS = len(str(MAX_BASE_UNITS))


def parse_base_units(value: Union[str, int]) -> int:
    """Parse an unsigned integer amount in base units.

    Raises:
        ValueError: If value is not an integer in the uint256 range
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a base-unit amount: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Negative base-unit amount: {value}")
        if value > MAX_BASE_UNITS:
            raise ValueError("Base-unit amount exceeds uint256")
        return value
    text = str(value).strip()
    if not _BASE_UNITS_RE.match(text):
        raise ValueError(f"Not a base-unit amount: {text[:32]!r}")
    # Length check first so huge strings never reach int()
    digits = text.lstrip("0") or "0"
    if len(digits) > _MAX_BASE_UNITS_DIGITS:
        raise ValueError(f"Base-unit amount has {len(digits)} digits, exceeds uint256")
    amount = int(digits)
    if amount > MAX_BASE_UNITS:
        raise ValueError("Base-unit amount exceeds uint256")
    return amount


def format_units(raw: int, decimals: int) -> str:
    """Scale a base-unit integer to a human-readable decimal string.

    Trailing fractional zeros are dropped: format_units(1500000, 6) == "1.5".
    """
    if decimals < 0:
        raise FormattingDegraded(f"Invalid decimals: {decimals}")
    if raw < 0:
        raise FormattingDegraded(f"Negative amount: {raw}")
    if decimals == 0:
        return str(raw)

    whole, fraction = divmod(raw, 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0")
    if not fraction_str:
        return str(whole)
    return f"{whole}.{fraction_str}"


def parse_units(text: str, decimals: int) -> int:
    """Convert a human-readable decimal string back to base units.

    Raises FormattingDegraded when the value has more fractional digits than
    the token supports (that would require a fractional base unit).
    """
    if decimals < 0:
        raise FormattingDegraded(f"Invalid decimals: {decimals}")
    try:
        value = Decimal(text.strip())
    except (InvalidOperation, AttributeError):
        raise FormattingDegraded(f"Not a decimal amount: {text!r}")
    if not value.is_finite() or value < 0:
        raise FormattingDegraded(f"Not a non-negative amount: {text!r}")

    with localcontext() as ctx:
        ctx.prec = len(text) + decimals + 10
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise FormattingDegraded(
                f"{text} has more than {decimals} fractional digits"
            )
        return int(scaled)


def normalize_to_18(raw: int, decimals: int) -> int:
    """Bring a base-unit amount to the 18-decimal scale.

    Tokens with more than 18 decimals are floor-divided.
    """
    if decimals < NATIVE_DECIMALS:
        return raw * 10 ** (NATIVE_DECIMALS - decimals)
    if decimals > NATIVE_DECIMALS:
        return raw // 10 ** (decimals - NATIVE_DECIMALS)
    return raw


def apply_slippage(raw: int, slippage_bps: int) -> int:
    """Minimum amount after slippage, rounded down."""
    return raw * (10000 - slippage_bps) // 10000
