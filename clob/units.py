"""Conversion between base and quote amounts at a tick's price.

Both directions scale by 2^96 (the price precision) and let the caller pick
the rounding direction. The matching walk rounds against the taker.
"""

from __future__ import annotations

from clob.constants import NATIVE_UNIT_SIZE, PRICE_PRECISION, UNIT_SIZE_SUPPLY_THRESHOLD
from clob.math import divide
from clob.tick import to_price

__all__ = [
    "base_to_quote",
    "quote_to_base",
    "calculate_unit_size",
]


def base_to_quote(tick: int, base: int, rounding_up: bool) -> int:
    """Quote amount worth `base` at the tick's price.

    Args:
        tick: Price tick
        base: Base amount
        rounding_up: Round the result up if True

    Returns:
        base * price / 2^96
    """
    return divide(base * to_price(tick), 1 << PRICE_PRECISION, rounding_up)


def quote_to_base(tick: int, quote: int, rounding_up: bool) -> int:
    """Base amount worth `quote` at the tick's price.

    Args:
        tick: Price tick
        quote: Quote amount
        rounding_up: Round the result up if True

    Returns:
        quote * 2^96 / price
    """
    return divide(quote << PRICE_PRECISION, to_price(tick), rounding_up)


def calculate_unit_size(quote_decimals: int, total_supply: int, is_native: bool = False) -> int:
    """Default unit size for a book quoted in the given currency.

    Native and wrapped-native quotes use 10^12. Other tokens use 1 when their
    total supply fits in 64 bits, else 10^(decimals - 6) floored at 1.

    Args:
        quote_decimals: Decimals of the quote currency
        total_supply: Total supply of the quote currency (raw units)
        is_native: True for the native currency or its wrapped token

    Returns:
        Unit size in quote raw units
    """
    if is_native:
        return NATIVE_UNIT_SIZE
    if total_supply <= UNIT_SIZE_SUPPLY_THRESHOLD:
        return 1
    return 10 ** max(quote_decimals - 6, 0)
