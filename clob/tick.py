"""Tick <-> price conversion on the order-book price ladder.

A tick is an int24 index; its price is 1.0001^tick expressed as an unsigned
fixed-point number with 96 fractional bits (quote units per base unit).
to_price multiplies the precomputed per-bit ratios for |tick| and takes the
reciprocal for positive ticks, exactly as the contract does.
"""

from __future__ import annotations

from clob.constants import (
    LN_TO_TICK_MULTIPLIER,
    MAX_PRICE,
    MAX_TICK,
    MIN_PRICE,
    MIN_TICK,
    PRICE_INVERSION_NUMERATOR,
    PRICE_ONE,
    PRICE_PRECISION,
    TICK_RATIOS,
)
from clob.errors import OutOfRange
from clob.math import div_trunc, ln_wad

__all__ = [
    "to_price",
    "from_price",
    "invert_tick",
    "invert_price",
]


def to_price(tick: int) -> int:
    """Convert a tick to its fixed-point price.

    Args:
        tick: Tick in [MIN_TICK, MAX_TICK]

    Returns:
        Price as a 2^96 fixed-point integer

    Raises:
        OutOfRange: If tick is outside [MIN_TICK, MAX_TICK]
    """
    if tick > MAX_TICK or tick < MIN_TICK:
        raise OutOfRange(f"tick is out of range: {tick}")

    abs_tick = abs(tick)
    price = TICK_RATIOS[0] if abs_tick & 1 else PRICE_ONE

    for bit, ratio in enumerate(TICK_RATIOS[1:], start=1):
        if abs_tick & (1 << bit):
            price = (price * ratio) >> PRICE_PRECISION

    if tick > 0:
        price = PRICE_INVERSION_NUMERATOR // price
    return price


def from_price(price: int) -> int:
    """Convert a fixed-point price to the largest tick whose price does not exceed it.

    The logarithm is scaled into tick units with signed truncation (EVM sdiv),
    then stepped one tick down if that overshoots. Hence
    to_price(from_price(price)) <= price always holds.

    Args:
        price: Price in [MIN_PRICE, MAX_PRICE]

    Returns:
        Rounding-down tick for the price

    Raises:
        OutOfRange: If price is outside [MIN_PRICE, MAX_PRICE]
    """
    if price > MAX_PRICE or price < MIN_PRICE:
        raise OutOfRange(f"price is out of range: {price}")

    tick = div_trunc(ln_wad(price) * LN_TO_TICK_MULTIPLIER, 1 << 128)
    if to_price(tick) > price:
        return tick - 1
    return tick


def invert_tick(tick: int) -> int:
    """Mirror a tick between the bid and ask orientations of a market."""
    return -tick


def invert_price(price: int) -> int:
    """Reciprocal of a fixed-point price (0 stays 0)."""
    if price == 0:
        return 0
    return PRICE_INVERSION_NUMERATOR // price
