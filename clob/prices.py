"""Human-readable price helpers.

Raw prices are 2^96 fixed-point quote-per-base ratios in raw token units.
These helpers rescale them by the currencies' decimals for display, and
parse a human price back to the pair of ticks that bracket it. They are for
presentation and order entry only; matching never goes through Decimal.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, Context, Decimal

from clob.constants import MAX_PRICE, MIN_PRICE, PRICE_ONE
from clob.models import Currency
from clob.tick import from_price, invert_tick, to_price

__all__ = [
    "PricePoint",
    "PriceNeighborhood",
    "format_price",
    "to_raw_price",
    "parse_price",
    "get_market_price",
    "get_price_neighborhood",
]

# Enough digits for MAX_PRICE (~2^161) scaled by 10^77
_CONTEXT = Context(prec=200)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, float):
        # Go through str so 0.1 means 0.1, not its binary expansion
        return Decimal(str(value))
    return Decimal(value)


def format_price(price: int, quote_decimals: int, base_decimals: int) -> Decimal:
    """Display price of a raw fixed-point price.

    Args:
        price: Raw 2^96 fixed-point price
        quote_decimals: Decimals of the quote currency
        base_decimals: Decimals of the base currency

    Returns:
        Quote per base in whole tokens
    """
    value = _CONTEXT.divide(Decimal(price), Decimal(PRICE_ONE))
    value = _CONTEXT.multiply(value, Decimal(10) ** base_decimals)
    value = _CONTEXT.divide(value, Decimal(10) ** quote_decimals)
    return value.normalize(_CONTEXT)


def to_raw_price(
    human_price: Decimal | int | float | str, quote_decimals: int, base_decimals: int
) -> int:
    """Raw fixed-point price of a human price, truncated to an integer."""
    value = _CONTEXT.multiply(_to_decimal(human_price), Decimal(PRICE_ONE))
    value = _CONTEXT.multiply(value, Decimal(10) ** quote_decimals)
    value = _CONTEXT.divide(value, Decimal(10) ** base_decimals)
    return int(value.to_integral_value(rounding=ROUND_DOWN))


def parse_price(
    human_price: Decimal | int | float | str, quote_decimals: int, base_decimals: int
) -> tuple[int, int]:
    """Ticks bracketing a human price.

    The raw price is clamped into [MIN_PRICE, MAX_PRICE] before conversion.

    Args:
        human_price: Quote per base in whole tokens
        quote_decimals: Decimals of the quote currency
        base_decimals: Decimals of the base currency

    Returns:
        (rounding_down_tick, rounding_up_tick); equal when the price sits
        exactly on a tick
    """
    raw_price = to_raw_price(human_price, quote_decimals, base_decimals)
    clamped = max(MIN_PRICE, min(raw_price, MAX_PRICE))
    tick = from_price(clamped)
    if raw_price == to_price(tick):
        return tick, tick
    return tick, tick + 1


def get_market_price(
    quote_decimals: int,
    base_decimals: int,
    bid_tick: int | None = None,
    ask_tick: int | None = None,
) -> Decimal:
    """Display price of a bid-book tick or an ask-book tick.

    The bid tick wins when both are given.

    Raises:
        ValueError: If neither tick is given
    """
    if bid_tick is not None:
        return format_price(to_price(bid_tick), quote_decimals, base_decimals)
    if ask_tick is not None:
        return format_price(to_price(invert_tick(ask_tick)), quote_decimals, base_decimals)
    raise ValueError("Either bid_tick or ask_tick must be provided")


@dataclass(frozen=True)
class PricePoint:
    """A tick with its price in the book's own orientation and in the market's."""

    tick: int
    price: Decimal
    market_price: Decimal


@dataclass(frozen=True)
class PriceNeighborhood:
    """Ticks two steps either side of a price, highest first."""

    next_up: PricePoint
    up: PricePoint
    now: PricePoint
    down: PricePoint
    next_down: PricePoint

    def as_list(self) -> list[PricePoint]:
        return [self.next_up, self.up, self.now, self.down, self.next_down]


def get_price_neighborhood(
    human_price: Decimal | int | float | str, quote: Currency, base: Currency
) -> tuple[PriceNeighborhood, PriceNeighborhood]:
    """Neighbouring ticks of a human price on both books of a market.

    The bid side is anchored on the rounding-down tick, the ask side on the
    inverted rounding-up tick.

    Args:
        human_price: Quote per base in whole tokens
        quote: Market quote currency
        base: Market base currency

    Returns:
        (bid-book neighborhood, ask-book neighborhood)
    """
    down_tick, up_tick = parse_price(human_price, quote.decimals, base.decimals)
    bid_tick = down_tick
    ask_tick = invert_tick(up_tick)

    def bid_point(tick: int) -> PricePoint:
        price = format_price(to_price(tick), quote.decimals, base.decimals)
        return PricePoint(tick=tick, price=price, market_price=price)

    def ask_point(tick: int) -> PricePoint:
        return PricePoint(
            tick=tick,
            price=format_price(to_price(tick), base.decimals, quote.decimals),
            market_price=format_price(to_price(invert_tick(tick)), quote.decimals, base.decimals),
        )

    bids = PriceNeighborhood(*(bid_point(bid_tick + step) for step in (2, 1, 0, -1, -2)))
    asks = PriceNeighborhood(*(ask_point(ask_tick + step) for step in (2, 1, 0, -1, -2)))
    return bids, asks
