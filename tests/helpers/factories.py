"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_book
    # or
    from tests.helpers.factories import make_book, make_market

    book = make_book(depths=[(0, 1000)])
"""

from collections.abc import Iterable

from eth_utils import to_checksum_address

from clob.fees import FeePolicy
from clob.models import Currency
from clob.orderbook import Book, Depth, Market
from tests.helpers.constants import NATIVE_UNIT, TOKEN_DECIMALS, USDC, WETH

# Zero-fee policy charged in quote, the default for simulation tests
ZERO_FEE = FeePolicy(True, 0)


def make_currency(address: str, decimals: int | None = None, symbol: str = "") -> Currency:
    """Create a currency, looking up decimals for known test tokens."""
    if decimals is None:
        decimals = TOKEN_DECIMALS.get(address, 18)
    return Currency(address=address, name=symbol, symbol=symbol, decimals=decimals)


def make_book(
    depths: Iterable[tuple[int, int]] = ((0, 1000),),
    base: str = WETH,
    quote: str = USDC,
    unit_size: int = NATIVE_UNIT,
    taker_policy: FeePolicy = ZERO_FEE,
    maker_policy: FeePolicy = ZERO_FEE,
    book_id: int = 1,
    base_decimals: int | None = None,
    quote_decimals: int | None = None,
) -> Book:
    """Create a book with sensible defaults.

    Args:
        depths: (tick, raw_amount) pairs (default: 1000 units at tick 0)
        base: Base token address (default: WETH)
        quote: Quote token address (default: USDC)
        unit_size: Quote units per raw unit (default: 10^12)
        taker_policy: Taker fee policy (default: zero fee in quote)
        maker_policy: Maker fee policy (default: zero fee in quote)
        book_id: Book id (default: 1)
        base_decimals: Override base decimals
        quote_decimals: Override quote decimals

    Returns:
        Book instance ready for testing
    """
    return Book(
        id=book_id,
        base=make_currency(base, base_decimals),
        quote=make_currency(quote, quote_decimals),
        unit_size=unit_size,
        depths=tuple(Depth(tick, raw_amount) for tick, raw_amount in depths),
        taker_policy=taker_policy,
        maker_policy=maker_policy,
    )


def make_market(
    bid_depths: Iterable[tuple[int, int]] = ((0, 1000),),
    ask_depths: Iterable[tuple[int, int]] = ((0, 1000),),
    base: str = WETH,
    quote: str = USDC,
    unit_size: int = NATIVE_UNIT,
    taker_policy: FeePolicy = ZERO_FEE,
    maker_policy: FeePolicy = ZERO_FEE,
) -> Market:
    """Create a market from a bid book (quote resting) and an ask book (base resting).

    Both books share the unit size and fee policies. Ids are 1 (bid) and 2 (ask).
    """
    bid_book = make_book(
        bid_depths,
        base=base,
        quote=quote,
        unit_size=unit_size,
        taker_policy=taker_policy,
        maker_policy=maker_policy,
        book_id=1,
    )
    ask_book = make_book(
        ask_depths,
        base=quote,
        quote=base,
        unit_size=unit_size,
        taker_policy=taker_policy,
        maker_policy=maker_policy,
        book_id=2,
    )
    return Market(
        id=f"{to_checksum_address(base)}/{to_checksum_address(quote)}",
        quote=bid_book.quote,
        base=bid_book.base,
        bid_book=bid_book,
        ask_book=ask_book,
    )
