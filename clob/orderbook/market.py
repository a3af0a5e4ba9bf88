"""Two-sided market over a pair of mirror-image books.

The bid book holds quote and is taken by sellers of base. The ask book holds
base and is taken by sellers of quote; its tick t corresponds to the market's
canonical tick -t. Callers always speak in canonical ticks and the market
inverts them for the ask side.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

import structlog
from eth_utils import to_checksum_address

from clob.chains import is_native, is_stablecoin, is_wrapped_native, resolve_chain
from clob.errors import InvalidTokenPair
from clob.models import Currency, is_valid_address, normalize_address
from clob.orderbook.book import Book, FillEvent, TakeResult
from clob.prices import format_price
from clob.tick import invert_price, invert_tick, to_price
from clob.units import quote_to_base

logger = structlog.get_logger()


@dataclass(frozen=True)
class MarketId:
    """Resolved market identity: which token is quoted in which.

    Addresses are EIP-55 checksummed, as in the id.
    """

    market_id: str
    quote: str
    base: str


@dataclass(frozen=True)
class MarketTakeResult:
    """Outcome of a market take or spend, tagged with the book it ran on.

    Amounts are in the walked book's own quote and base currencies.
    """

    book_id: int
    taken_quote_amount: int
    spent_base_amount: int
    events: tuple[FillEvent, ...] = ()

    @classmethod
    def from_book_result(cls, book_id: int, result: TakeResult) -> MarketTakeResult:
        return cls(
            book_id=book_id,
            taken_quote_amount=result.taken_quote_amount,
            spent_base_amount=result.spent_base_amount,
            events=result.events,
        )


@dataclass(frozen=True)
class DepthRow:
    """Display row of a market side in canonical orientation."""

    tick: int
    price: Decimal
    base_amount: int


def get_market_id(chain_id: int | None, addresses: Sequence[str]) -> MarketId:
    """Decide which of two tokens is the quote currency.

    Priority: a stablecoin of the chain, then the native currency, then the
    wrapped native token, then the smaller address (compared lowercase).

    Args:
        chain_id: Chain the tokens live on (None for the default chain)
        addresses: Exactly two token addresses, in any order and any case

    Returns:
        MarketId with EIP-55 checksummed addresses and id "{base}/{quote}"

    Raises:
        InvalidTokenPair: If there are not exactly two distinct, well-formed
            addresses
        UnknownChain: If chain_id is not a known chain
    """
    if len(addresses) != 2:
        raise InvalidTokenPair(f"expected 2 token addresses, got {len(addresses)}")
    for address in addresses:
        if not is_valid_address(address):
            raise InvalidTokenPair(f"not a token address: {address!r}")
    chain = resolve_chain(chain_id)
    tokens = sorted(normalize_address(address) for address in addresses)
    if tokens[0] == tokens[1]:
        raise InvalidTokenPair(f"token pair has the same address twice: {tokens[0]}")

    quote = next((token for token in tokens if is_stablecoin(chain, token)), None)
    if quote is None:
        quote = next((token for token in tokens if is_native(token)), None)
    if quote is None:
        quote = next((token for token in tokens if is_wrapped_native(chain, token)), None)
    if quote is None:
        quote = tokens[0]

    base = tokens[1] if quote == tokens[0] else tokens[0]
    quote, base = to_checksum_address(quote), to_checksum_address(base)
    return MarketId(market_id=f"{base}/{quote}", quote=quote, base=base)


@dataclass(frozen=True)
class Market:
    """A market: bid book (quote resting) and ask book (base resting).

    Attributes:
        id: "{base}/{quote}" with checksummed addresses
        quote: Quote currency of the market
        base: Base currency of the market
        bid_book: Book with quote == market quote
        ask_book: Book with quote == market base
    """

    id: str
    quote: Currency
    base: Currency
    bid_book: Book
    ask_book: Book

    def __post_init__(self) -> None:
        if self.quote.same_address(self.base):
            raise InvalidTokenPair(f"market {self.id} quotes a currency in itself")
        if not (
            self.bid_book.quote.same_address(self.quote)
            and self.bid_book.base.same_address(self.base)
            and self.ask_book.quote.same_address(self.base)
            and self.ask_book.base.same_address(self.quote)
        ):
            raise InvalidTokenPair(
                f"books {self.bid_book.id} and {self.ask_book.id} do not mirror market {self.id}"
            )

    @classmethod
    def from_books(cls, chain_id: int | None, book_a: Book, book_b: Book) -> Market:
        """Build a market from its two books, in either order.

        The quote currency is resolved with get_market_id on chain_id (the
        default chain if None); the book quoted in it becomes the bid book.

        Raises:
            InvalidTokenPair: If the books do not form a mirrored pair
        """
        resolved = get_market_id(chain_id, [book_a.quote.address, book_a.base.address])
        if book_a.quote.same_address(resolved.quote):
            bid_book, ask_book = book_a, book_b
        else:
            bid_book, ask_book = book_b, book_a
        return cls(
            id=resolved.market_id,
            quote=bid_book.quote,
            base=bid_book.base,
            bid_book=bid_book,
            ask_book=ask_book,
        )

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def take(self, take_quote: bool, limit_tick: int, amount_out: int) -> MarketTakeResult:
        """Simulate receiving `amount_out` of one side of the market.

        Args:
            take_quote: True to receive quote (sell base into the bid book),
                False to receive base (sell quote into the ask book)
            limit_tick: Limit in canonical orientation
            amount_out: Amount to receive (quote if take_quote, base otherwise)

        Returns:
            Result tagged with the id of the book that was walked
        """
        if take_quote:
            book = self.bid_book
            limit_price = to_price(limit_tick)
        else:
            book = self.ask_book
            limit_price = to_price(invert_tick(limit_tick))
        result = book.take(limit_price, amount_out)
        logger.debug(
            "market_take",
            market=self.id,
            book_id=book.id,
            take_quote=take_quote,
            taken=result.taken_quote_amount,
        )
        return MarketTakeResult.from_book_result(book.id, result)

    def spend(self, spent_base: bool, limit_tick: int, amount_in: int) -> MarketTakeResult:
        """Simulate paying `amount_in` of one side of the market.

        Args:
            spent_base: True to pay base (bid book), False to pay quote (ask book)
            limit_tick: Limit in canonical orientation
            amount_in: Amount to pay (base if spent_base, quote otherwise)

        Returns:
            Result tagged with the id of the book that was walked
        """
        if spent_base:
            book = self.bid_book
            limit_price = to_price(limit_tick)
        else:
            book = self.ask_book
            limit_price = to_price(invert_tick(limit_tick))
        result = book.spend(limit_price, amount_in)
        logger.debug(
            "market_spend",
            market=self.id,
            book_id=book.id,
            spent_base=spent_base,
            spent=result.spent_base_amount,
        )
        return MarketTakeResult.from_book_result(book.id, result)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    @property
    def bids(self) -> list[DepthRow]:
        """Bid levels, best first, priced in quote per base."""
        return [
            DepthRow(
                tick=depth.tick,
                price=format_price(to_price(depth.tick), self.quote.decimals, self.base.decimals),
                base_amount=quote_to_base(
                    depth.tick, depth.raw_amount * self.bid_book.unit_size, False
                ),
            )
            for depth in sorted(self.bid_book.depths, key=lambda d: d.tick, reverse=True)
        ]

    @property
    def asks(self) -> list[DepthRow]:
        """Ask levels, best (lowest canonical price) first."""
        return [
            DepthRow(
                tick=invert_tick(depth.tick),
                price=format_price(
                    invert_price(to_price(depth.tick)), self.quote.decimals, self.base.decimals
                ),
                base_amount=depth.raw_amount * self.ask_book.unit_size,
            )
            for depth in sorted(self.ask_book.depths, key=lambda d: d.tick, reverse=True)
        ]

    @property
    def maker_fee(self) -> Decimal:
        """Maker fee rate in percent, as configured on the bid book.

        The ask book carries its own policies and is not consulted; when the
        two books differ, read ask_book.maker_policy directly.
        """
        return self.bid_book.maker_policy.rate_percent

    @property
    def taker_fee(self) -> Decimal:
        """Taker fee rate in percent, as configured on the bid book.

        The ask book is not consulted; see maker_fee.
        """
        return self.bid_book.taker_policy.rate_percent


__all__ = [
    "DepthRow",
    "Market",
    "MarketId",
    "MarketTakeResult",
    "get_market_id",
]
