"""Build Book and Market values from snapshot payloads.

Payloads come from a data provider as JSON-like dicts. Shape errors surface
as pydantic.ValidationError; protocol violations (duplicate ticks, books that
don't mirror each other) surface as the errors of clob.errors. Both are
logged before being re-raised.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from clob.errors import ClobError
from clob.fees import FeePolicy, get_fee_config
from clob.models import BookData, FeePolicyData, MarketData
from clob.orderbook.book import Book, Depth
from clob.orderbook.book_id import BookKey, to_book_id
from clob.orderbook.market import Market

logger = structlog.get_logger()


def _to_policy(
    data: FeePolicyData | int | None, chain_id: int | None, maker: bool
) -> FeePolicy:
    """Resolve a payload policy: unpacked, packed uint24, or the chain default.

    Raises:
        UnknownChain: If the policy is missing and the chain has no defaults
    """
    if isinstance(data, FeePolicyData):
        return FeePolicy(uses_quote=data.uses_quote, rate=data.rate)
    if data is not None:
        return FeePolicy.decode(data)
    fee_config = get_fee_config(chain_id)
    return fee_config.maker_policy if maker else fee_config.taker_policy


def book_from_data(data: BookData, chain_id: int | None = None) -> Book:
    """Convert a validated BookData into a Book.

    Missing fee policies take the chain's defaults; the chain is only
    consulted when a policy is missing. A missing id is derived from the
    book key.
    """
    maker_policy = _to_policy(data.maker_policy, chain_id, maker=True)
    taker_policy = _to_policy(data.taker_policy, chain_id, maker=False)

    book_id = data.id
    if book_id is None:
        book_id = to_book_id(
            BookKey(
                base=data.base.address,
                unit_size=data.unit_size,
                quote=data.quote.address,
                maker_policy=maker_policy,
                taker_policy=taker_policy,
            )
        )

    return Book(
        id=book_id,
        base=data.base,
        quote=data.quote,
        unit_size=data.unit_size,
        depths=tuple(Depth(depth.tick, depth.raw_amount) for depth in data.depths),
        taker_policy=taker_policy,
        maker_policy=maker_policy,
        is_opened=data.is_opened,
    )


def parse_book(data: dict[str, Any], chain_id: int | None = None) -> Book:
    """Parse a book payload.

    Args:
        data: Book payload (see BookData for accepted keys)
        chain_id: Chain the book lives on, for default fee policies (None
            for the CLOB_DEFAULT_CHAIN_ID chain)

    Returns:
        Frozen Book

    Raises:
        pydantic.ValidationError: If the payload is malformed
        ClobError: If the payload violates a protocol rule
    """
    try:
        book = book_from_data(BookData.model_validate(data), chain_id)
    except (ValidationError, ClobError) as e:
        logger.warning("book_payload_rejected", chain_id=chain_id, error=str(e))
        raise
    logger.debug("book_parsed", book_id=book.id, depths=len(book.depths))
    return book


def parse_market(data: dict[str, Any], chain_id: int | None = None) -> Market:
    """Parse a market payload holding both books.

    The books may be given in either order under bid_book/ask_book; the quote
    currency is resolved from the chain configuration.

    Args:
        data: Market payload (see MarketData)
        chain_id: Chain the market lives on (None for the default chain)

    Returns:
        Frozen Market

    Raises:
        pydantic.ValidationError: If the payload is malformed
        ClobError: If the books do not form a valid market
    """
    try:
        market_data = MarketData.model_validate(data)
        market = Market.from_books(
            chain_id,
            book_from_data(market_data.bid_book, chain_id),
            book_from_data(market_data.ask_book, chain_id),
        )
    except (ValidationError, ClobError) as e:
        logger.warning("market_payload_rejected", chain_id=chain_id, error=str(e))
        raise
    logger.debug("market_parsed", market=market.id)
    return market


__all__ = ["book_from_data", "parse_book", "parse_market"]
