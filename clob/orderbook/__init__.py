"""Order-book snapshots and matching simulation."""

from clob.orderbook.book import Book, Depth, FillEvent, Level, TakeResult
from clob.orderbook.book_id import BookKey, to_book_id
from clob.orderbook.market import DepthRow, Market, MarketId, MarketTakeResult, get_market_id
from clob.orderbook.parsing import parse_book, parse_market

__all__ = [
    # Book
    "Book",
    "Depth",
    "FillEvent",
    "Level",
    "TakeResult",
    # Market
    "Market",
    "MarketId",
    "MarketTakeResult",
    "DepthRow",
    "get_market_id",
    # Identifiers
    "BookKey",
    "to_book_id",
    # Parsing
    "parse_book",
    "parse_market",
]
