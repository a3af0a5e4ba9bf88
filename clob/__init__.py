"""Off-chain simulation of an on-chain limit-order-book matching engine."""

from clob.errors import (
    ClobError,
    InvalidBook,
    InvalidFeePolicy,
    InvalidTokenPair,
    OutOfRange,
    UnknownChain,
)
from clob.fees import FeePolicy
from clob.orderbook import Book, Depth, Market, TakeResult, parse_book, parse_market
from clob.tick import from_price, invert_price, invert_tick, to_price
from clob.units import base_to_quote, quote_to_base

__version__ = "0.1.0"

__all__ = [
    # Tick math
    "to_price",
    "from_price",
    "invert_tick",
    "invert_price",
    "base_to_quote",
    "quote_to_base",
    # Fees
    "FeePolicy",
    # Order books
    "Book",
    "Depth",
    "Market",
    "TakeResult",
    "parse_book",
    "parse_market",
    # Errors
    "ClobError",
    "OutOfRange",
    "InvalidFeePolicy",
    "InvalidTokenPair",
    "InvalidBook",
    "UnknownChain",
]
