"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Token addresses and chain defaults
- factories: Currency, book and market factory functions
"""

from tests.helpers.constants import (
    CHAIN_ID,
    DAI,
    ETH,
    NATIVE_UNIT,
    TOKEN_A,
    TOKEN_B,
    TOKEN_DECIMALS,
    USDC,
    WETH,
)
from tests.helpers.factories import ZERO_FEE, make_book, make_currency, make_market

__all__ = [
    # Constants
    "USDC",
    "DAI",
    "WETH",
    "ETH",
    "TOKEN_A",
    "TOKEN_B",
    "CHAIN_ID",
    "NATIVE_UNIT",
    "TOKEN_DECIMALS",
    # Factories
    "ZERO_FEE",
    "make_currency",
    "make_book",
    "make_market",
]
