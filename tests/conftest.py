"""Pytest configuration and fixtures."""

import pytest

from clob.chains import DEFAULT_CHAIN_ID_ENV
from clob.models import Currency
from clob.orderbook import Book
from tests.helpers import USDC, WETH, make_book, make_currency


@pytest.fixture(autouse=True)
def _clear_default_chain(monkeypatch):
    """Run every test against the built-in default chain."""
    monkeypatch.delenv(DEFAULT_CHAIN_ID_ENV, raising=False)


@pytest.fixture
def usdc() -> Currency:
    """USDC on Base (6 decimals)."""
    return make_currency(USDC, 6, "USDC")


@pytest.fixture
def weth() -> Currency:
    """WETH on Base (18 decimals)."""
    return make_currency(WETH, 18, "WETH")


@pytest.fixture
def tick_zero_book() -> Book:
    """Bid book with 1000 units resting at tick 0, unit size 10^12, no fee."""
    return make_book(depths=[(0, 1000)])


@pytest.fixture
def ladder_book() -> Book:
    """Bid book with liquidity spread over five ticks, no fee."""
    return make_book(depths=[(-20, 300), (10, 100), (0, 500), (-5, 250), (3, 50)])
