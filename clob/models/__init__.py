"""Pydantic models for currencies and order-book snapshots."""

from clob.models.currency import Currency
from clob.models.snapshot import BookData, DepthData, FeePolicyData, MarketData
from clob.models.types import Address, Int24, Uint256, is_valid_address, normalize_address

__all__ = [
    # Types
    "Address",
    "Int24",
    "Uint256",
    "normalize_address",
    "is_valid_address",
    # Models
    "Currency",
    "DepthData",
    "FeePolicyData",
    "BookData",
    "MarketData",
]
