"""Pydantic models for order-book snapshot payloads.

These mirror what a data provider (a book viewer call or a subgraph query)
returns. Validation only checks shape and integer ranges; protocol rules such
as unique ticks and mirrored books are enforced when the frozen Book and
Market values are built.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from clob.models.currency import Currency
from clob.models.types import Int24, Uint256


class DepthData(BaseModel):
    """One price level: a tick and its resting quantity in unit-size multiples."""

    model_config = ConfigDict(populate_by_name=True)

    tick: Int24
    raw_amount: Uint256 = Field(
        validation_alias=AliasChoices("raw_amount", "rawAmount", "unitAmount", "depth"),
    )


class FeePolicyData(BaseModel):
    """Unpacked fee policy as delivered by a data provider."""

    model_config = ConfigDict(populate_by_name=True)

    uses_quote: bool = Field(validation_alias=AliasChoices("uses_quote", "usesQuote"))
    rate: int


class BookData(BaseModel):
    """Snapshot of a single book."""

    model_config = ConfigDict(populate_by_name=True)

    id: Uint256 | None = None
    base: Currency
    quote: Currency
    unit_size: Uint256 = Field(validation_alias=AliasChoices("unit_size", "unitSize"))
    depths: list[DepthData] = Field(default_factory=list)
    is_opened: bool = Field(default=True, validation_alias=AliasChoices("is_opened", "isOpened"))
    taker_policy: FeePolicyData | int | None = Field(
        default=None,
        validation_alias=AliasChoices("taker_policy", "takerPolicy"),
        description="Unpacked policy or packed uint24; chain default when missing.",
    )
    maker_policy: FeePolicyData | int | None = Field(
        default=None,
        validation_alias=AliasChoices("maker_policy", "makerPolicy"),
    )


class MarketData(BaseModel):
    """Snapshot of a market: the two mirror-image books."""

    model_config = ConfigDict(populate_by_name=True)

    bid_book: BookData = Field(validation_alias=AliasChoices("bid_book", "bidBook"))
    ask_book: BookData = Field(validation_alias=AliasChoices("ask_book", "askBook"))
