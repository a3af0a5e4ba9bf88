"""Currency metadata."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clob.models.types import Address, normalize_address


class Currency(BaseModel):
    """An ERC-20 token (or the native currency at the zero address).

    Addresses are stored lowercase so equality is case-insensitive.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    address: Address = Field(alias="id")
    name: str = ""
    symbol: str = ""
    # Some tokens use more than 18 decimals; 77 is the uint256 ceiling
    decimals: int = Field(ge=0, le=77)

    @field_validator("address")
    @classmethod
    def _lowercase_address(cls, value: str) -> str:
        return normalize_address(value)

    @field_validator("decimals", mode="before")
    @classmethod
    def _coerce_decimals(cls, value: object) -> object:
        # Subgraphs return decimals as strings
        if isinstance(value, str) and value.isdigit():
            return int(value)
        return value

    def same_address(self, other: Currency | str) -> bool:
        """Compare addresses with another currency or a raw address."""
        other_address = other.address if isinstance(other, Currency) else other
        return self.address == normalize_address(other_address)
