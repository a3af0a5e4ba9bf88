"""Maker/taker fee policy of an order book.

A policy is a signed rate in millionths (RATE_PRECISION) plus a flag saying
whether the fee is charged in the quote or the base currency. Negative rates
are rebates. The packed uint24 form only matters when a policy is hashed into
a book id; simulation code works with the unpacked fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from clob.constants import (
    FEE_POLICY_RATE_MASK,
    FEE_POLICY_USES_QUOTE_BIT,
    MAX_FEE_RATE,
    MIN_FEE_RATE,
    RATE_PRECISION,
)
from clob.errors import InvalidFeePolicy
from clob.math import divide


@dataclass(frozen=True)
class FeePolicy:
    """Fee policy with a signed rate and a charge-side flag.

    Attributes:
        uses_quote: True if the fee is charged in the quote currency
        rate: Fee rate in millionths; negative for a rebate
    """

    uses_quote: bool
    rate: int

    def __post_init__(self) -> None:
        if self.rate > MAX_FEE_RATE or self.rate < MIN_FEE_RATE:
            raise InvalidFeePolicy(f"fee rate out of range: {self.rate}")

    @classmethod
    def encode(cls, uses_quote: bool, rate: int) -> FeePolicy:
        """Build a validated policy. Alias of the constructor."""
        return cls(uses_quote=uses_quote, rate=rate)

    @classmethod
    def decode(cls, value: int) -> FeePolicy:
        """Unpack a uint24 policy value.

        Args:
            value: Packed policy, (uses_quote << 23) | (rate + 500000)

        Returns:
            The decoded policy

        Raises:
            InvalidFeePolicy: If value is not a valid packed policy
        """
        if value < 0 or value >> (FEE_POLICY_USES_QUOTE_BIT + 1):
            raise InvalidFeePolicy(f"fee policy is not a uint24: {value}")
        uses_quote = (value >> FEE_POLICY_USES_QUOTE_BIT) == 1
        rate = (value & FEE_POLICY_RATE_MASK) - MAX_FEE_RATE
        return cls(uses_quote=uses_quote, rate=rate)

    @classmethod
    def from_value(cls, value: int) -> FeePolicy:
        """Alias of decode, matching the name used by data providers."""
        return cls.decode(value)

    @property
    def value(self) -> int:
        """Packed uint24 representation."""
        return (int(self.uses_quote) << FEE_POLICY_USES_QUOTE_BIT) | (self.rate + MAX_FEE_RATE)

    @property
    def rate_percent(self) -> Decimal:
        """Rate as a percentage, for display only."""
        return Decimal(self.rate) * 100 / RATE_PRECISION

    def calculate_fee(self, amount: int, reverse_rounding: bool) -> int:
        """Signed fee for an amount.

        Positive fees round up (favouring the protocol) and rebates round
        down in magnitude. reverse_rounding flips both.

        Args:
            amount: Amount the rate applies to
            reverse_rounding: Flip the rounding direction

        Returns:
            Fee (positive) or rebate (negative)
        """
        positive = self.rate > 0
        round_up = (not positive) if reverse_rounding else positive
        abs_fee = divide(amount * abs(self.rate), RATE_PRECISION, round_up)
        return abs_fee if positive else -abs_fee

    def calculate_original_amount(self, amount: int, reverse_fee: bool) -> int:
        """Recover the pre-fee amount from a post-fee amount.

        Args:
            amount: Post-fee amount
            reverse_fee: False if the fee was deducted from the original
                amount (amount = a - fee), True if it was added
                (amount = a + fee)

        Note:
            The flag is the negation of the one taken by the on-chain
            FeePolicyLibrary.calculateOriginalAmount and passed at the SDK
            call sites, which use true for the deducted case. Negate the
            flag when porting those call sites.

        Returns:
            Original amount, rounded up
        """
        if reverse_fee:
            divider = RATE_PRECISION + self.rate
        else:
            divider = RATE_PRECISION - self.rate
        return divide(amount * RATE_PRECISION, divider, True)


__all__ = ["FeePolicy"]
