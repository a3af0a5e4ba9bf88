"""Single-sided order book and its greedy matching walk.

A book holds bids to buy `base` with `quote`: every depth is resting quote
liquidity at a tick. A taker sells base into the book and receives quote,
walking price levels from the highest tick down, the way the contract pops
its tick heap. The walk is read-only; a book can be simulated concurrently.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import structlog

from clob.constants import MAX_TICK, MIN_TICK, TICK_SENTINEL
from clob.errors import InvalidBook, OutOfRange
from clob.fees import FeePolicy
from clob.math import divide
from clob.models import Currency
from clob.tick import to_price
from clob.units import base_to_quote, quote_to_base

logger = structlog.get_logger()


@dataclass(frozen=True)
class Depth:
    """Resting liquidity at one tick, in multiples of the book's unit size."""

    tick: int
    raw_amount: int


@dataclass(frozen=True)
class FillEvent:
    """Amounts exchanged at one tick during a walk."""

    tick: int
    taken_quote_amount: int
    spent_base_amount: int


@dataclass(frozen=True)
class TakeResult:
    """Totals of a take or spend walk, with one event per filled tick."""

    taken_quote_amount: int = 0
    spent_base_amount: int = 0
    events: tuple[FillEvent, ...] = ()


@dataclass(frozen=True)
class Level:
    """Display row for a depth: tick, price and the base it would absorb."""

    tick: int
    price: int
    base_amount: int


@dataclass(frozen=True)
class Book:
    """Snapshot of one book.

    Attributes:
        id: Book id (192-bit hash of the book key)
        base: Currency takers sell into the book
        quote: Currency resting in the book
        unit_size: Quote units per raw depth unit
        depths: At most one depth per tick
        taker_policy: Fee applied to takers
        maker_policy: Fee applied to makers (informational for the walk)
        is_opened: Whether the book has been opened on-chain
    """

    id: int
    base: Currency
    quote: Currency
    unit_size: int
    depths: tuple[Depth, ...] = ()
    taker_policy: FeePolicy = field(default_factory=lambda: FeePolicy(True, 0))
    maker_policy: FeePolicy = field(default_factory=lambda: FeePolicy(True, 0))
    is_opened: bool = True

    def __post_init__(self) -> None:
        depths = tuple(self.depths)
        object.__setattr__(self, "depths", depths)

        if self.unit_size <= 0:
            raise InvalidBook(f"unit size must be positive: {self.unit_size}")

        seen: set[int] = set()
        for depth in depths:
            if depth.tick > MAX_TICK or depth.tick < MIN_TICK:
                raise OutOfRange(f"tick is out of range: {depth.tick}")
            if depth.tick in seen:
                raise InvalidBook(f"duplicate depth at tick {depth.tick} in book {self.id}")
            if depth.raw_amount < 0:
                raise InvalidBook(f"negative depth at tick {depth.tick} in book {self.id}")
            seen.add(depth.tick)

    # -------------------------------------------------------------------------
    # Walk
    # -------------------------------------------------------------------------

    def _ticks_descending(self) -> Iterator[Depth]:
        """Depths from the highest tick down, as the contract's heap yields them."""
        return iter(sorted(self.depths, key=lambda depth: depth.tick, reverse=True))

    def _fill(self, tick: int, raw_amount: int, ceiling: int) -> tuple[int, int]:
        """Quote taken and base spent for filling up to `ceiling` units at a tick."""
        quote_amount = min(raw_amount, ceiling) * self.unit_size
        base_amount = quote_to_base(tick, quote_amount, True)
        if self.taker_policy.uses_quote:
            quote_amount -= self.taker_policy.calculate_fee(quote_amount, False)
        else:
            base_amount += self.taker_policy.calculate_fee(base_amount, False)
        return quote_amount, base_amount

    def take(self, limit_price: int, amount_out: int) -> TakeResult:
        """Simulate taking `amount_out` quote from the book.

        The walk stops at the first tick priced below `limit_price`, when the
        remaining room rounds to zero units, or once `amount_out` is reached.
        Exhausted liquidity yields a partial fill, never an error.

        Args:
            limit_price: Lowest acceptable price (2^96 fixed point)
            amount_out: Quote amount the taker wants to receive

        Returns:
            Quote taken, base spent (fees included) and per-tick events
        """
        if not self.depths:
            return TakeResult()

        taken = 0
        spent = 0
        events: list[FillEvent] = []
        stop_reason = "exhausted"

        depths = self._ticks_descending()
        depth = next(depths, None)
        tick = depth.tick if depth is not None else TICK_SENTINEL
        while tick > TICK_SENTINEL:
            if limit_price > to_price(tick):
                stop_reason = "limit"
                break

            room = amount_out - taken
            if self.taker_policy.uses_quote:
                room = self.taker_policy.calculate_original_amount(room, False)
            ceiling = divide(room, self.unit_size, True)
            if ceiling == 0:
                stop_reason = "no_room"
                break

            quote_amount, base_amount = self._fill(tick, depth.raw_amount, ceiling)
            if quote_amount == 0:
                stop_reason = "zero_fill"
                break

            events.append(FillEvent(tick, quote_amount, base_amount))
            taken += quote_amount
            spent += base_amount
            if amount_out <= taken:
                stop_reason = "filled"
                break

            depth = next(depths, None)
            tick = depth.tick if depth is not None else TICK_SENTINEL

        logger.debug(
            "book_take_walk_stopped",
            book_id=self.id,
            reason=stop_reason,
            fills=len(events),
            taken_quote=taken,
            spent_base=spent,
        )
        return TakeResult(taken, spent, tuple(events))

    def spend(self, limit_price: int, amount_in: int) -> TakeResult:
        """Simulate spending `amount_in` base against the book.

        Args:
            limit_price: Lowest acceptable price (2^96 fixed point)
            amount_in: Base amount the taker is willing to pay

        Returns:
            Quote taken, base spent (fees included) and per-tick events
        """
        if not self.depths:
            return TakeResult()

        taken = 0
        spent = 0
        events: list[FillEvent] = []
        stop_reason = "exhausted"

        depths = self._ticks_descending()
        depth = next(depths, None)
        tick = depth.tick if depth is not None else TICK_SENTINEL
        while spent <= amount_in and tick > TICK_SENTINEL:
            if limit_price > to_price(tick):
                stop_reason = "limit"
                break

            budget = amount_in - spent
            if not self.taker_policy.uses_quote:
                budget = self.taker_policy.calculate_original_amount(budget, True)
            ceiling = base_to_quote(tick, budget, False) // self.unit_size
            if ceiling == 0:
                stop_reason = "no_room"
                break

            quote_amount, base_amount = self._fill(tick, depth.raw_amount, ceiling)
            if base_amount == 0:
                stop_reason = "zero_fill"
                break

            events.append(FillEvent(tick, quote_amount, base_amount))
            taken += quote_amount
            spent += base_amount

            depth = next(depths, None)
            tick = depth.tick if depth is not None else TICK_SENTINEL

        if stop_reason == "exhausted" and spent > amount_in:
            stop_reason = "budget_spent"

        logger.debug(
            "book_spend_walk_stopped",
            book_id=self.id,
            reason=stop_reason,
            fills=len(events),
            taken_quote=taken,
            spent_base=spent,
        )
        return TakeResult(taken, spent, tuple(events))

    def take_by_tick(self, limit_tick: int, amount_out: int) -> TakeResult:
        """take() with the limit given as a tick."""
        return self.take(to_price(limit_tick), amount_out)

    def spend_by_tick(self, limit_tick: int, amount_in: int) -> TakeResult:
        """spend() with the limit given as a tick."""
        return self.spend(to_price(limit_tick), amount_in)

    # -------------------------------------------------------------------------
    # Display
    # -------------------------------------------------------------------------

    def levels(self) -> list[Level]:
        """Depths as display rows, best (highest) tick first.

        base_amount is the base a taker would need to absorb the level,
        rounded down.
        """
        return [
            Level(
                tick=depth.tick,
                price=to_price(depth.tick),
                base_amount=quote_to_base(depth.tick, depth.raw_amount * self.unit_size, False),
            )
            for depth in self._ticks_descending()
        ]


__all__ = [
    "Book",
    "Depth",
    "FillEvent",
    "Level",
    "TakeResult",
]
