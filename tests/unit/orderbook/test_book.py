"""Tests for the single-book matching walk."""

from dataclasses import FrozenInstanceError

import pytest

from clob.constants import MAX_TICK
from clob.errors import InvalidBook, OutOfRange
from clob.fees import FeePolicy
from clob.orderbook import Book, FillEvent, TakeResult
from clob.tick import to_price
from clob.units import quote_to_base
from tests.helpers import NATIVE_UNIT, make_book

ZERO_RESULT = TakeResult(0, 0, ())


class TestBookConstruction:
    """Tests for snapshot validation."""

    def test_depths_stored_as_tuple(self):
        book = make_book(depths=[(0, 1), (5, 2)])
        assert isinstance(book.depths, tuple)
        assert len(book.depths) == 2

    def test_duplicate_ticks_rejected(self):
        with pytest.raises(InvalidBook, match="duplicate"):
            make_book(depths=[(3, 10), (3, 20)])

    @pytest.mark.parametrize("unit_size", [0, -1])
    def test_non_positive_unit_size_rejected(self, unit_size):
        with pytest.raises(InvalidBook):
            make_book(unit_size=unit_size)

    def test_negative_depth_rejected(self):
        with pytest.raises(InvalidBook):
            make_book(depths=[(0, -1)])

    def test_tick_out_of_range_rejected(self):
        with pytest.raises(OutOfRange):
            make_book(depths=[(MAX_TICK + 1, 10)])

    def test_frozen(self, tick_zero_book):
        with pytest.raises(FrozenInstanceError):
            tick_zero_book.unit_size = 1  # type: ignore[misc]

    def test_default_policies(self, usdc, weth):
        book = Book(id=7, base=weth, quote=usdc, unit_size=1)
        assert book.taker_policy == FeePolicy(True, 0)
        assert book.maker_policy == FeePolicy(True, 0)
        assert book.depths == ()
        assert book.is_opened


class TestTake:
    """Tests for take (target output amount)."""

    def test_partial_fill_at_tick_zero(self, tick_zero_book):
        """Taking half the level fills exactly, base equals quote at tick 0."""
        amount_out = 5 * 10**14
        result = tick_zero_book.take(to_price(0), amount_out)

        assert result.taken_quote_amount == amount_out
        assert result.spent_base_amount == quote_to_base(0, amount_out, True)
        assert result.spent_base_amount == amount_out
        assert result.events == (FillEvent(0, amount_out, amount_out),)

    def test_drains_book_without_error(self, tick_zero_book):
        """Asking for more than rests returns everything available."""
        result = tick_zero_book.take(to_price(0), 2 * 10**15)

        assert result.taken_quote_amount == 1000 * NATIVE_UNIT
        assert result.spent_base_amount == 1000 * NATIVE_UNIT

    def test_limit_above_best_price(self, tick_zero_book):
        """A limit above the best tick's price gives a zero fill."""
        assert tick_zero_book.take(to_price(0) + 1, 10**14) == ZERO_RESULT

    def test_empty_book(self):
        book = make_book(depths=[])
        assert book.take(0, 10**18) == ZERO_RESULT
        assert book.take(to_price(MAX_TICK), 0) == ZERO_RESULT

    def test_zero_amount(self, tick_zero_book):
        """No room means no fill."""
        assert tick_zero_book.take(to_price(0), 0) == ZERO_RESULT

    def test_rounds_up_to_whole_units(self, tick_zero_book):
        """A sub-unit request still takes one whole unit."""
        result = tick_zero_book.take(to_price(0), 1)
        assert result.taken_quote_amount == NATIVE_UNIT

    def test_walks_from_highest_tick(self, ladder_book):
        """Levels are consumed best price first."""
        result = ladder_book.take(0, 10**30)

        assert [event.tick for event in result.events] == [10, 3, 0, -5, -20]
        assert result.taken_quote_amount == (300 + 100 + 500 + 250 + 50) * NATIVE_UNIT

    def test_stops_at_limit(self, ladder_book):
        """Ticks priced below the limit are not touched."""
        result = ladder_book.take_by_tick(0, 10**30)

        assert [event.tick for event in result.events] == [10, 3, 0]
        assert result.taken_quote_amount == (100 + 50 + 500) * NATIVE_UNIT

    def test_stops_when_target_reached(self, ladder_book):
        result = ladder_book.take(0, 120 * NATIVE_UNIT)

        assert [event.tick for event in result.events] == [10, 3]
        assert result.taken_quote_amount == 120 * NATIVE_UNIT
        assert result.events[1].taken_quote_amount == 20 * NATIVE_UNIT

    def test_base_spent_follows_tick_price(self, ladder_book):
        """Each event's base is the rounded-up conversion at its tick."""
        result = ladder_book.take(0, 10**30)
        for event in result.events:
            assert event.spent_base_amount == quote_to_base(event.tick, event.taken_quote_amount, True)
        assert result.spent_base_amount == sum(e.spent_base_amount for e in result.events)

    def test_monotonic_in_amount_out(self, ladder_book):
        """A larger target never takes less."""
        limit = to_price(-10)
        previous = 0
        for units in range(0, 1300, 37):
            taken = ladder_book.take(limit, units * NATIVE_UNIT + 11).taken_quote_amount
            assert taken >= previous
            previous = taken

    def test_quote_side_fee(self):
        """A quote-charged taker fee is deducted from the quote received."""
        book = make_book(taker_policy=FeePolicy(True, 1000))
        result = book.take(to_price(0), 5 * 10**14)

        # 501 units are needed so that 0.1% off still covers the target
        assert result.events[0].tick == 0
        assert result.taken_quote_amount == 501 * NATIVE_UNIT - 501 * 10**9
        assert result.taken_quote_amount >= 5 * 10**14
        assert result.spent_base_amount == 501 * NATIVE_UNIT

    def test_base_side_fee(self):
        """A base-charged taker fee is added to the base paid."""
        book = make_book(taker_policy=FeePolicy(False, 1000))
        result = book.take(to_price(0), 5 * 10**14)

        assert result.taken_quote_amount == 5 * 10**14
        assert result.spent_base_amount == 5 * 10**14 + 5 * 10**11

    def test_quote_side_rebate(self):
        """A rebate increases the quote received."""
        book = make_book(taker_policy=FeePolicy(True, -300))
        result = book.take(to_price(0), 2 * 10**15)

        assert result.taken_quote_amount == 1000 * NATIVE_UNIT + 300 * 10**9
        assert result.spent_base_amount == 1000 * NATIVE_UNIT

    def test_zero_depth_stops_walk(self):
        """An empty level yields a zero increment and ends the walk."""
        book = make_book(depths=[(5, 0), (0, 1000)])
        assert book.take(0, 10**30) == ZERO_RESULT


class TestSpend:
    """Tests for spend (input budget)."""

    def test_spend_within_level(self, tick_zero_book):
        result = tick_zero_book.spend(to_price(0), 3 * 10**14)

        assert result.taken_quote_amount == 3 * 10**14
        assert result.spent_base_amount == 3 * 10**14

    def test_spend_more_than_available(self, tick_zero_book):
        result = tick_zero_book.spend(to_price(0), 10**18)

        assert result.taken_quote_amount == 1000 * NATIVE_UNIT
        assert result.spent_base_amount == 1000 * NATIVE_UNIT

    def test_budget_below_one_unit(self, tick_zero_book):
        """A budget worth less than one unit fills nothing."""
        assert tick_zero_book.spend(to_price(0), NATIVE_UNIT - 1) == ZERO_RESULT

    def test_budget_truncates_to_whole_units(self, tick_zero_book):
        result = tick_zero_book.spend(to_price(0), 3 * NATIVE_UNIT + 5)
        assert result.taken_quote_amount == 3 * NATIVE_UNIT
        assert result.spent_base_amount == 3 * NATIVE_UNIT

    def test_limit_above_best_price(self, tick_zero_book):
        assert tick_zero_book.spend(to_price(0) + 1, 10**18) == ZERO_RESULT

    def test_empty_book(self):
        assert make_book(depths=[]).spend(0, 10**18) == ZERO_RESULT

    def test_never_overspends_without_fee(self, ladder_book):
        for budget in (1, 10**12, 7 * 10**13 + 3, 10**15, 10**21):
            result = ladder_book.spend(0, budget)
            assert result.spent_base_amount <= budget

    def test_stops_at_limit(self, ladder_book):
        result = ladder_book.spend_by_tick(3, 10**21)
        assert [event.tick for event in result.events] == [10, 3]

    def test_base_side_fee(self):
        """A base-charged fee shrinks the fill so that fee plus base fits the budget."""
        book = make_book(taker_policy=FeePolicy(False, 1000))
        result = book.spend(to_price(0), 10**15)

        assert result.taken_quote_amount == 999 * NATIVE_UNIT
        assert result.spent_base_amount == 999 * NATIVE_UNIT + 999 * 10**9
        assert result.spent_base_amount <= 10**15

    def test_quote_side_fee(self):
        """A quote-charged fee leaves base untouched and trims the quote."""
        book = make_book(taker_policy=FeePolicy(True, 1000))
        result = book.spend(to_price(0), 4 * 10**14)

        assert result.spent_base_amount == 4 * 10**14
        assert result.taken_quote_amount == 4 * 10**14 - 4 * 10**11


class TestLevels:
    """Tests for display levels."""

    def test_sorted_best_first(self, ladder_book):
        levels = ladder_book.levels()
        assert [level.tick for level in levels] == [10, 3, 0, -5, -20]

    def test_values(self, tick_zero_book):
        (level,) = tick_zero_book.levels()
        assert level.price == to_price(0)
        assert level.base_amount == 1000 * NATIVE_UNIT
