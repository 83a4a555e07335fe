"""Tests for the pure entry workflow transitions."""

import pytest
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from apps.ledger import workflow
from apps.ledger.exceptions import InvalidTransitionError
from apps.ledger.workflow import EntryState, EntryStatus


def make_record(day, quantity='1.500'):
    return SimpleNamespace(date=day, quantity=Decimal(quantity))


JUNE_1 = date(2024, 6, 1)
PRICE = Decimal('60.00')


class TestInitial:

    def test_without_price_asks_for_price(self):
        state = workflow.initial(JUNE_1, None)

        assert state.status == EntryStatus.NO_PRICE_SET
        assert state.mode == 'set_price'
        assert not state.accepts_quantity

    def test_with_price_awaits_lookup(self):
        state = workflow.initial(JUNE_1, PRICE)

        assert state.status == EntryStatus.AWAITING_LOOKUP
        assert state.mode == 'log_quantity'
        assert state.price == PRICE


class TestLookupResolved:

    def test_no_record_unlocks_quantity(self):
        state = workflow.lookup_resolved(workflow.initial(JUNE_1, PRICE), None)

        assert state.status == EntryStatus.NO_RECORD_FOR_DATE
        assert state.accepts_quantity
        assert not state.quantity_locked
        assert state.quantity is None

    def test_existing_record_locks_quantity(self):
        state = workflow.lookup_resolved(
            workflow.initial(JUNE_1, PRICE), make_record(JUNE_1, '2.000')
        )

        assert state.status == EntryStatus.RECORD_EXISTS
        assert state.quantity_locked
        assert not state.accepts_quantity
        assert state.quantity == Decimal('2.000')

    def test_record_for_other_date_counts_as_none(self):
        state = workflow.lookup_resolved(
            workflow.initial(JUNE_1, PRICE), make_record(date(2024, 6, 2))
        )

        assert state.status == EntryStatus.NO_RECORD_FOR_DATE

    def test_only_from_awaiting_lookup(self):
        state = workflow.initial(JUNE_1, None)

        with pytest.raises(InvalidTransitionError):
            workflow.lookup_resolved(state, None)


class TestRecordCreated:

    def test_advances_to_next_day(self):
        state = workflow.lookup_resolved(workflow.initial(JUNE_1, PRICE), None)

        next_state = workflow.record_created(state, make_record(JUNE_1))

        assert next_state.status == EntryStatus.AWAITING_LOOKUP
        assert next_state.date == date(2024, 6, 2)
        assert next_state.price == PRICE
        assert next_state.quantity is None

    def test_advances_across_month_end(self):
        june_30 = date(2024, 6, 30)
        state = workflow.lookup_resolved(workflow.initial(june_30, PRICE), None)

        next_state = workflow.record_created(state, make_record(june_30))

        assert next_state.date == date(2024, 7, 1)

    def test_locked_date_cannot_take_a_record(self):
        state = workflow.lookup_resolved(
            workflow.initial(JUNE_1, PRICE), make_record(JUNE_1)
        )

        with pytest.raises(InvalidTransitionError):
            workflow.record_created(state, make_record(JUNE_1))


class TestOtherTransitions:

    def test_price_set_leaves_set_price_mode(self):
        state = workflow.price_set(workflow.initial(JUNE_1, None), PRICE)

        assert state.status == EntryStatus.AWAITING_LOOKUP
        assert state.price == PRICE
        assert state.date == JUNE_1

    def test_select_date_keeps_price(self):
        state = workflow.lookup_resolved(workflow.initial(JUNE_1, PRICE), make_record(JUNE_1))

        moved = workflow.select_date(state, date(2024, 6, 5))

        assert moved.status == EntryStatus.AWAITING_LOOKUP
        assert moved.date == date(2024, 6, 5)
        assert moved.quantity is None

    def test_lookup_failed_stops(self):
        state = workflow.lookup_failed(workflow.initial(JUNE_1, PRICE))

        assert state.status == EntryStatus.STOPPED
        assert not state.accepts_quantity
        assert not state.quantity_locked

    def test_stopped_can_retry_by_selecting_date(self):
        stopped = workflow.lookup_failed(workflow.initial(JUNE_1, PRICE))

        assert workflow.select_date(stopped, JUNE_1).status == EntryStatus.AWAITING_LOOKUP

    def test_states_are_immutable(self):
        state = EntryState(EntryStatus.NO_PRICE_SET, JUNE_1)

        with pytest.raises(AttributeError):
            state.status = EntryStatus.RECORD_EXISTS
