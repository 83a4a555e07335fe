"""
Service layer tests for ledger app.

Covers:
- Price Store (get/set, single active row, validation)
- Consumption Ledger (exact-date lookup, create-or-refuse, range queries)
- Entry Workflow (load, submit and advance, locking, store failures)
"""

import pytest
from datetime import date
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError
from django.db.models import QuerySet

from apps.ledger.exceptions import (
    InvalidPriceError,
    InvalidQuantityError,
    InvalidSortError,
    PriceNotSetError,
    RecordAlreadyExistsError,
    RecordLockedError,
)
from apps.ledger.models import ConsumptionRecord, PriceRecord
from apps.ledger.services import (
    EntryWorkflowService,
    create_record,
    find_record,
    get_current_price,
    records_in_range,
    set_price,
)
from apps.ledger import workflow
from apps.ledger.workflow import EntryStatus


# ============================================================================
# PRICE STORE TESTS
# ============================================================================

@pytest.mark.django_db
class TestPriceStore:

    def test_absent_before_first_price(self):
        assert get_current_price() is None

    @pytest.mark.parametrize('value', [Decimal('60'), '58.50', 45, 0.5])
    def test_set_then_get_returns_price(self, value):
        set_price(price=value)

        assert get_current_price() == Decimal(str(value))
        assert PriceRecord.objects.count() == 1

    def test_replacing_keeps_single_row(self, price):
        set_price(price='62.00')
        set_price(price='64.00')

        assert PriceRecord.objects.count() == 1
        assert get_current_price() == Decimal('64.00')

    @pytest.mark.parametrize('value', [0, '-1', 'abc', '', None, 'NaN'])
    def test_invalid_price_rejected(self, value, price):
        with pytest.raises(InvalidPriceError):
            set_price(price=value)

        # Old price survives a refused update
        assert get_current_price() == Decimal('60.00')

    def test_failed_insert_rolls_back_delete(self, price):
        with mock.patch.object(PriceRecord.objects, 'create', side_effect=DatabaseError('down')):
            with pytest.raises(DatabaseError):
                set_price(price='70')

        assert get_current_price() == Decimal('60.00')


# ============================================================================
# CONSUMPTION LEDGER TESTS
# ============================================================================

@pytest.mark.django_db
class TestConsumptionLedger:

    def test_create_record(self):
        record = create_record(date=date(2024, 6, 1), quantity='2.5')

        assert record.date == date(2024, 6, 1)
        assert record.quantity == Decimal('2.5')
        assert ConsumptionRecord.objects.count() == 1

    def test_zero_quantity_allowed(self):
        record = create_record(date=date(2024, 6, 1), quantity=0)

        assert record.quantity == Decimal('0')

    @pytest.mark.parametrize('value', ['-0.5', 'two', None])
    def test_invalid_quantity_rejected(self, value):
        with pytest.raises(InvalidQuantityError):
            create_record(date=date(2024, 6, 1), quantity=value)

        assert ConsumptionRecord.objects.count() == 0

    def test_second_record_for_date_refused(self, june_first):
        with pytest.raises(RecordAlreadyExistsError) as exc:
            create_record(date=june_first.date, quantity='1.0')

        assert '2024-06-01' in str(exc.value)
        assert ConsumptionRecord.objects.filter(date=june_first.date).count() == 1

    def test_race_past_the_check_hits_unique_constraint(self, june_first):
        """A submission that passed the existence check still cannot duplicate."""
        with mock.patch.object(QuerySet, 'exists', return_value=False):
            with pytest.raises(RecordAlreadyExistsError):
                create_record(date=june_first.date, quantity='1.0')

        assert ConsumptionRecord.objects.filter(date=june_first.date).count() == 1

    def test_find_record_exact_date(self, june_first):
        assert find_record(date=date(2024, 6, 1)) == june_first
        assert find_record(date=date(2024, 6, 2)) is None

    def test_records_in_range_is_inclusive(self):
        for day in (date(2024, 1, 31), date(2024, 2, 1), date(2024, 2, 29), date(2024, 3, 1)):
            ConsumptionRecord.objects.create(date=day, quantity=Decimal('1'))

        records = records_in_range(start=date(2024, 2, 1), end=date(2024, 2, 29))

        assert [r.date for r in records] == [date(2024, 2, 1), date(2024, 2, 29)]

    def test_records_in_range_orders_by_quantity(self):
        ConsumptionRecord.objects.create(date=date(2024, 6, 1), quantity=Decimal('1.0'))
        ConsumptionRecord.objects.create(date=date(2024, 6, 2), quantity=Decimal('3.0'))
        ConsumptionRecord.objects.create(date=date(2024, 6, 3), quantity=Decimal('2.0'))

        desc = records_in_range(
            start=date(2024, 6, 1), end=date(2024, 6, 30),
            sort_field='quantity', sort_order='desc',
        )
        asc = records_in_range(
            start=date(2024, 6, 1), end=date(2024, 6, 30),
            sort_field='quantity', sort_order='asc',
        )

        assert [r.quantity for r in desc] == [Decimal('3.0'), Decimal('2.0'), Decimal('1.0')]
        assert [r.quantity for r in asc] == [Decimal('1.0'), Decimal('2.0'), Decimal('3.0')]

    @pytest.mark.parametrize('field,order', [('price', 'asc'), ('date', 'up')])
    def test_records_in_range_invalid_sort(self, field, order):
        with pytest.raises(InvalidSortError):
            records_in_range(
                start=date(2024, 6, 1), end=date(2024, 6, 30),
                sort_field=field, sort_order=order,
            )


# ============================================================================
# ENTRY WORKFLOW TESTS
# ============================================================================

@pytest.mark.django_db
class TestEntryWorkflowService:

    def test_load_without_price(self):
        state = EntryWorkflowService.load(date(2024, 6, 1))

        assert state.status == EntryStatus.NO_PRICE_SET

    def test_load_free_date(self, price):
        state = EntryWorkflowService.load(date(2024, 6, 1))

        assert state.status == EntryStatus.NO_RECORD_FOR_DATE
        assert state.price == Decimal('60.00')

    def test_load_existing_date_is_locked(self, price, june_first):
        state = EntryWorkflowService.load(date(2024, 6, 1))

        assert state.status == EntryStatus.RECORD_EXISTS
        assert state.quantity == Decimal('2.000')
        assert state.quantity_locked

    def test_load_defaults_to_today(self, price):
        with mock.patch('apps.ledger.services.entry_workflow.timezone.localdate',
                        return_value=date(2024, 6, 15)):
            state = EntryWorkflowService.load()

        assert state.date == date(2024, 6, 15)

    def test_load_other_date_goes_through_select_date(self, price):
        with mock.patch('apps.ledger.services.entry_workflow.timezone.localdate',
                        return_value=date(2024, 6, 15)), \
                mock.patch('apps.ledger.workflow.select_date',
                           wraps=workflow.select_date) as select_date:
            state = EntryWorkflowService.load(date(2024, 6, 1))

        select_date.assert_called_once()
        assert state.date == date(2024, 6, 1)
        assert state.status == EntryStatus.NO_RECORD_FOR_DATE

    def test_load_today_skips_select_date(self, price):
        with mock.patch('apps.ledger.services.entry_workflow.timezone.localdate',
                        return_value=date(2024, 6, 15)), \
                mock.patch('apps.ledger.workflow.select_date') as select_date:
            state = EntryWorkflowService.load(date(2024, 6, 15))

        select_date.assert_not_called()
        assert state.date == date(2024, 6, 15)

    def test_submit_creates_record_and_advances(self, price):
        record, next_state = EntryWorkflowService.submit_quantity(
            selected_date=date(2024, 6, 1), quantity='2.0'
        )

        assert record.date == date(2024, 6, 1)
        assert record.quantity == Decimal('2.0')
        assert next_state.date == date(2024, 6, 2)
        assert next_state.status == EntryStatus.NO_RECORD_FOR_DATE

    def test_submit_advances_onto_locked_day(self, price):
        ConsumptionRecord.objects.create(date=date(2024, 6, 2), quantity=Decimal('1.0'))

        _, next_state = EntryWorkflowService.submit_quantity(
            selected_date=date(2024, 6, 1), quantity='2.0'
        )

        assert next_state.date == date(2024, 6, 2)
        assert next_state.status == EntryStatus.RECORD_EXISTS

    def test_second_submission_is_locked(self, price, june_first):
        with pytest.raises(RecordLockedError):
            EntryWorkflowService.submit_quantity(selected_date=june_first.date, quantity='5')

        june_first.refresh_from_db()
        assert june_first.quantity == Decimal('2.000')
        assert ConsumptionRecord.objects.count() == 1

    def test_submit_requires_price(self):
        with pytest.raises(PriceNotSetError):
            EntryWorkflowService.submit_quantity(selected_date=date(2024, 6, 1), quantity='1')

        assert ConsumptionRecord.objects.count() == 0

    def test_change_price_switches_to_quantity_mode(self):
        record, state = EntryWorkflowService.change_price(
            price='55', selected_date=date(2024, 6, 1)
        )

        assert record.price == Decimal('55')
        assert state.mode == 'log_quantity'
        assert state.status == EntryStatus.NO_RECORD_FOR_DATE
        assert state.price == Decimal('55')

    def test_change_price_does_not_read_old_price(self, price):
        with mock.patch('apps.ledger.services.entry_workflow.get_current_price') as current:
            record, state = EntryWorkflowService.change_price(
                price='70', selected_date=date(2024, 6, 1)
            )

        current.assert_not_called()
        assert record.price == Decimal('70')
        assert state.price == Decimal('70')
        assert PriceRecord.objects.count() == 1

    def test_lookup_failure_stops(self, price):
        with mock.patch('apps.ledger.services.entry_workflow.find_record',
                        side_effect=DatabaseError('down')):
            state = EntryWorkflowService.load(date(2024, 6, 1))

        assert state.status == EntryStatus.STOPPED

    def test_price_failure_stops(self):
        with mock.patch('apps.ledger.services.entry_workflow.get_current_price',
                        side_effect=DatabaseError('down')):
            state = EntryWorkflowService.load(date(2024, 6, 1))

        assert state.status == EntryStatus.STOPPED
        assert state.date == date(2024, 6, 1)
