"""
Entry workflow service - drives ``apps.ledger.workflow`` against the store.

Each method reads the price and the selected date's record, feeds the
results through the pure transitions and returns the resulting
``EntryState``. Lookup failures are logged and end in ``STOPPED``; writes
are never retried.
"""

import logging
from datetime import date as date_cls
from typing import Optional

from django.db import DatabaseError
from django.utils import timezone

from apps.ledger import workflow
from apps.ledger.exceptions import (
    PriceNotSetError,
    RecordAlreadyExistsError,
    RecordLockedError,
)
from apps.ledger.workflow import EntryState, EntryStatus
from .consumption_ledger import create_record, find_record
from .price_store import get_current_price, set_price

logger = logging.getLogger(__name__)


class EntryWorkflowService:
    """
    Per-date create-or-lock cycle for logging quantities.

    Methods:
        load: State of the entry form for a date.
        submit_quantity: Log a quantity and move on to the next day.
        change_price: Replace the price and refresh the form state.

    Example:
        Logging two consecutive days::

            state = EntryWorkflowService.load(date(2024, 6, 1))
            record, state = EntryWorkflowService.submit_quantity(
                selected_date=state.date, quantity='2.0'
            )
            # state.date == date(2024, 6, 2)
    """

    @staticmethod
    def load(selected_date: Optional[date_cls] = None) -> EntryState:
        """
        Build the entry state for ``selected_date`` (default: today).

        The form opens on today; any other date is reached through the
        ``select_date`` transition.

        Never raises on store failures: they are logged and the returned
        state is ``STOPPED``.
        """
        today = timezone.localdate()
        try:
            price = get_current_price()
        except DatabaseError:
            logger.exception("Price lookup failed")
            return workflow.lookup_failed(workflow.initial(selected_date or today, None))

        state = workflow.initial(today, price)
        if selected_date and selected_date != today:
            state = workflow.select_date(state, selected_date)
        return EntryWorkflowService._lookup(state)

    @staticmethod
    def submit_quantity(*, selected_date: date_cls, quantity):
        """
        Log ``quantity`` liters for ``selected_date``.

        Only a date in ``NO_RECORD_FOR_DATE`` accepts a quantity; a date that
        already has a record stays locked to its stored value.

        Returns:
            tuple: (created ConsumptionRecord, EntryState of the next day)

        Raises:
            PriceNotSetError: If no price has been set yet
            RecordLockedError: If the date already has a record
            InvalidQuantityError: If quantity is not a number or negative
            DatabaseError: If the store fails; the caller degrades the view
        """
        state = workflow.initial(selected_date, get_current_price())
        if state.status == EntryStatus.NO_PRICE_SET:
            raise PriceNotSetError("Set a price before logging quantities")

        state = workflow.lookup_resolved(state, find_record(date=selected_date))
        if state.quantity_locked:
            raise RecordLockedError(selected_date)

        try:
            record = create_record(date=selected_date, quantity=quantity)
        except RecordAlreadyExistsError:
            raise RecordLockedError(selected_date)

        next_state = EntryWorkflowService._lookup(workflow.record_created(state, record))
        return record, next_state

    @staticmethod
    def change_price(*, price, selected_date: Optional[date_cls] = None):
        """
        Set a new price and return the refreshed state for ``selected_date``.

        Returns:
            tuple: (created PriceRecord, EntryState)

        Raises:
            InvalidPriceError: If price is not a number or not positive
        """
        selected_date = selected_date or timezone.localdate()
        record = set_price(price=price)
        state = workflow.price_set(workflow.initial(selected_date, None), record.price)
        return record, EntryWorkflowService._lookup(state)

    @staticmethod
    def _lookup(state: EntryState) -> EntryState:
        if state.status != EntryStatus.AWAITING_LOOKUP:
            return state
        try:
            record = find_record(date=state.date)
        except DatabaseError:
            logger.exception("Record lookup failed for %s", state.date)
            return workflow.lookup_failed(state)
        return workflow.lookup_resolved(state, record)
