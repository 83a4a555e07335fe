"""
Daily entry workflow as an explicit state machine.

The entry form for a selected date is always in exactly one state::

    NO_PRICE_SET ──price_set──▶ AWAITING_LOOKUP ──lookup_resolved──▶ NO_RECORD_FOR_DATE
                                   ▲      │                              │
                      select_date  │      └──────────▶ RECORD_EXISTS     │ record_created
                                   │                                     │ (date + 1 day)
                                   └─────────────────────────────────────┘

    any state ──lookup_failed──▶ STOPPED ──select_date──▶ AWAITING_LOOKUP

Every transition is a pure function returning a new ``EntryState``; the
store calls that drive them live in ``services.entry_workflow``.
"""
from dataclasses import dataclass, replace
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional

from .exceptions import InvalidTransitionError


class EntryStatus(str, Enum):
    NO_PRICE_SET = 'no_price_set'
    AWAITING_LOOKUP = 'awaiting_lookup'
    NO_RECORD_FOR_DATE = 'no_record_for_date'
    RECORD_EXISTS = 'record_exists'
    STOPPED = 'stopped'


@dataclass(frozen=True)
class EntryState:
    status: EntryStatus
    date: date
    price: Optional[Decimal] = None
    quantity: Optional[Decimal] = None

    @property
    def mode(self) -> str:
        """Which form the page shows: price first, quantities afterwards."""
        if self.status == EntryStatus.NO_PRICE_SET:
            return 'set_price'
        return 'log_quantity'

    @property
    def quantity_locked(self) -> bool:
        return self.status == EntryStatus.RECORD_EXISTS

    @property
    def accepts_quantity(self) -> bool:
        return self.status == EntryStatus.NO_RECORD_FOR_DATE


def _require(state: EntryState, *allowed: EntryStatus) -> None:
    if state.status not in allowed:
        raise InvalidTransitionError(
            f"Cannot leave {state.status.value} this way "
            f"(expected one of: {', '.join(s.value for s in allowed)})"
        )


def initial(selected_date: date, price: Optional[Decimal]) -> EntryState:
    if price is None:
        return EntryState(EntryStatus.NO_PRICE_SET, selected_date)
    return EntryState(EntryStatus.AWAITING_LOOKUP, selected_date, price=price)


def price_set(state: EntryState, price: Decimal) -> EntryState:
    """A new price always forces a fresh lookup of the selected date."""
    return EntryState(EntryStatus.AWAITING_LOOKUP, state.date, price=price)


def select_date(state: EntryState, selected_date: date) -> EntryState:
    return initial(selected_date, state.price)


def lookup_resolved(state: EntryState, record) -> EntryState:
    """
    Apply the result of the exact-date lookup.

    ``record`` is the stored ConsumptionRecord or None. A record whose date
    does not equal the selected date counts as no record.
    """
    _require(state, EntryStatus.AWAITING_LOOKUP)
    if record is None or record.date != state.date:
        return replace(state, status=EntryStatus.NO_RECORD_FOR_DATE, quantity=None)
    return replace(state, status=EntryStatus.RECORD_EXISTS, quantity=record.quantity)


def record_created(state: EntryState, record) -> EntryState:
    """Advance to the next calendar day so consecutive days can be logged."""
    _require(state, EntryStatus.NO_RECORD_FOR_DATE)
    return EntryState(
        EntryStatus.AWAITING_LOOKUP,
        record.date + timedelta(days=1),
        price=state.price,
    )


def lookup_failed(state: EntryState) -> EntryState:
    return replace(state, status=EntryStatus.STOPPED, quantity=None)
