"""
Domain exceptions for ledger app.

Exception Hierarchy:
    LedgerServiceError (base)
    ├── InvalidPriceError
    ├── InvalidQuantityError
    ├── InvalidSortError
    ├── PriceNotSetError
    ├── RecordAlreadyExistsError
    │   └── RecordLockedError
    └── InvalidTransitionError

Usage:
    from apps.ledger.exceptions import RecordLockedError

    try:
        record, next_state = EntryWorkflowService.submit_quantity(...)
    except RecordLockedError as e:
        return Response({'error': str(e)}, status=409)
"""


class LedgerServiceError(Exception):
    """Base exception for price store, ledger and entry workflow errors."""
    pass


class InvalidPriceError(LedgerServiceError):
    """Price is not a number or not positive."""
    pass


class InvalidQuantityError(LedgerServiceError):
    """Quantity is not a number or is negative."""
    pass


class InvalidSortError(LedgerServiceError):
    """Unknown sort field or direction for a ledger range query."""
    pass


class PriceNotSetError(LedgerServiceError):
    """Quantities cannot be logged before a price exists."""
    pass


class RecordAlreadyExistsError(LedgerServiceError):
    """A consumption record already exists for the date."""

    def __init__(self, date):
        self.date = date
        super().__init__(f"A record for {date.isoformat()} already exists")


class RecordLockedError(RecordAlreadyExistsError):
    """The entry for the date is locked to its stored quantity."""
    pass


class InvalidTransitionError(LedgerServiceError):
    """Entry workflow transition not allowed from the current state."""
    pass
