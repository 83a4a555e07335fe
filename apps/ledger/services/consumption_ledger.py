"""Consumption ledger service - one record per calendar date."""

import logging
from datetime import date
from typing import Optional

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from apps.ledger.exceptions import (
    InvalidQuantityError,
    InvalidSortError,
    RecordAlreadyExistsError,
)
from apps.ledger.models import ConsumptionRecord
from .parsing import parse_decimal

logger = logging.getLogger(__name__)

SORT_FIELDS = ('date', 'quantity')
SORT_ORDERS = ('asc', 'desc')


def find_record(*, date: date) -> Optional[ConsumptionRecord]:
    """Exact-date lookup, filtered by the database."""
    return (
        ConsumptionRecord.objects
        .filter(date=date)
        .order_by('created_at')
        .first()
    )


def create_record(*, date: date, quantity) -> ConsumptionRecord:
    """
    Log the quantity bought on ``date``.

    This operation:
    1. Parses the quantity (liters, must not be negative)
    2. Refuses the date if a record already exists for it
    3. Inserts the record; a concurrent insert that wins the race is
       caught by the unique constraint on ``date``

    Args:
        date: Calendar date of the purchase
        quantity: Liters bought (Decimal, int, float or numeric string)

    Returns:
        The created ConsumptionRecord

    Raises:
        InvalidQuantityError: If quantity is not a number or negative
        RecordAlreadyExistsError: If the date already has a record
    """
    liters = parse_decimal(quantity, places='0.001', error_cls=InvalidQuantityError, field='quantity')
    if liters < 0:
        raise InvalidQuantityError("Quantity cannot be negative")

    if ConsumptionRecord.objects.filter(date=date).exists():
        logger.warning("Refused second record for %s", date)
        raise RecordAlreadyExistsError(date)

    try:
        with transaction.atomic():
            record = ConsumptionRecord.objects.create(date=date, quantity=liters)
    except IntegrityError:
        # Another submission for the same date got in between check and insert
        logger.warning("Duplicate record for %s blocked by unique constraint", date)
        raise RecordAlreadyExistsError(date)

    logger.info("Logged %s L for %s", liters, date)
    return record


def records_in_range(
    *,
    start: date,
    end: date,
    sort_field: str = 'date',
    sort_order: str = 'asc'
) -> QuerySet:
    """
    Records dated within ``[start, end]``, ordered by the database.

    Ties on the sort field fall back to creation order.

    Raises:
        InvalidSortError: If sort_field or sort_order is unknown
    """
    if sort_field not in SORT_FIELDS:
        raise InvalidSortError(
            f"Invalid sort field: '{sort_field}'. Valid options: {', '.join(SORT_FIELDS)}"
        )
    if sort_order not in SORT_ORDERS:
        raise InvalidSortError(
            f"Invalid sort order: '{sort_order}'. Valid options: {', '.join(SORT_ORDERS)}"
        )

    prefix = '-' if sort_order == 'desc' else ''
    return (
        ConsumptionRecord.objects
        .filter(date__gte=start, date__lte=end)
        .order_by(f'{prefix}{sort_field}', 'created_at')
    )
