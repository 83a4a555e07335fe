"""Price store service - the single active per-liter price."""

import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction

from apps.ledger.exceptions import InvalidPriceError
from apps.ledger.models import PriceRecord
from .parsing import parse_decimal

logger = logging.getLogger(__name__)


def get_current_price() -> Optional[Decimal]:
    """
    Return the active price, or None when no price has been set yet.

    Should more than one row ever exist (e.g. rows inserted through the
    admin), the newest one wins.
    """
    record = PriceRecord.objects.order_by('-created_at').first()
    return record.price if record else None


@transaction.atomic
def set_price(*, price) -> PriceRecord:
    """
    Replace the active price.

    This operation:
    1. Parses and validates the new price (must be > 0)
    2. Deletes every existing price row
    3. Inserts the new price

    Steps 2 and 3 share one transaction, so readers never observe a
    moment without a price.

    Args:
        price: New per-liter price (Decimal, int, float or numeric string)

    Returns:
        The created PriceRecord

    Raises:
        InvalidPriceError: If price is not a number or not positive
    """
    new_price = parse_decimal(price, places='0.01', error_cls=InvalidPriceError, field='price')
    if new_price <= 0:
        raise InvalidPriceError("Price must be greater than zero")

    deleted, _ = PriceRecord.objects.all().delete()
    record = PriceRecord.objects.create(price=new_price)

    logger.info("Price set to %s (replaced %d previous row(s))", new_price, deleted)
    return record
