"""
Monthly Report Module
=====================

Aggregates one month of ledger records into the report shown on the
report page and exported to a spreadsheet.

The report joins the *current* price into every row at read time; the
ledger never stores prices, so a price change re-prices every past month.

Example:
    Building the June report sorted by largest purchase first::

        from apps.reports.services import get_monthly_report

        report = get_monthly_report(month='2024-06', sort_field='quantity', sort_order='desc')
        print(f"{report['total_quantity']} L for {report['total_cost']}")

Note:
    All functions return plain dictionaries, not model instances, so the
    result can be rendered, serialized or exported without further queries.
"""

import calendar
import logging
import re
from datetime import MINYEAR, date
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.utils import timezone

from apps.ledger.services import get_current_price, records_in_range
from apps.reports.exceptions import InvalidMonthError

logger = logging.getLogger(__name__)

MONTH_PATTERN = re.compile(r'^(\d{4})-(0[1-9]|1[0-2])$')

DEFAULT_SORT_FIELD = 'quantity'
DEFAULT_SORT_ORDER = 'desc'


def current_month() -> str:
    """The current month as YYYY-MM."""
    return timezone.localdate().strftime('%Y-%m')


def month_bounds(month: str) -> tuple[date, date]:
    """
    First and last calendar day of ``month``.

    The closed interval ``[month-01, last day]`` selects exactly the dates
    whose ISO string falls in ``[month-01, month-31]``.

    Raises:
        InvalidMonthError: If month is not YYYY-MM
    """
    match = MONTH_PATTERN.match(month or '')
    if not match:
        raise InvalidMonthError(f"Invalid month: '{month}'. Use YYYY-MM")
    year, month_number = int(match.group(1)), int(match.group(2))
    if year < MINYEAR:
        raise InvalidMonthError(f"Invalid month: '{month}'. Year must be at least {MINYEAR}")
    last_day = calendar.monthrange(year, month_number)[1]
    return date(year, month_number, 1), date(year, month_number, last_day)


def date_label(value: date) -> str:
    """Short display date without the year, e.g. ``Sat Jun 01``."""
    return value.strftime('%a %b %d')


def build_row(record, price: Optional[Decimal]) -> dict:
    return {
        'date': record.date,
        'date_label': date_label(record.date),
        'quantity': record.quantity,
        'price': price,
    }


def empty_report(
    month: str,
    sort_field: str = DEFAULT_SORT_FIELD,
    sort_order: str = DEFAULT_SORT_ORDER
) -> dict:
    """The no-data report a view falls back to when the store fails."""
    return {
        'month': month,
        'sort_by': sort_field,
        'order': sort_order,
        'price': None,
        'currency_symbol': settings.CURRENCY_SYMBOL,
        'rows': [],
        'total_quantity': Decimal('0'),
        'total_cost': Decimal('0'),
    }


def get_monthly_report(
    *,
    month: str,
    sort_field: str = DEFAULT_SORT_FIELD,
    sort_order: str = DEFAULT_SORT_ORDER
) -> dict:
    """
    Build the cost report for one month.

    This operation:
    1. Resolves the month into its first and last day
    2. Reads the current price once
    3. Fetches the month's records, ordered by the database on
       ``sort_field`` / ``sort_order``
    4. Joins the price into every row and sums the quantities

    Args:
        month: Month in YYYY-MM format
        sort_field: 'date' or 'quantity'
        sort_order: 'asc' or 'desc'

    Returns:
        dict: A dictionary containing:
            - month (str), sort_by (str), order (str)
            - price (Decimal | None): Current price, None when unset
            - currency_symbol (str)
            - rows (list[dict]): date, date_label, quantity, price
            - total_quantity (Decimal): Sum of quantities
            - total_cost (Decimal): total_quantity * price (0 without a price)

    Raises:
        InvalidMonthError: If month is not YYYY-MM
        InvalidSortError: If sort_field or sort_order is unknown

    Example:
        Price 60 with 2.0 L and 1.5 L logged in June::

            >>> report = get_monthly_report(month='2024-06')
            >>> report['total_quantity'], report['total_cost']
            (Decimal('3.500'), Decimal('210.00000'))
    """
    start, end = month_bounds(month)
    price = get_current_price()

    records = records_in_range(
        start=start,
        end=end,
        sort_field=sort_field,
        sort_order=sort_order,
    )
    rows = [build_row(record, price) for record in records]

    total_quantity = sum((row['quantity'] for row in rows), Decimal('0'))
    total_cost = total_quantity * price if price is not None else Decimal('0')

    logger.debug(
        "Report %s: %d row(s), %s L, cost %s", month, len(rows), total_quantity, total_cost
    )

    report = empty_report(month, sort_field, sort_order)
    report.update({
        'price': price,
        'rows': rows,
        'total_quantity': total_quantity,
        'total_cost': total_cost,
    })
    return report
