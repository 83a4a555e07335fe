"""
Ledger services - Business logic layer.

This package contains all business operations for the ledger app:
- Price store (single active per-liter price)
- Consumption ledger (one record per date)
- Entry workflow (per-date create-or-lock cycle)
"""

from .price_store import (
    get_current_price,
    set_price,
)

from .consumption_ledger import (
    SORT_FIELDS,
    SORT_ORDERS,
    find_record,
    create_record,
    records_in_range,
)

from .entry_workflow import EntryWorkflowService

__all__ = [
    # Price Store
    'get_current_price',
    'set_price',
    # Consumption Ledger
    'SORT_FIELDS',
    'SORT_ORDERS',
    'find_record',
    'create_record',
    'records_in_range',
    # Entry Workflow
    'EntryWorkflowService',
]
