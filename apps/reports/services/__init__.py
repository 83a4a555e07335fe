"""
Reports services - monthly aggregation and spreadsheet export.
"""

from .monthly_report import (
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_ORDER,
    current_month,
    month_bounds,
    date_label,
    empty_report,
    get_monthly_report,
)

from .export import (
    XLSX_CONTENT_TYPE,
    export_filename,
    report_columns,
    render_xlsx,
)

__all__ = [
    # Monthly Report
    'DEFAULT_SORT_FIELD',
    'DEFAULT_SORT_ORDER',
    'current_month',
    'month_bounds',
    'date_label',
    'empty_report',
    'get_monthly_report',
    # Export
    'XLSX_CONTENT_TYPE',
    'export_filename',
    'report_columns',
    'render_xlsx',
]
