"""Spreadsheet export of a monthly report."""
from __future__ import annotations

import io
from decimal import Decimal

from openpyxl import Workbook

SHEET_NAME = 'Report'
XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def export_filename(month: str) -> str:
    return f"milk_report_{month}.xlsx"


def report_columns(currency_symbol: str) -> list[tuple[str, str]]:
    """(row key, header) pairs, in the order the report table shows them."""
    return [
        ('date_label', 'Date'),
        ('quantity', 'Quantity (liters)'),
        ('price', f'Price ({currency_symbol})'),
    ]


def _cell(value):
    # Integral decimals become ints so 60.00 shows as 60
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def render_xlsx(report: dict) -> bytes:
    """
    Serialize ``report`` (as returned by ``get_monthly_report``) to xlsx.

    Layout: one header row, one row per ledger record, then the two totals
    shown under the table (``Total Quantity`` and ``Total Cost``).
    """
    columns = report_columns(report['currency_symbol'])

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_NAME

    sheet.append([header for _, header in columns])
    for row in report['rows']:
        sheet.append([_cell(row[key]) for key, _ in columns])

    sheet.append(['Total Quantity', _cell(report['total_quantity'])])
    sheet.append(['Total Cost', _cell(report['total_cost'])])

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
