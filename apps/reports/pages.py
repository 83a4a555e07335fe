"""Monthly report page and its spreadsheet download."""
import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import urlencode
from django.views.decorators.http import require_GET

from apps.accounts.guards import identity_required
from .serializers import MonthlyReportQuerySerializer
from .services import empty_report, get_monthly_report
from .views import xlsx_response

logger = logging.getLogger(__name__)


def _query(request):
    """Validated month/sort parameters; invalid values fall back to defaults."""
    serializer = MonthlyReportQuerySerializer(data=request.GET)
    if serializer.is_valid():
        return serializer.validated_data
    fallback = MonthlyReportQuerySerializer(data={})
    fallback.is_valid(raise_exception=True)
    return fallback.validated_data


def _load(params) -> dict:
    try:
        return get_monthly_report(
            month=params['month'],
            sort_field=params['sort_by'],
            sort_order=params['order'],
        )
    except DatabaseError:
        logger.exception("Report lookup failed for %s", params['month'])
        return empty_report(params['month'], params['sort_by'], params['order'])


@require_GET
@identity_required
def report_page(request):
    """Table of the selected month with totals and sort toggles."""
    params = _query(request)
    report = _load(params)
    return render(request, 'reports/report.html', {
        'report': report,
        'toggled_order': 'asc' if report['order'] == 'desc' else 'desc',
    })


@require_GET
@identity_required
def report_export(request):
    """
    Download the report exactly as the page shows it.

    A store failure sends the user back to the report page instead of
    serving a workbook without rows.
    """
    params = _query(request)
    try:
        report = get_monthly_report(
            month=params['month'],
            sort_field=params['sort_by'],
            sort_order=params['order'],
        )
    except DatabaseError:
        logger.exception("Report export failed for %s", params['month'])
        messages.error(request, 'The report could not be loaded. Try again.')
        return redirect(f"{reverse('report')}?{urlencode(params)}")
    return xlsx_response(report)
