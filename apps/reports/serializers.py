"""
Serializers for reports app.

Input Serializers:
    MonthlyReportQuerySerializer - Validates month and sort parameters

Response Serializers:
    ReportRowSerializer - One ledger record with its display fields
    MonthlyReportSerializer - Rows plus totals
"""

from rest_framework import serializers

from apps.ledger.services import SORT_FIELDS, SORT_ORDERS
from .exceptions import InvalidMonthError
from .services import DEFAULT_SORT_FIELD, DEFAULT_SORT_ORDER, current_month, month_bounds


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class MonthlyReportQuerySerializer(serializers.Serializer):
    """
    Validate monthly report query parameters.

    Used by: monthly_report, monthly_report_export, report page

    Query Parameters:
        month (str): Month in YYYY-MM format, defaults to the current month
        sort_by (str): 'date' or 'quantity', defaults to 'quantity'
        order (str): 'asc' or 'desc', defaults to 'desc'
    """

    month = serializers.RegexField(
        regex=r'^\d{4}-(0[1-9]|1[0-2])$',
        required=False,
        allow_blank=True,
        help_text='Month in YYYY-MM format'
    )
    sort_by = serializers.ChoiceField(
        choices=SORT_FIELDS,
        default=DEFAULT_SORT_FIELD,
        help_text="Sort field: 'date' or 'quantity'"
    )
    order = serializers.ChoiceField(
        choices=SORT_ORDERS,
        default=DEFAULT_SORT_ORDER,
        help_text="Sort direction: 'asc' or 'desc'"
    )

    def validate_month(self, value):
        """Reject months that match the pattern but are not real dates."""
        if value:
            try:
                month_bounds(value)
            except InvalidMonthError as e:
                raise serializers.ValidationError(str(e))
        return value

    def validate(self, attrs):
        """Default a missing or blank month to the current month."""
        if not attrs.get('month'):
            attrs['month'] = current_month()
        return attrs


# =============================================================================
# Response Serializers
# =============================================================================

class ReportRowSerializer(serializers.Serializer):
    date = serializers.DateField()
    date_label = serializers.CharField()
    quantity = serializers.DecimalField(max_digits=8, decimal_places=3)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)


class MonthlyReportSerializer(serializers.Serializer):
    month = serializers.CharField()
    sort_by = serializers.CharField()
    order = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    currency_symbol = serializers.CharField()
    rows = ReportRowSerializer(many=True)
    total_quantity = serializers.DecimalField(max_digits=12, decimal_places=3)
    total_cost = serializers.DecimalField(max_digits=16, decimal_places=2)


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
