"""
Serializers for ledger app.

Input Serializers:
    PriceInputSerializer - New price
    EntryQuerySerializer - Selected date for the entry form
    QuantityInputSerializer - Quantity submission for a date
    RecordLookupSerializer - Exact-date lookup

Response Serializers:
    PriceSerializer - Current price (null when absent)
    ConsumptionRecordSerializer - Stored ledger record
    EntryStateSerializer - Entry workflow state
"""

from rest_framework import serializers
from .models import ConsumptionRecord


# =============================================================================
# Input Serializers
# =============================================================================

class PriceInputSerializer(serializers.Serializer):
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        help_text='Price per liter'
    )


class EntryQuerySerializer(serializers.Serializer):
    date = serializers.DateField(
        required=False,
        help_text='Selected date (YYYY-MM-DD), defaults to today'
    )


class QuantityInputSerializer(serializers.Serializer):
    date = serializers.DateField()
    quantity = serializers.DecimalField(
        max_digits=8,
        decimal_places=3,
        help_text='Liters bought on the date'
    )


class RecordLookupSerializer(serializers.Serializer):
    date = serializers.DateField()


# =============================================================================
# Response Serializers
# =============================================================================

class PriceSerializer(serializers.Serializer):
    price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)


class ConsumptionRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = ConsumptionRecord
        fields = ['id', 'date', 'quantity', 'created_at']
        read_only_fields = fields


class EntryStateSerializer(serializers.Serializer):
    """Serialize an ``EntryState`` value object."""

    status = serializers.CharField(source='status.value')
    mode = serializers.CharField()
    date = serializers.DateField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    quantity = serializers.DecimalField(max_digits=8, decimal_places=3, allow_null=True)
    quantity_locked = serializers.BooleanField()


class EntrySubmitResponseSerializer(serializers.Serializer):
    record = ConsumptionRecordSerializer()
    next = EntryStateSerializer()


class PriceUpdateResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    state = EntryStateSerializer()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
