# ==========================================
# apps/ledger/admin.py
# ==========================================

from django.contrib import admin
from .models import PriceRecord, ConsumptionRecord


@admin.register(PriceRecord)
class PriceRecordAdmin(admin.ModelAdmin):
    """Admin view of the active price. Changes go through the entry page."""

    list_display = ['price', 'created_at']
    readonly_fields = ['price', 'created_at']

    def has_add_permission(self, request):
        """Disable adding prices manually - set_price keeps a single row."""
        return False


@admin.register(ConsumptionRecord)
class ConsumptionRecordAdmin(admin.ModelAdmin):
    """Admin interface for ledger records."""

    list_display = ['date', 'quantity', 'created_at']
    date_hierarchy = 'date'
    ordering = ['-date']
    readonly_fields = ['created_at']
