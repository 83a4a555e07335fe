from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class PriceRecord(models.Model):
    """
    The single active per-liter price.

    At most one row exists at any time: ``set_price`` deletes the old row
    and inserts the new one inside one transaction. Reports join the
    current price at read time, so it is never copied onto ledger rows.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'price'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.price} per liter"


class ConsumptionRecord(models.Model):
    """One day's milk purchase. Created once, never edited or deleted."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    date = models.DateField()
    quantity = models.DecimalField(
        max_digits=8,
        decimal_places=3,
        validators=[MinValueValidator(Decimal('0'))],
        help_text='Liters'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'milk_consumption'
        ordering = ['date', 'created_at']
        constraints = [
            models.UniqueConstraint(fields=['date'], name='unique_consumption_date'),
        ]

    def __str__(self):
        return f"{self.date}: {self.quantity} L"
