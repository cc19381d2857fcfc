from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal
import uuid


class Session(models.Model):
    """
    A bounded sale event.

    Games can only be deposited and sold while the session is open,
    i.e. while ``start_date <= now <= end_date``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    location = models.CharField(max_length=255, blank=True)

    start_date = models.DateTimeField()
    end_date = models.DateTimeField()

    # Share of each sale kept by the operator; unit set by SALE_COMMISSION_UNIT
    sale_commission = models.DecimalField(
        max_digits=7,
        decimal_places=4,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    # Flat fee charged per deposited game
    deposit_fee = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sale_sessions'
        ordering = ['-start_date']
        indexes = [
            models.Index(fields=['start_date', 'end_date'], name='sale_sessions_window_idx'),
        ]

    def __str__(self):
        return self.name

    def is_open(self, at=None):
        """Return True if ``at`` (default: now) falls within the session window."""
        at = at or timezone.now()
        return self.start_date <= at <= self.end_date
