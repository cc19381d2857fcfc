from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class Seller(models.Model):
    """Person who deposits games for resale and is paid out after sales."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    email = models.EmailField(max_length=255)
    phone = models.CharField(max_length=30, blank=True)

    # Accumulated payout balance from sold games
    amount_owed = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sellers'
        ordering = ['name']
        indexes = [
            models.Index(fields=['email'], name='sellers_email_idx'),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}>"
