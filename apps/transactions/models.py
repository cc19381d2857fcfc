from django.conf import settings
from django.db import models
from django.utils import timezone
import uuid


class Transaction(models.Model):
    """Sale of one deposited game to a client, recorded by a manager."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    label = models.ForeignKey(
        'games.DepositedGame',
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    session = models.ForeignKey(
        'sale_sessions.Session',
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    seller = models.ForeignKey(
        'sellers.Seller',
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    client = models.ForeignKey(
        'clients.Client',
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='transactions'
    )
    transaction_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'transactions'
        ordering = ['-transaction_date']
        indexes = [
            models.Index(fields=['session', '-transaction_date'], name='transactions_session_idx'),
            models.Index(fields=['seller'], name='transactions_seller_idx'),
            models.Index(fields=['client'], name='transactions_client_idx'),
        ]

    def __str__(self):
        return f"Sale of {self.label_id} on {self.transaction_date:%Y-%m-%d}"
