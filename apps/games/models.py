from django.core.validators import MinValueValidator
from django.db import models
from decimal import Decimal
import uuid


class GameDescription(models.Model):
    """Catalog entry describing a board game."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    publisher = models.CharField(max_length=200, blank=True)
    photo_url = models.URLField(max_length=500, blank=True)
    description = models.TextField(blank=True)
    min_players = models.PositiveSmallIntegerField(null=True, blank=True)
    max_players = models.PositiveSmallIntegerField(null=True, blank=True)
    age_range = models.CharField(max_length=50, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'game_descriptions'
        ordering = ['name']

    def __str__(self):
        if self.publisher:
            return f"{self.name} ({self.publisher})"
        return self.name


class DepositedGame(models.Model):
    """
    A physical copy of a game left by a seller for a session (a "label").

    Lifecycle: deposited -> for sale -> sold, or picked up (terminal).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    session = models.ForeignKey(
        'sale_sessions.Session',
        on_delete=models.PROTECT,
        related_name='deposited_games'
    )
    seller = models.ForeignKey(
        'sellers.Seller',
        on_delete=models.PROTECT,
        related_name='deposited_games'
    )
    game_description = models.ForeignKey(
        GameDescription,
        on_delete=models.PROTECT,
        related_name='deposited_games'
    )

    sale_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    for_sale = models.BooleanField(default=False)
    picked_up = models.BooleanField(default=False)
    sold = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'deposited_games'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['seller', 'session'], name='deposited_seller_session_idx'),
            models.Index(fields=['session', 'for_sale'], name='deposited_session_sale_idx'),
        ]

    def __str__(self):
        return f"{self.game_description.name} - {self.sale_price}"

    @property
    def is_available(self):
        """Can be sold right now."""
        return self.for_sale and not self.picked_up and not self.sold
