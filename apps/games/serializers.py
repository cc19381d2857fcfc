from rest_framework import serializers
from apps.sale_sessions.serializers import SessionMinimalSerializer
from apps.sellers.serializers import SellerMinimalSerializer
from .models import GameDescription, DepositedGame


class GameDescriptionSerializer(serializers.ModelSerializer):
    """Full catalog entry."""

    class Meta:
        model = GameDescription
        fields = [
            'id',
            'name',
            'publisher',
            'photo_url',
            'description',
            'min_players',
            'max_players',
            'age_range',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class GameDescriptionInputSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    publisher = serializers.CharField(max_length=200, required=False, allow_blank=True)
    photo_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    min_players = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    max_players = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    age_range = serializers.CharField(max_length=50, required=False, allow_blank=True)


class DepositedGameSerializer(serializers.ModelSerializer):
    """Deposited game with its session, seller and game description joined."""

    session = SessionMinimalSerializer(read_only=True)
    seller = SellerMinimalSerializer(read_only=True)
    game_description = GameDescriptionSerializer(read_only=True)

    class Meta:
        model = DepositedGame
        fields = [
            'id',
            'session',
            'seller',
            'game_description',
            'sale_price',
            'for_sale',
            'picked_up',
            'sold',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class DepositedGameCreateSerializer(serializers.Serializer):
    session_id = serializers.UUIDField()
    seller_id = serializers.UUIDField()
    game_description_id = serializers.UUIDField()
    sale_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    for_sale = serializers.BooleanField(required=False, default=False)


class DepositedGameUpdateSerializer(serializers.Serializer):
    """Price and references only; sale state has its own endpoints."""

    session_id = serializers.UUIDField(required=False)
    seller_id = serializers.UUIDField(required=False)
    game_description_id = serializers.UUIDField(required=False)
    sale_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)


class OpenSessionDepositSerializer(serializers.Serializer):
    seller_id = serializers.UUIDField()
    game_description_id = serializers.UUIDField()
    sale_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
