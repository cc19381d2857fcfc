from rest_framework import serializers
from apps.accounts.serializers import ManagerMinimalSerializer
from apps.clients.serializers import ClientMinimalSerializer
from apps.games.models import DepositedGame
from apps.sale_sessions.serializers import SessionMinimalSerializer
from apps.sellers.serializers import SellerMinimalSerializer
from .models import Transaction


class SoldGameSerializer(serializers.ModelSerializer):
    """The label of a sale with its game name."""

    game_name = serializers.CharField(source='game_description.name', read_only=True)

    class Meta:
        model = DepositedGame
        fields = ['id', 'game_name', 'sale_price']


class TransactionSerializer(serializers.ModelSerializer):
    """Transaction with label, session, seller, client and manager joined."""

    label = SoldGameSerializer(read_only=True)
    session = SessionMinimalSerializer(read_only=True)
    seller = SellerMinimalSerializer(read_only=True)
    client = ClientMinimalSerializer(read_only=True)
    manager = ManagerMinimalSerializer(read_only=True)

    class Meta:
        model = Transaction
        fields = [
            'id',
            'label',
            'session',
            'seller',
            'client',
            'manager',
            'transaction_date',
        ]
        read_only_fields = fields


class TransactionCreateSerializer(serializers.Serializer):
    label_id = serializers.UUIDField()
    session_id = serializers.UUIDField()
    seller_id = serializers.UUIDField()
    client_id = serializers.UUIDField()


class TransactionUpdateSerializer(serializers.Serializer):
    """Corrections only; label, seller and session stay as sold."""

    client_id = serializers.UUIDField(required=False)
    seller_id = serializers.UUIDField(required=False)
    session_id = serializers.UUIDField(required=False)
    transaction_date = serializers.DateTimeField(required=False)
