from rest_framework import serializers
from .models import Seller


class SellerSerializer(serializers.ModelSerializer):
    """Seller output with current balance."""

    class Meta:
        model = Seller
        fields = [
            'id',
            'name',
            'email',
            'phone',
            'amount_owed',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SellerMinimalSerializer(serializers.ModelSerializer):
    """Minimal seller info for nested serialization."""

    class Meta:
        model = Seller
        fields = ['id', 'name', 'email']


class SellerInputSerializer(serializers.Serializer):
    """Validate seller create/update input."""

    name = serializers.CharField(max_length=200)
    email = serializers.EmailField(max_length=255)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
