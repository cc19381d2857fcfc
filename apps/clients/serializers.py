from rest_framework import serializers
from .models import Client


class ClientSerializer(serializers.ModelSerializer):

    class Meta:
        model = Client
        fields = ['id', 'name', 'email', 'phone', 'address', 'created_at', 'updated_at']
        read_only_fields = fields


class ClientMinimalSerializer(serializers.ModelSerializer):
    """Minimal client info for nested serialization."""

    class Meta:
        model = Client
        fields = ['id', 'name', 'email']


class ClientInputSerializer(serializers.Serializer):
    """Validate client create/update input."""

    name = serializers.CharField(max_length=200)
    email = serializers.EmailField(max_length=255)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)
    address = serializers.CharField(max_length=255, required=False, allow_blank=True)
