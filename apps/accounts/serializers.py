from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import Manager


class ManagerSerializer(serializers.ModelSerializer):
    """Manager profile (never exposes the password hash)."""

    class Meta:
        model = Manager
        fields = [
            'id',
            'email',
            'first_name',
            'last_name',
            'is_admin',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class ManagerMinimalSerializer(serializers.ModelSerializer):
    """Minimal manager info for nested serialization."""

    class Meta:
        model = Manager
        fields = ['id', 'first_name', 'last_name']


class ManagerRegistrationSerializer(serializers.Serializer):
    """Validate input for registering a manager."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    first_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    last_name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    is_admin = serializers.BooleanField(default=False)


class LoginSerializer(serializers.Serializer):
    """
    Login input.

    Blank values are accepted here so the service can report
    missing credentials itself.
    """

    email = serializers.CharField(required=False, allow_blank=True, default='')
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        default='',
        style={'input_type': 'password'}
    )


class TokenResponseSerializer(serializers.Serializer):
    token = serializers.CharField()
    refresh = serializers.CharField()
    is_admin = serializers.BooleanField()
