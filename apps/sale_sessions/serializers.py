from rest_framework import serializers
from .models import Session


class SessionSerializer(serializers.ModelSerializer):
    """Session output with its current open state."""

    is_open = serializers.SerializerMethodField()

    class Meta:
        model = Session
        fields = [
            'id',
            'name',
            'location',
            'start_date',
            'end_date',
            'sale_commission',
            'deposit_fee',
            'is_open',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_is_open(self, obj) -> bool:
        return obj.is_open()


class SessionMinimalSerializer(serializers.ModelSerializer):
    """Minimal session info for nested serialization."""

    class Meta:
        model = Session
        fields = ['id', 'name', 'start_date', 'end_date', 'sale_commission']


class SessionInputSerializer(serializers.Serializer):
    """
    Validate session create/update input.

    Range checks on the commission depend on SALE_COMMISSION_UNIT
    and are done by the service.
    """

    name = serializers.CharField(max_length=200)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    sale_commission = serializers.DecimalField(max_digits=7, decimal_places=4, min_value=0, required=False)
    deposit_fee = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')

        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({
                'end_date': 'End date must be after start date'
            })

        return attrs


class SessionOpenStateSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    is_open = serializers.BooleanField()
