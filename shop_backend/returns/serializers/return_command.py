# returns/serializers/return_command.py

from rest_framework import serializers

from returns.models import RefundType, ReturnType


class ReturnItemCommandSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    batch_id = serializers.UUIDField(required=False, allow_null=True)
    quantity = serializers.IntegerField(min_value=1)
    unit_price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=0,
    )


class ReturnCreateCommandSerializer(serializers.Serializer):
    """
    Command serializer for return creation.

    This serializer does NOT touch the database.
    Invoice / party / returnable checks belong to the orchestrator.
    """

    return_type = serializers.ChoiceField(choices=ReturnType.choices)
    invoice_id = serializers.UUIDField()
    party_id = serializers.UUIDField()

    items = ReturnItemCommandSerializer(many=True, allow_empty=False)

    reason = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        max_length=100,
    )
    refund_type = serializers.ChoiceField(
        choices=RefundType.choices,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    notes = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
    )
