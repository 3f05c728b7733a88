# payments/serializers.py

from rest_framework import serializers

from payments.models import Payment


class PaymentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Payment
        fields = [
            "id",
            "type",
            "reference_id",
            "partner_id",
            "amount",
            "method",
            "notes",
            "created_at",
        ]
        read_only_fields = fields
