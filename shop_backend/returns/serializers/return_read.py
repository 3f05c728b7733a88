# returns/serializers/return_read.py

from rest_framework import serializers


class ReturnReadSerializer(serializers.Serializer):
    """
    Read-only shape of a return header, as produced by returns.selectors.
    """

    id = serializers.UUIDField()
    return_no = serializers.CharField()
    return_type = serializers.CharField()
    invoice_id = serializers.UUIDField()
    party_id = serializers.UUIDField()
    party_name = serializers.CharField(allow_null=True)
    original_invoice_no = serializers.CharField(allow_null=True)
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    reason = serializers.CharField(allow_null=True)
    refund_type = serializers.CharField(allow_null=True)
    notes = serializers.CharField(allow_null=True)
    status = serializers.CharField()
    created_at = serializers.DateTimeField()


class ReturnItemReadSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    product_id = serializers.UUIDField()
    product_name = serializers.CharField()
    batch_id = serializers.UUIDField(allow_null=True)
    batch_number = serializers.CharField(allow_null=True)
    expiry_date = serializers.DateField(allow_null=True)
    quantity = serializers.IntegerField()
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2)


class ReturnableInvoiceSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    invoice_no = serializers.CharField()
    type = serializers.CharField()
    total_amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    created_at = serializers.DateTimeField()
    party_name = serializers.CharField(allow_blank=True)


class ReturnableLineSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    product_name = serializers.CharField()
    batch_id = serializers.UUIDField(allow_null=True)
    batch_number = serializers.CharField(allow_null=True)
    expiry_date = serializers.DateField(allow_null=True)
    unit_price = serializers.DecimalField(max_digits=10, decimal_places=2)
    ordered_quantity = serializers.IntegerField()
    already_returned = serializers.IntegerField()
    returnable_quantity = serializers.IntegerField()


class ReturnStatsRowSerializer(serializers.Serializer):
    total_returns = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class ReturnReasonRowSerializer(serializers.Serializer):
    reason = serializers.CharField()
    return_type = serializers.CharField()
    count = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class ReturnStatsSerializer(serializers.Serializer):
    customer = ReturnStatsRowSerializer()
    supplier = ReturnStatsRowSerializer()
    by_reason = ReturnReasonRowSerializer(many=True)
