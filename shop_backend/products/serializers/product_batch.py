# products/serializers/product_batch.py

from rest_framework import serializers

from products.models import ProductBatch, StockMovement


class ProductBatchSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(source="product.id", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = ProductBatch
        fields = [
            "id",
            "product_id",
            "product_name",
            "batch_number",
            "expiry_date",
            "quantity",
            "created_at",
        ]
        read_only_fields = fields


class StockMovementSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)
    batch_number = serializers.CharField(
        source="batch.batch_number", read_only=True, default=None
    )

    class Meta:
        model = StockMovement
        fields = [
            "id",
            "product",
            "product_name",
            "batch",
            "batch_number",
            "quantity",
            "movement_type",
            "reference_type",
            "reference_id",
            "created_at",
        ]
        read_only_fields = fields
