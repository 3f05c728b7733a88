# products/serializers/product.py

from rest_framework import serializers

from products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Product read serializer.

    current_stock is read-only: stock moves only through the stock ledger.
    """

    class Meta:
        model = Product
        fields = [
            "id",
            "sku",
            "name",
            "unit",
            "current_stock",
            "created_at",
        ]
        read_only_fields = ["id", "current_stock", "created_at"]
