# products/serializers/__init__.py

from .product import ProductSerializer
from .product_batch import ProductBatchSerializer, StockMovementSerializer

__all__ = [
    "ProductSerializer",
    "ProductBatchSerializer",
    "StockMovementSerializer",
]
