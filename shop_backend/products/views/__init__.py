# products/views/__init__.py

"""
Products views package exports.

Purpose:
- Central export point for router imports.
"""

from .product import ProductViewSet
from .product_batch import ProductBatchViewSet

__all__ = [
    "ProductViewSet",
    "ProductBatchViewSet",
]
