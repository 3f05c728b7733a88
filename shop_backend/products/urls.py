# products/urls.py

"""
PRODUCTS URLS

Registers read-only catalog routes under /api/products/
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from products.views import ProductBatchViewSet, ProductViewSet

router = DefaultRouter()

router.register(r"products", ProductViewSet, basename="products")
router.register(r"batches", ProductBatchViewSet, basename="product-batches")

urlpatterns = [
    path("", include(router.urls)),
]
