# products/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Read-only catalog endpoints consumed by the returns screens.
- Stock is never edited here; it moves only through the stock ledger.
"""

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from products.models import Product, StockMovement
from products.serializers import ProductSerializer, StockMovementSerializer


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    GET /api/products/products/
    GET /api/products/products/<uuid>/
    GET /api/products/products/<uuid>/movements/
    """

    serializer_class = ProductSerializer

    def get_queryset(self):
        qs = Product.objects.all().order_by("name")

        q = (self.request.query_params.get("q") or "").strip()
        if q:
            qs = qs.filter(name__icontains=q)

        return qs

    @action(detail=True, methods=["get"], url_path="movements")
    def movements(self, request, pk=None):
        product = self.get_object()
        qs = (
            StockMovement.objects.filter(product=product)
            .select_related("product", "batch")
            .order_by("-created_at")
        )
        return Response(StockMovementSerializer(qs, many=True).data)
