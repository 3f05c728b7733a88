# products/views/product_batch.py

"""
PRODUCT BATCH VIEWSET

- list: all batches (reports), optionally filtered by ?product_id=
- available: batches of one product with quantity > 0, earliest expiry first
  (used to pick a batch when recording a return)
"""

import uuid

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from products.filters import ProductBatchFilter
from products.models import ProductBatch
from products.selectors import list_product_batches
from products.serializers import ProductBatchSerializer


class ProductBatchViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = ProductBatch.objects.select_related("product").order_by(
        "product__name", "expiry_date"
    )
    serializer_class = ProductBatchSerializer
    filterset_class = ProductBatchFilter

    @action(detail=False, methods=["get"], url_path="available")
    def available(self, request):
        try:
            product_id = uuid.UUID((request.query_params.get("product_id") or "").strip())
        except ValueError:
            return Response(
                {"detail": "product_id must be a valid id"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        qs = list_product_batches(product_id)
        return Response(self.get_serializer(qs, many=True).data)
