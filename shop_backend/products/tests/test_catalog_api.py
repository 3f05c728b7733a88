# products/tests/test_catalog_api.py

from __future__ import annotations

from datetime import date, timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from products.models import Product, ProductBatch

User = get_user_model()


class CatalogApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="clerk", password="password123")
        self.client.force_authenticate(user=self.user)

        self.product = Product.objects.create(name="Paracetamol 500mg", current_stock=5)
        self.late = ProductBatch.objects.create(
            product=self.product,
            batch_number="LATE",
            quantity=3,
            expiry_date=date.today() + timedelta(days=300),
        )
        self.early = ProductBatch.objects.create(
            product=self.product,
            batch_number="EARLY",
            quantity=2,
            expiry_date=date.today() + timedelta(days=30),
        )
        ProductBatch.objects.create(
            product=self.product, batch_number="EMPTY", quantity=0
        )

    def test_product_search(self):
        Product.objects.create(name="Ibuprofen 200mg")

        res = self.client.get("/api/products/products/", {"q": "para"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in res.data["results"]], ["Paracetamol 500mg"])

    def test_available_batches_ordered_by_expiry(self):
        res = self.client.get(
            "/api/products/batches/available/", {"product_id": str(self.product.pk)}
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([b["batch_number"] for b in res.data], ["EARLY", "LATE"])

    def test_available_batches_requires_product(self):
        res = self.client.get("/api/products/batches/available/")

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_batch_list_filters_by_product(self):
        other = Product.objects.create(name="Other")
        ProductBatch.objects.create(product=other, batch_number="X", quantity=1)

        res = self.client.get("/api/products/batches/", {"product_id": str(other.pk)})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["count"], 1)
