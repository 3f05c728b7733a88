# products/models/product_batch.py

"""
PRODUCT BATCH

One identifiable lot of a product (batch number + optional expiry).

Rules:
- batch_number is unique per product
- quantity is mutated in lockstep with Product.current_stock,
  ONLY via products.services.stock_ledger
"""

import uuid

from django.core.exceptions import ValidationError
from django.db import models

from .product import Product


class ProductBatch(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="batches",
    )

    batch_number = models.CharField(
        max_length=100,
        help_text="Supplier / delivery batch reference",
    )

    expiry_date = models.DateField(null=True, blank=True)

    quantity = models.IntegerField(
        default=0,
        help_text="Quantity on hand for this batch (service-managed only).",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["expiry_date", "created_at"]
        indexes = [
            models.Index(
                fields=["product", "expiry_date"], name="batch_product_expiry_idx"
            ),
            models.Index(fields=["batch_number"], name="batch_number_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["product", "batch_number"],
                name="unique_batch_number_per_product",
            ),
        ]

    def clean(self):
        if not (self.batch_number or "").strip():
            raise ValidationError({"batch_number": "batch_number is required"})

    def save(self, *args, **kwargs):
        if self.batch_number is not None:
            self.batch_number = self.batch_number.strip()
        return super().save(*args, **kwargs)

    def __str__(self):
        product_name = getattr(self.product, "name", "Product")
        return f"{product_name} | {self.batch_number}"
