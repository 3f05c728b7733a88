# products/models/product.py

import uuid

from django.db import models


class Product(models.Model):
    """
    Represents a stocked product.

    STOCK MODEL (IMPORTANT):
    - current_stock is the aggregate on-hand quantity for the product.
    - It is mutated ONLY through products.services.stock_ledger
      (atomic F() increments, never an absolute overwrite).
    - A non-negative floor is a policy (ALLOW_NEGATIVE_STOCK), not a DB constraint.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    sku = models.CharField(max_length=128, blank=True, default="", db_index=True)
    name = models.CharField(max_length=255, db_index=True)
    unit = models.CharField(max_length=50, blank=True, default="")

    current_stock = models.IntegerField(
        default=0,
        help_text="Aggregate on-hand quantity (service-managed only).",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["name"], name="product_name_idx"),
        ]

    def __str__(self):
        if self.sku:
            return f"{self.name} ({self.sku})"
        return self.name
