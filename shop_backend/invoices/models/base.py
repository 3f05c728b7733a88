# invoices/models/base.py

"""
ORIGINATING DOCUMENTS (SALES + IMPORT INVOICES)

Invoices are the origin of every return.

Rules:
- Only FINALIZED invoices are eligible origins for a return.
- The returns core never writes invoices; it only reads lines
  to compute the remaining returnable quantity.
"""

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class Invoice(models.Model):
    STATUS_DRAFT = "draft"
    STATUS_FINALIZED = "finalized"

    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_FINALIZED, "Finalized"),
    ]

    TYPE_CASH = "cash"
    TYPE_CREDIT = "credit"

    TYPE_CHOICES = [
        (TYPE_CASH, "Cash"),
        (TYPE_CREDIT, "Credit"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    invoice_no = models.CharField(max_length=100, blank=True, default="")
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_CASH)
    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=STATUS_DRAFT
    )

    total_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    @property
    def is_finalized(self) -> bool:
        return self.status == self.STATUS_FINALIZED


class InvoiceItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="+",
    )
    batch = models.ForeignKey(
        "products.ProductBatch",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )

    quantity = models.PositiveIntegerField()
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        abstract = True

    def clean(self):
        if self.batch_id and self.product_id and self.batch.product_id != self.product_id:
            raise ValidationError({"batch": "Batch does not belong to product"})

    def save(self, *args, **kwargs):
        if self.total_price is None and self.unit_price is not None:
            self.total_price = Decimal(str(self.unit_price)) * int(self.quantity or 0)
        return super().save(*args, **kwargs)
