# returns/models/return_record.py

"""
======================================================
PATH: returns/models/return_record.py
======================================================
RETURN (CUSTOMER OR SUPPLIER) + RETURN ITEMS

Purpose:
- Immutable header + lines of a goods return against a finalized invoice.
- Single source of truth for:
    • already-returned quantities (returnable calculator)
    • return statistics and party ledger summaries

Design guarantees:
- Created exactly once by the returns orchestrator
- Never updated, never deleted
- total_amount == Σ item.quantity × item.unit_price (computed once)
- status is fixed at "completed" (no draft/void state machine)
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class ReturnType(models.TextChoices):
    CUSTOMER = "customer", "Customer Return"
    SUPPLIER = "supplier", "Supplier Return"


class RefundType(models.TextChoices):
    CASH = "cash", "Cash"
    CREDIT = "credit", "Credit"
    ADJUSTMENT = "adjustment", "Adjustment"
    NONE = "none", "None"


class Return(models.Model):
    STATUS_COMPLETED = "completed"

    STATUS_CHOICES = [
        (STATUS_COMPLETED, "Completed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    return_no = models.CharField(
        max_length=100,
        unique=True,
        help_text="System-generated document number (CRET-00001 / SRET-00001)",
    )

    return_type = models.CharField(max_length=20, choices=ReturnType.choices)

    # Polymorphic references, interpreted through return_type:
    # customer -> SalesInvoice / Customer, supplier -> ImportInvoice / Supplier
    invoice_id = models.UUIDField()
    party_id = models.UUIDField()

    total_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    reason = models.CharField(max_length=100, null=True, blank=True)
    refund_type = models.CharField(
        max_length=20, choices=RefundType.choices, null=True, blank=True
    )
    notes = models.TextField(null=True, blank=True)

    status = models.CharField(
        max_length=20, choices=STATUS_CHOICES, default=STATUS_COMPLETED
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["return_type", "created_at"], name="return_type_created_idx"),
            models.Index(fields=["return_type", "invoice_id"], name="return_type_invoice_idx"),
            models.Index(fields=["return_type", "party_id"], name="return_type_party_idx"),
        ]

    # --------------------------------------------------
    # IMMUTABILITY
    # --------------------------------------------------

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("Return records are immutable")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("Return records cannot be deleted")

    def __str__(self):
        return f"{self.return_no} | {self.return_type} | {self.total_amount}"


class ReturnItem(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    return_record = models.ForeignKey(
        Return,
        on_delete=models.PROTECT,
        related_name="items",
    )

    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="return_items",
    )
    batch = models.ForeignKey(
        "products.ProductBatch",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="return_items",
    )

    quantity = models.PositiveIntegerField()
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        indexes = [
            models.Index(fields=["return_record"], name="return_item_record_idx"),
            models.Index(
                fields=["product", "batch"], name="return_item_product_batch_idx"
            ),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("ReturnItem records are immutable")
        if not self.quantity or self.quantity <= 0:
            raise ValidationError("quantity must be greater than zero")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError("ReturnItem records cannot be deleted")

    def __str__(self):
        return f"{self.return_record_id} | {self.product_id} | qty={self.quantity}"
