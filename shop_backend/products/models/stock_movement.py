# products/models/stock_movement.py

"""
STOCK MOVEMENT (IMMUTABLE AUDIT TRAIL)

Append-only record of every stock mutation performed by the stock ledger.

GUARANTEES:
- Created ONCE, never edited, never deleted
- quantity is the UNSIGNED amount moved; direction lives in movement_type
- reference_type + reference_id point back at the business document
  (e.g. a customer or supplier return)
"""

import uuid

from django.core.exceptions import ValidationError
from django.db import models

from .product import Product
from .product_batch import ProductBatch


class StockMovement(models.Model):
    class MovementType(models.TextChoices):
        RETURN_IN = "return_in", "Return In"
        RETURN_OUT = "return_out", "Return Out"

    class ReferenceType(models.TextChoices):
        CUSTOMER_RETURN = "customer_return", "Customer Return"
        SUPPLIER_RETURN = "supplier_return", "Supplier Return"

    INBOUND_TYPES = {MovementType.RETURN_IN}

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    product = models.ForeignKey(
        Product, on_delete=models.PROTECT, related_name="stock_movements"
    )
    batch = models.ForeignKey(
        ProductBatch,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="stock_movements",
    )

    quantity = models.PositiveIntegerField()
    movement_type = models.CharField(max_length=50, choices=MovementType.choices)

    reference_type = models.CharField(
        max_length=50, choices=ReferenceType.choices, blank=True, default=""
    )
    reference_id = models.UUIDField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(
                fields=["product", "created_at"], name="movement_product_created_idx"
            ),
            models.Index(
                fields=["reference_type", "reference_id"], name="movement_reference_idx"
            ),
            models.Index(fields=["movement_type"], name="movement_type_idx"),
        ]

    def clean(self):
        if not self.quantity or self.quantity <= 0:
            raise ValidationError("quantity must be greater than zero")

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("StockMovement records are immutable")
        self.full_clean()
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValidationError(
            "StockMovement records are immutable and cannot be deleted"
        )

    @property
    def signed_quantity(self) -> int:
        if self.movement_type in self.INBOUND_TYPES:
            return int(self.quantity)
        return -int(self.quantity)

    def __str__(self):
        product_name = getattr(self.product, "name", "Product")
        return f"{product_name} | {self.movement_type} | {self.quantity}"
