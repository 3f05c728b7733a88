# payments/models.py

"""
PAYMENTS

Cash/credit movements between the shop and its parties.

Types:
- customer          : receipt from a customer
- supplier          : payment to a supplier
- customer_refund   : cash refunded to a customer for a return
- supplier_credit   : credit note received from a supplier for a return

Settlement rows for returns are written by the returns orchestrator only.
Append-only: payment rows are never edited.
"""

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class Payment(models.Model):
    class Type(models.TextChoices):
        CUSTOMER = "customer", "Customer Receipt"
        SUPPLIER = "supplier", "Supplier Payment"
        CUSTOMER_REFUND = "customer_refund", "Customer Refund"
        SUPPLIER_CREDIT = "supplier_credit", "Supplier Credit"

    class Method(models.TextChoices):
        CASH = "cash", "Cash"
        BANK = "bank", "Bank"
        ADJUSTMENT = "adjustment", "Adjustment"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    type = models.CharField(max_length=20, choices=Type.choices)

    # Business document this payment settles (e.g. a Return). Optional.
    reference_id = models.UUIDField(null=True, blank=True)

    # Customer or supplier id, interpreted through `type`.
    partner_id = models.UUIDField()

    amount = models.DecimalField(max_digits=12, decimal_places=2)
    method = models.CharField(
        max_length=50, choices=Method.choices, default=Method.CASH
    )
    notes = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["type", "partner_id"], name="payment_type_partner_idx"),
            models.Index(fields=["reference_id"], name="payment_reference_idx"),
        ]

    def clean(self):
        if self.amount is None or Decimal(self.amount) < Decimal("0.00"):
            raise ValidationError({"amount": "amount cannot be negative"})

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValidationError("Payment records are immutable")
        self.full_clean()
        return super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.type} | {self.partner_id} | {self.amount}"
