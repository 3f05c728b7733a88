# parties/models/party.py

"""
PARTIES (CUSTOMERS + SUPPLIERS)

Each party carries ONE running ledger balance.

Sign convention:
- Customer: positive balance = customer owes the shop
- Supplier: positive balance = the shop owes the supplier

ledger_balance is mutated ONLY by parties.services.balance_ledger
(atomic F() increments). Individual adjustments are not stored here;
returns and payments are the audit trail.
"""

import uuid
from decimal import Decimal

from django.db import models


class Party(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=50, blank=True, default="")

    ledger_balance = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text="Running balance (service-managed only).",
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
        ordering = ["name"]

    def __str__(self):
        return self.name


class Customer(Party):
    class Meta(Party.Meta):
        indexes = [models.Index(fields=["name"], name="customer_name_idx")]


class Supplier(Party):
    currency = models.CharField(max_length=10, blank=True, default="")

    class Meta(Party.Meta):
        indexes = [models.Index(fields=["name"], name="supplier_name_idx")]
