"""
======================================================
PATH: parties/migrations/0001_initial.py
======================================================
MIGRATION: CUSTOMERS + SUPPLIERS

Purpose:
- One running ledger_balance per party
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.db import migrations, models


def _party_fields():
    return [
        (
            "id",
            models.UUIDField(
                primary_key=True,
                default=uuid.uuid4,
                editable=False,
                serialize=False,
            ),
        ),
        ("name", models.CharField(max_length=255)),
        ("phone", models.CharField(max_length=50, blank=True, default="")),
        (
            "ledger_balance",
            models.DecimalField(
                max_digits=12,
                decimal_places=2,
                default=Decimal("0.00"),
                help_text="Running balance (service-managed only).",
            ),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=_party_fields(),
            options={
                "ordering": ["name"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["name"], name="customer_name_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Supplier",
            fields=_party_fields()
            + [
                ("currency", models.CharField(max_length=10, blank=True, default="")),
            ],
            options={
                "ordering": ["name"],
                "abstract": False,
                "indexes": [
                    models.Index(fields=["name"], name="supplier_name_idx"),
                ],
            },
        ),
    ]
