"""
======================================================
PATH: payments/migrations/0001_initial.py
======================================================
MIGRATION: PAYMENTS

Purpose:
- Append-only payment rows, including return settlements
"""

from __future__ import annotations

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Payment",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        primary_key=True,
                        default=uuid.uuid4,
                        editable=False,
                        serialize=False,
                    ),
                ),
                (
                    "type",
                    models.CharField(
                        max_length=20,
                        choices=[
                            ("customer", "Customer Receipt"),
                            ("supplier", "Supplier Payment"),
                            ("customer_refund", "Customer Refund"),
                            ("supplier_credit", "Supplier Credit"),
                        ],
                    ),
                ),
                ("reference_id", models.UUIDField(null=True, blank=True)),
                ("partner_id", models.UUIDField()),
                ("amount", models.DecimalField(max_digits=12, decimal_places=2)),
                (
                    "method",
                    models.CharField(
                        max_length=50,
                        default="cash",
                        choices=[
                            ("cash", "Cash"),
                            ("bank", "Bank"),
                            ("adjustment", "Adjustment"),
                        ],
                    ),
                ),
                ("notes", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["type", "partner_id"], name="payment_type_partner_idx"
                    ),
                    models.Index(fields=["reference_id"], name="payment_reference_idx"),
                ],
            },
        ),
    ]
