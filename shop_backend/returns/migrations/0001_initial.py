"""
======================================================
PATH: returns/migrations/0001_initial.py
======================================================
MIGRATION: RETURNS, RETURN ITEMS, DOCUMENT SEQUENCES

Purpose:
- Immutable Return header + ReturnItem lines
- One DocumentSequence counter row per numbering partition
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="DocumentSequence",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("partition", models.CharField(max_length=50, unique=True)),
                ("prefix", models.CharField(max_length=20)),
                ("last_value", models.PositiveBigIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["partition"],
            },
        ),
        migrations.CreateModel(
            name="Return",
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
                    "return_no",
                    models.CharField(
                        max_length=100,
                        unique=True,
                        help_text="System-generated document number (CRET-00001 / SRET-00001)",
                    ),
                ),
                (
                    "return_type",
                    models.CharField(
                        max_length=20,
                        choices=[
                            ("customer", "Customer Return"),
                            ("supplier", "Supplier Return"),
                        ],
                    ),
                ),
                ("invoice_id", models.UUIDField()),
                ("party_id", models.UUIDField()),
                (
                    "total_amount",
                    models.DecimalField(
                        max_digits=12, decimal_places=2, default=Decimal("0.00")
                    ),
                ),
                ("reason", models.CharField(max_length=100, null=True, blank=True)),
                (
                    "refund_type",
                    models.CharField(
                        max_length=20,
                        null=True,
                        blank=True,
                        choices=[
                            ("cash", "Cash"),
                            ("credit", "Credit"),
                            ("adjustment", "Adjustment"),
                            ("none", "None"),
                        ],
                    ),
                ),
                ("notes", models.TextField(null=True, blank=True)),
                (
                    "status",
                    models.CharField(
                        max_length=20,
                        choices=[("completed", "Completed")],
                        default="completed",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["return_type", "created_at"],
                        name="return_type_created_idx",
                    ),
                    models.Index(
                        fields=["return_type", "invoice_id"],
                        name="return_type_invoice_idx",
                    ),
                    models.Index(
                        fields=["return_type", "party_id"],
                        name="return_type_party_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ReturnItem",
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
                ("quantity", models.PositiveIntegerField()),
                ("unit_price", models.DecimalField(max_digits=10, decimal_places=2)),
                ("total_price", models.DecimalField(max_digits=12, decimal_places=2)),
                (
                    "return_record",
                    models.ForeignKey(
                        to="returns.return",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="items",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        to="products.product",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="return_items",
                    ),
                ),
                (
                    "batch",
                    models.ForeignKey(
                        to="products.productbatch",
                        on_delete=django.db.models.deletion.PROTECT,
                        null=True,
                        blank=True,
                        related_name="return_items",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["return_record"], name="return_item_record_idx"),
                    models.Index(
                        fields=["product", "batch"],
                        name="return_item_product_batch_idx",
                    ),
                ],
            },
        ),
    ]
