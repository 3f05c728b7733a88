"""
======================================================
PATH: products/migrations/0001_initial.py
======================================================
MIGRATION: PRODUCTS, BATCHES, STOCK MOVEMENTS

Purpose:
- Product with aggregate current_stock
- ProductBatch, unique batch_number per product
- Append-only StockMovement audit trail
"""

from __future__ import annotations

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
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
                    "sku",
                    models.CharField(
                        max_length=128, blank=True, default="", db_index=True
                    ),
                ),
                ("name", models.CharField(max_length=255, db_index=True)),
                ("unit", models.CharField(max_length=50, blank=True, default="")),
                (
                    "current_stock",
                    models.IntegerField(
                        default=0,
                        help_text="Aggregate on-hand quantity (service-managed only).",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["name"], name="product_name_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="ProductBatch",
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
                    "batch_number",
                    models.CharField(
                        max_length=100,
                        help_text="Supplier / delivery batch reference",
                    ),
                ),
                ("expiry_date", models.DateField(null=True, blank=True)),
                (
                    "quantity",
                    models.IntegerField(
                        default=0,
                        help_text="Quantity on hand for this batch (service-managed only).",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        to="products.product",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="batches",
                    ),
                ),
            ],
            options={
                "ordering": ["expiry_date", "created_at"],
                "indexes": [
                    models.Index(
                        fields=["product", "expiry_date"],
                        name="batch_product_expiry_idx",
                    ),
                    models.Index(fields=["batch_number"], name="batch_number_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=["product", "batch_number"],
                        name="unique_batch_number_per_product",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="StockMovement",
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
                (
                    "movement_type",
                    models.CharField(
                        max_length=50,
                        choices=[
                            ("return_in", "Return In"),
                            ("return_out", "Return Out"),
                        ],
                    ),
                ),
                (
                    "reference_type",
                    models.CharField(
                        max_length=50,
                        blank=True,
                        default="",
                        choices=[
                            ("customer_return", "Customer Return"),
                            ("supplier_return", "Supplier Return"),
                        ],
                    ),
                ),
                ("reference_id", models.UUIDField(null=True, blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "product",
                    models.ForeignKey(
                        to="products.product",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="stock_movements",
                    ),
                ),
                (
                    "batch",
                    models.ForeignKey(
                        to="products.productbatch",
                        on_delete=django.db.models.deletion.PROTECT,
                        null=True,
                        blank=True,
                        related_name="stock_movements",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [
                    models.Index(
                        fields=["product", "created_at"],
                        name="movement_product_created_idx",
                    ),
                    models.Index(
                        fields=["reference_type", "reference_id"],
                        name="movement_reference_idx",
                    ),
                    models.Index(fields=["movement_type"], name="movement_type_idx"),
                ],
            },
        ),
    ]
