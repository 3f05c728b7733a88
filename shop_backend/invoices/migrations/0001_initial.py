"""
======================================================
PATH: invoices/migrations/0001_initial.py
======================================================
MIGRATION: SALES + IMPORT INVOICES

Purpose:
- Originating documents of customer and supplier returns
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import django.db.models.deletion
from django.db import migrations, models

STATUS_CHOICES = [("draft", "Draft"), ("finalized", "Finalized")]
TYPE_CHOICES = [("cash", "Cash"), ("credit", "Credit")]


def _invoice_fields():
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
        ("invoice_no", models.CharField(max_length=100, blank=True, default="")),
        (
            "type",
            models.CharField(max_length=20, choices=TYPE_CHOICES, default="cash"),
        ),
        (
            "status",
            models.CharField(max_length=20, choices=STATUS_CHOICES, default="draft"),
        ),
        (
            "total_amount",
            models.DecimalField(
                max_digits=12, decimal_places=2, default=Decimal("0.00")
            ),
        ),
        ("created_at", models.DateTimeField(auto_now_add=True)),
    ]


def _item_fields(invoice_model: str):
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
        ("quantity", models.PositiveIntegerField()),
        ("unit_price", models.DecimalField(max_digits=10, decimal_places=2)),
        ("total_price", models.DecimalField(max_digits=12, decimal_places=2)),
        (
            "product",
            models.ForeignKey(
                to="products.product",
                on_delete=django.db.models.deletion.PROTECT,
                related_name="+",
            ),
        ),
        (
            "batch",
            models.ForeignKey(
                to="products.productbatch",
                on_delete=django.db.models.deletion.SET_NULL,
                null=True,
                blank=True,
                related_name="+",
            ),
        ),
        (
            "invoice",
            models.ForeignKey(
                to=invoice_model,
                on_delete=django.db.models.deletion.CASCADE,
                related_name="items",
            ),
        ),
    ]


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("parties", "0001_initial"),
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="SalesInvoice",
            fields=_invoice_fields()
            + [
                (
                    "discount_amount",
                    models.DecimalField(
                        max_digits=12, decimal_places=2, default=Decimal("0.00")
                    ),
                ),
                (
                    "customer",
                    models.ForeignKey(
                        to="parties.customer",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="sales_invoices",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(
                        fields=["customer", "status", "created_at"],
                        name="sales_invoice_customer_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="ImportInvoice",
            fields=_invoice_fields()
            + [
                (
                    "supplier",
                    models.ForeignKey(
                        to="parties.supplier",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="import_invoices",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "abstract": False,
                "indexes": [
                    models.Index(
                        fields=["supplier", "status", "created_at"],
                        name="import_invoice_supplier_idx",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="SalesInvoiceItem",
            fields=_item_fields("invoices.salesinvoice"),
            options={"abstract": False},
        ),
        migrations.CreateModel(
            name="ImportInvoiceItem",
            fields=_item_fields("invoices.importinvoice"),
            options={"abstract": False},
        ),
    ]
