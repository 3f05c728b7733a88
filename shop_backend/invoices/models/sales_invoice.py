# invoices/models/sales_invoice.py

from decimal import Decimal

from django.db import models

from parties.models import Customer

from .base import Invoice, InvoiceItem


class SalesInvoice(Invoice):
    """
    Invoice issued to a customer. Origin of CUSTOMER returns.
    """

    customer = models.ForeignKey(
        Customer,
        on_delete=models.PROTECT,
        related_name="sales_invoices",
    )

    discount_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    class Meta(Invoice.Meta):
        indexes = [
            models.Index(
                fields=["customer", "status", "created_at"],
                name="sales_invoice_customer_idx",
            ),
        ]

    @property
    def party_id(self):
        return self.customer_id

    @property
    def display_no(self) -> str:
        return self.invoice_no or f"INV-{self.pk}"

    def __str__(self):
        return self.display_no


class SalesInvoiceItem(InvoiceItem):
    invoice = models.ForeignKey(
        SalesInvoice,
        on_delete=models.CASCADE,
        related_name="items",
    )

    def __str__(self):
        return f"{self.invoice_id} | {self.product_id} | qty={self.quantity}"
