# invoices/models/import_invoice.py

from django.db import models

from parties.models import Supplier

from .base import Invoice, InvoiceItem


class ImportInvoice(Invoice):
    """
    Purchase (import) invoice received from a supplier. Origin of SUPPLIER returns.
    """

    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.PROTECT,
        related_name="import_invoices",
    )

    class Meta(Invoice.Meta):
        indexes = [
            models.Index(
                fields=["supplier", "status", "created_at"],
                name="import_invoice_supplier_idx",
            ),
        ]

    @property
    def party_id(self):
        return self.supplier_id

    @property
    def display_no(self) -> str:
        return self.invoice_no or f"IMP-{self.pk}"

    def __str__(self):
        return self.display_no


class ImportInvoiceItem(InvoiceItem):
    invoice = models.ForeignKey(
        ImportInvoice,
        on_delete=models.CASCADE,
        related_name="items",
    )

    def __str__(self):
        return f"{self.invoice_id} | {self.product_id} | qty={self.quantity}"
