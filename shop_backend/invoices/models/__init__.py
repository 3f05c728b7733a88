"""
PATH: invoices/models/__init__.py

Originating document models (read-only from the returns core).
"""

from .import_invoice import ImportInvoice, ImportInvoiceItem
from .sales_invoice import SalesInvoice, SalesInvoiceItem

__all__ = [
    "SalesInvoice",
    "SalesInvoiceItem",
    "ImportInvoice",
    "ImportInvoiceItem",
]
