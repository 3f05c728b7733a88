# returns/tests/helpers.py

"""
Small builders shared by the returns test modules.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from invoices.models import ImportInvoice, ImportInvoiceItem, SalesInvoice, SalesInvoiceItem
from parties.models import Customer, Supplier
from products.models import Product, ProductBatch


def make_product(name="Paracetamol 500mg", *, stock=0, sku=""):
    return Product.objects.create(name=name, sku=sku, current_stock=stock)


def make_batch(product, batch_number="BATCH-001", *, quantity=0, days_to_expiry=365):
    return ProductBatch.objects.create(
        product=product,
        batch_number=batch_number,
        quantity=quantity,
        expiry_date=date.today() + timedelta(days=days_to_expiry),
    )


def make_customer(name="Walk-in Customer", *, balance="0.00"):
    return Customer.objects.create(name=name, ledger_balance=Decimal(balance))


def make_supplier(name="Main Supplier", *, balance="0.00"):
    return Supplier.objects.create(name=name, ledger_balance=Decimal(balance))


def _total(lines):
    return sum(
        (Decimal(str(price)) * qty for _, _, qty, price in lines),
        Decimal("0.00"),
    )


def make_sales_invoice(customer, lines, *, status=SalesInvoice.STATUS_FINALIZED,
                       invoice_type=SalesInvoice.TYPE_CASH, invoice_no="INV-00001"):
    """
    lines: [(product, batch_or_None, quantity, unit_price), ...]
    """
    invoice = SalesInvoice.objects.create(
        customer=customer,
        invoice_no=invoice_no,
        type=invoice_type,
        status=status,
        total_amount=_total(lines),
    )
    for product, batch, qty, price in lines:
        SalesInvoiceItem.objects.create(
            invoice=invoice,
            product=product,
            batch=batch,
            quantity=qty,
            unit_price=Decimal(str(price)),
        )
    return invoice


def make_import_invoice(supplier, lines, *, status=ImportInvoice.STATUS_FINALIZED,
                        invoice_type=ImportInvoice.TYPE_CREDIT, invoice_no="IMP-00001"):
    invoice = ImportInvoice.objects.create(
        supplier=supplier,
        invoice_no=invoice_no,
        type=invoice_type,
        status=status,
        total_amount=_total(lines),
    )
    for product, batch, qty, price in lines:
        ImportInvoiceItem.objects.create(
            invoice=invoice,
            product=product,
            batch=batch,
            quantity=qty,
            unit_price=Decimal(str(price)),
        )
    return invoice


def line(product, quantity, unit_price, batch=None):
    """Request line in the shape create_return() accepts."""
    payload = {
        "product_id": str(product.pk),
        "quantity": quantity,
        "unit_price": str(unit_price),
    }
    if batch is not None:
        payload["batch_id"] = str(batch.pk)
    return payload
