# invoices/tests/test_invoices.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.test import TestCase

from invoices.models import SalesInvoice, SalesInvoiceItem
from parties.models import Customer
from products.models import Product, ProductBatch


class InvoiceItemTests(TestCase):
    def setUp(self):
        self.customer = Customer.objects.create(name="Ada")
        self.product = Product.objects.create(name="Paracetamol 500mg")
        self.invoice = SalesInvoice.objects.create(customer=self.customer)

    def test_total_price_defaults_to_quantity_times_price(self):
        item = SalesInvoiceItem.objects.create(
            invoice=self.invoice,
            product=self.product,
            quantity=3,
            unit_price=Decimal("2.50"),
        )
        self.assertEqual(item.total_price, Decimal("7.50"))

    def test_batch_must_belong_to_product(self):
        other = Product.objects.create(name="Other")
        batch = ProductBatch.objects.create(product=other, batch_number="X-1")
        item = SalesInvoiceItem(
            invoice=self.invoice,
            product=self.product,
            batch=batch,
            quantity=1,
            unit_price=Decimal("1.00"),
            total_price=Decimal("1.00"),
        )

        with self.assertRaises(ValidationError):
            item.full_clean()

    def test_new_invoice_is_draft(self):
        self.assertFalse(self.invoice.is_finalized)
        self.assertEqual(self.invoice.display_no, f"INV-{self.invoice.pk}")
