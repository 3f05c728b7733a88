# returns/tests/test_returnable.py

from __future__ import annotations

import uuid
from decimal import Decimal

from django.test import TestCase

from invoices.models import SalesInvoice
from returns.models import Return, ReturnItem, ReturnType
from returns.services.exceptions import ReturnIntegrityError, ReturnNotFoundError
from returns.services.returnable import (
    LineKey,
    get_remaining_quantity,
    get_returnable_lines,
)
from returns.tests.helpers import (
    make_batch,
    make_customer,
    make_product,
    make_sales_invoice,
)


class LineKeyTests(TestCase):
    def test_missing_batch_equals_missing_batch(self):
        product_id = uuid.uuid4()
        self.assertEqual(LineKey.of(product_id, None), LineKey.of(str(product_id), ""))

    def test_missing_batch_never_equals_concrete_batch(self):
        product_id = uuid.uuid4()
        self.assertNotEqual(LineKey.of(product_id, None), LineKey.of(product_id, uuid.uuid4()))


class ReturnableQuantityTests(TestCase):
    """
    returnable = ordered - already returned, per (product, batch)
    """

    def setUp(self):
        self.customer = make_customer()
        self.product = make_product(stock=0)
        self.batch = make_batch(self.product, "B-1")
        self.invoice = make_sales_invoice(
            self.customer,
            [
                (self.product, None, 10, "100.00"),
                (self.product, self.batch, 4, "100.00"),
            ],
        )

    def _record_prior_return(self, quantity, batch=None, return_no="CRET-00001"):
        ret = Return.objects.create(
            return_no=return_no,
            return_type=ReturnType.CUSTOMER,
            invoice_id=self.invoice.pk,
            party_id=self.customer.pk,
            total_amount=Decimal("100.00") * quantity,
        )
        ReturnItem.objects.create(
            return_record=ret,
            product=self.product,
            batch=batch,
            quantity=quantity,
            unit_price=Decimal("100.00"),
            total_price=Decimal("100.00") * quantity,
        )

    def _remaining(self, batch=None):
        return get_remaining_quantity(
            return_type=ReturnType.CUSTOMER,
            invoice_id=self.invoice.pk,
            product_id=self.product.pk,
            batch_id=batch.pk if batch else None,
        )

    def test_nothing_returned_yet(self):
        self.assertEqual(self._remaining(), 10)
        self.assertEqual(self._remaining(self.batch), 4)

    def test_prior_return_without_batch_only_reduces_unbatched_line(self):
        self._record_prior_return(3)

        self.assertEqual(self._remaining(), 7)
        self.assertEqual(self._remaining(self.batch), 4)

    def test_query_is_idempotent(self):
        self._record_prior_return(2, batch=self.batch)

        self.assertEqual(self._remaining(self.batch), 2)
        self.assertEqual(self._remaining(self.batch), 2)

    def test_duplicate_invoice_lines_are_summed(self):
        invoice = make_sales_invoice(
            self.customer,
            [(self.product, None, 2, "5.00"), (self.product, None, 3, "5.00")],
            invoice_no="INV-00002",
        )

        lines = get_returnable_lines(return_type=ReturnType.CUSTOMER, invoice_id=invoice.pk)

        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].ordered_quantity, 5)
        self.assertEqual(lines[0].returnable_quantity, 5)

    def test_product_not_on_invoice_has_nothing_to_return(self):
        other = make_product("Vitamin C")
        remaining = get_remaining_quantity(
            return_type=ReturnType.CUSTOMER,
            invoice_id=self.invoice.pk,
            product_id=other.pk,
        )
        self.assertEqual(remaining, 0)

    def test_supplier_returns_do_not_count_against_sales_invoice(self):
        ret = Return.objects.create(
            return_no="SRET-00001",
            return_type=ReturnType.SUPPLIER,
            invoice_id=self.invoice.pk,
            party_id=uuid.uuid4(),
        )
        ReturnItem.objects.create(
            return_record=ret,
            product=self.product,
            quantity=5,
            unit_price=Decimal("1.00"),
            total_price=Decimal("5.00"),
        )

        self.assertEqual(self._remaining(), 10)

    def test_over_returned_history_is_integrity_error(self):
        self._record_prior_return(11)

        with self.assertRaises(ReturnIntegrityError):
            self._remaining()

    def test_draft_invoice_is_not_found(self):
        draft = make_sales_invoice(
            self.customer,
            [(self.product, None, 1, "1.00")],
            status=SalesInvoice.STATUS_DRAFT,
            invoice_no="INV-00003",
        )

        with self.assertRaises(ReturnNotFoundError):
            get_returnable_lines(return_type=ReturnType.CUSTOMER, invoice_id=draft.pk)
