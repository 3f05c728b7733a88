# parties/tests/test_ledger_summary.py

from __future__ import annotations

import uuid
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from invoices.models import ImportInvoice, SalesInvoice
from parties.services.balance_ledger import PartyNotFoundError
from parties.services.ledger_summary import (
    get_customer_ledger_summary,
    get_supplier_ledger_summary,
)
from payments.models import Payment
from returns.services import create_return
from returns.tests.helpers import (
    line,
    make_customer,
    make_import_invoice,
    make_product,
    make_sales_invoice,
    make_supplier,
)

User = get_user_model()


class CustomerLedgerSummaryTests(TestCase):
    def setUp(self):
        self.customer = make_customer("Ada", balance="800.00")
        self.product = make_product(stock=10)

        self.cash_invoice = make_sales_invoice(
            self.customer, [(self.product, None, 2, "100.00")], invoice_no="INV-1"
        )
        make_sales_invoice(
            self.customer,
            [(self.product, None, 4, "200.00")],
            invoice_type=SalesInvoice.TYPE_CREDIT,
            invoice_no="INV-2",
        )
        Payment.objects.create(
            type=Payment.Type.CUSTOMER,
            partner_id=self.customer.pk,
            amount=Decimal("150.00"),
        )

    def test_summary_totals(self):
        create_return(
            return_type="customer",
            invoice_id=self.cash_invoice.pk,
            party_id=self.customer.pk,
            items=[line(self.product, 1, "100.00")],
            refund_type="cash",
        )

        data = get_customer_ledger_summary(self.customer.pk)
        summary = data["summary"]

        self.assertEqual(summary["total_invoices"], 2)
        self.assertEqual(summary["total_purchase"], Decimal("1000.00"))
        self.assertEqual(summary["total_cash"], Decimal("200.00"))
        self.assertEqual(summary["total_credit"], Decimal("800.00"))
        # refund payments are not receipts
        self.assertEqual(summary["total_paid"], Decimal("150.00"))
        self.assertEqual(summary["total_returns"], Decimal("100.00"))
        self.assertEqual(summary["balance"], Decimal("700.00"))

        self.assertEqual(len(data["invoices"]), 2)
        self.assertEqual(len(data["payments"]), 1)
        self.assertEqual([r["return_no"] for r in data["returns"]], ["CRET-00001"])

    def test_unknown_customer(self):
        with self.assertRaises(PartyNotFoundError):
            get_customer_ledger_summary(uuid.uuid4())


class SupplierLedgerSummaryTests(TestCase):
    def setUp(self):
        self.supplier = make_supplier("Acme Pharma", balance="0.00")
        self.product = make_product(stock=10)
        make_import_invoice(self.supplier, [(self.product, None, 10, "10.00")])
        make_import_invoice(
            self.supplier,
            [(self.product, None, 99, "10.00")],
            status=ImportInvoice.STATUS_DRAFT,
            invoice_no="IMP-DRAFT",
        )

    def test_only_finalized_imports_count(self):
        summary = get_supplier_ledger_summary(self.supplier.pk)["summary"]

        self.assertEqual(summary["total_invoices"], 1)
        self.assertEqual(summary["total_imports"], Decimal("100.00"))
        self.assertEqual(summary["total_paid"], Decimal("0.00"))
        self.assertEqual(summary["total_returns"], Decimal("0.00"))


class PartyApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="clerk", password="password123")
        self.client.force_authenticate(user=self.user)
        self.customer = make_customer("Ada")
        self.supplier = make_supplier("Acme")

    def test_customer_list_and_ledger(self):
        res = self.client.get("/api/parties/customers/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["results"][0]["name"], "Ada")

        res = self.client.get(f"/api/parties/customers/{self.customer.pk}/ledger/")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["customer"]["name"], "Ada")
        self.assertEqual(res.data["summary"]["total_invoices"], 0)

    def test_supplier_ledger_not_found(self):
        res = self.client.get(f"/api/parties/suppliers/{uuid.uuid4()}/ledger/")

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["error"]["code"], "NOT_FOUND")

    def test_malformed_party_id_is_not_found(self):
        res = self.client.get(f"/api/parties/customers/{'-' * 36}/ledger/")

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
