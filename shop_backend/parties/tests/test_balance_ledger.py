# parties/tests/test_balance_ledger.py

from __future__ import annotations

import uuid
from decimal import Decimal

from django.test import TestCase

from parties.models import Customer, Supplier
from parties.services.balance_ledger import (
    PARTY_CUSTOMER,
    PARTY_SUPPLIER,
    BalanceLedgerError,
    PartyNotFoundError,
    adjust_balance,
)


class BalanceLedgerTests(TestCase):
    def setUp(self):
        self.customer = Customer.objects.create(
            name="Ada", ledger_balance=Decimal("100.00")
        )
        self.supplier = Supplier.objects.create(
            name="Acme Pharma", ledger_balance=Decimal("50.00")
        )

    def test_customer_balance_decreases(self):
        adjust_balance(
            party_type=PARTY_CUSTOMER, party_id=self.customer.pk, amount=Decimal("-30.50")
        )
        self.customer.refresh_from_db()
        self.assertEqual(self.customer.ledger_balance, Decimal("69.50"))

    def test_supplier_balance_can_go_negative(self):
        adjust_balance(
            party_type=PARTY_SUPPLIER, party_id=self.supplier.pk, amount=Decimal("-80")
        )
        self.supplier.refresh_from_db()
        self.assertEqual(self.supplier.ledger_balance, Decimal("-30.00"))

    def test_unknown_party_raises(self):
        with self.assertRaises(PartyNotFoundError):
            adjust_balance(party_type=PARTY_CUSTOMER, party_id=uuid.uuid4(), amount=1)

    def test_customer_id_is_not_a_supplier(self):
        with self.assertRaises(PartyNotFoundError):
            adjust_balance(
                party_type=PARTY_SUPPLIER, party_id=self.customer.pk, amount=1
            )

    def test_unknown_party_type_raises(self):
        with self.assertRaises(BalanceLedgerError):
            adjust_balance(party_type="employee", party_id=self.customer.pk, amount=1)
