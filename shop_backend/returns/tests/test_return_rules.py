# returns/tests/test_return_rules.py

from django.test import SimpleTestCase

from payments.models import Payment
from returns.models import RefundType, ReturnType
from returns.services.exceptions import ReturnValidationError
from returns.services.return_rules import rule_for, settlement_rule_for, stock_sign_for


class ReturnRuleTests(SimpleTestCase):
    def test_stock_sign_by_type(self):
        self.assertEqual(stock_sign_for(ReturnType.CUSTOMER), 1)
        self.assertEqual(stock_sign_for("supplier"), -1)

    def test_signed_quantity(self):
        self.assertEqual(rule_for("customer").signed_quantity(4), 4)
        self.assertEqual(rule_for("supplier").signed_quantity(4), -4)

    def test_prefixes(self):
        self.assertEqual(rule_for("customer").prefix, "CRET")
        self.assertEqual(rule_for("supplier").prefix, "SRET")

    def test_settlement_matrix(self):
        cases = {
            ("customer", RefundType.CASH): Payment.Type.CUSTOMER_REFUND,
            ("customer", "credit"): None,
            ("customer", None): None,
            ("supplier", "credit"): Payment.Type.SUPPLIER_CREDIT,
            ("supplier", "cash"): None,
            ("supplier", "adjustment"): None,
        }
        for (return_type, refund_type), expected in cases.items():
            with self.subTest(return_type=return_type, refund_type=refund_type):
                rule = settlement_rule_for(return_type, refund_type)
                self.assertEqual(rule.payment_type if rule else None, expected)

    def test_unknown_type_rejected(self):
        with self.assertRaises(ReturnValidationError):
            rule_for("employee")
