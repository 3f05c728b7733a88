# payments/tests/test_payments_api.py

from __future__ import annotations

import uuid
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APIClient

from payments.models import Payment

User = get_user_model()


class PaymentTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(username="clerk", password="password123")
        self.client.force_authenticate(user=self.user)
        self.partner = uuid.uuid4()

        self.refund = Payment.objects.create(
            type=Payment.Type.CUSTOMER_REFUND,
            partner_id=self.partner,
            amount=Decimal("20.00"),
        )
        Payment.objects.create(
            type=Payment.Type.SUPPLIER,
            partner_id=uuid.uuid4(),
            amount=Decimal("5.00"),
            method=Payment.Method.BANK,
        )

    def test_filter_by_type_and_partner(self):
        res = self.client.get(
            "/api/payments/",
            {"type": "customer_refund", "partner_id": str(self.partner)},
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["count"], 1)
        self.assertEqual(res.data["results"][0]["id"], str(self.refund.pk))

    def test_payments_are_immutable(self):
        self.refund.amount = Decimal("1.00")
        with self.assertRaises(ValidationError):
            self.refund.save()

    def test_negative_amount_rejected(self):
        with self.assertRaises(ValidationError):
            Payment.objects.create(
                type=Payment.Type.CUSTOMER,
                partner_id=self.partner,
                amount=Decimal("-1.00"),
            )
