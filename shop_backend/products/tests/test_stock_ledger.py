# products/tests/test_stock_ledger.py

from __future__ import annotations

import uuid

from django.core.exceptions import ValidationError
from django.test import TestCase, override_settings

from products.models import Product, ProductBatch, StockMovement
from products.services.stock_ledger import (
    BatchNotFoundError,
    InsufficientStockError,
    ProductNotFoundError,
    StockLedgerError,
    apply_stock_delta,
)


class StockLedgerTests(TestCase):
    """
    Stock ledger tests.

    GUARANTEES:
    - Product and batch move in lockstep
    - Exactly one movement per call, unsigned quantity
    - Missing product / batch is reported, nothing is written
    """

    def setUp(self):
        self.product = Product.objects.create(name="Paracetamol 500mg", current_stock=10)
        self.batch = ProductBatch.objects.create(
            product=self.product, batch_number="BATCH-001", quantity=10
        )

    def _reload(self):
        self.product.refresh_from_db()
        self.batch.refresh_from_db()

    def test_inbound_delta_updates_product_and_batch(self):
        movement = apply_stock_delta(
            product_id=self.product.pk,
            batch_id=self.batch.pk,
            quantity=3,
            movement_type=StockMovement.MovementType.RETURN_IN,
            reference_type=StockMovement.ReferenceType.CUSTOMER_RETURN,
            reference_id=uuid.uuid4(),
        )

        self._reload()
        self.assertEqual(self.product.current_stock, 13)
        self.assertEqual(self.batch.quantity, 13)
        self.assertEqual(movement.quantity, 3)
        self.assertEqual(movement.signed_quantity, 3)
        self.assertEqual(StockMovement.objects.count(), 1)

    def test_outbound_delta_records_unsigned_quantity(self):
        movement = apply_stock_delta(
            product_id=self.product.pk,
            batch_id=self.batch.pk,
            quantity=-4,
            movement_type=StockMovement.MovementType.RETURN_OUT,
        )

        self._reload()
        self.assertEqual(self.product.current_stock, 6)
        self.assertEqual(self.batch.quantity, 6)
        self.assertEqual(movement.quantity, 4)
        self.assertEqual(movement.signed_quantity, -4)

    def test_delta_without_batch_only_touches_product(self):
        apply_stock_delta(
            product_id=self.product.pk,
            quantity=2,
            movement_type=StockMovement.MovementType.RETURN_IN,
        )

        self._reload()
        self.assertEqual(self.product.current_stock, 12)
        self.assertEqual(self.batch.quantity, 10)
        self.assertIsNone(StockMovement.objects.get().batch_id)

    def test_no_idempotency_applies_twice(self):
        for _ in range(2):
            apply_stock_delta(
                product_id=self.product.pk,
                quantity=1,
                movement_type=StockMovement.MovementType.RETURN_IN,
            )

        self._reload()
        self.assertEqual(self.product.current_stock, 12)
        self.assertEqual(StockMovement.objects.count(), 2)

    def test_zero_quantity_rejected(self):
        with self.assertRaises(StockLedgerError):
            apply_stock_delta(
                product_id=self.product.pk,
                quantity=0,
                movement_type=StockMovement.MovementType.RETURN_IN,
            )
        self.assertEqual(StockMovement.objects.count(), 0)

    def test_unknown_product_raises(self):
        with self.assertRaises(ProductNotFoundError):
            apply_stock_delta(
                product_id=uuid.uuid4(),
                quantity=1,
                movement_type=StockMovement.MovementType.RETURN_IN,
            )
        self.assertEqual(StockMovement.objects.count(), 0)

    def test_batch_of_other_product_is_not_found(self):
        other = Product.objects.create(name="Ibuprofen 200mg")

        with self.assertRaises(BatchNotFoundError):
            apply_stock_delta(
                product_id=other.pk,
                batch_id=self.batch.pk,
                quantity=1,
                movement_type=StockMovement.MovementType.RETURN_IN,
            )

    def test_negative_stock_allowed_by_default(self):
        apply_stock_delta(
            product_id=self.product.pk,
            batch_id=self.batch.pk,
            quantity=-15,
            movement_type=StockMovement.MovementType.RETURN_OUT,
        )

        self._reload()
        self.assertEqual(self.product.current_stock, -5)
        self.assertEqual(self.batch.quantity, -5)

    @override_settings(ALLOW_NEGATIVE_STOCK=False)
    def test_negative_stock_forbidden_when_disabled(self):
        with self.assertRaises(InsufficientStockError):
            apply_stock_delta(
                product_id=self.product.pk,
                quantity=-11,
                movement_type=StockMovement.MovementType.RETURN_OUT,
            )

        self._reload()
        self.assertEqual(self.product.current_stock, 10)
        self.assertEqual(StockMovement.objects.count(), 0)


class StockMovementImmutabilityTests(TestCase):
    def setUp(self):
        self.product = Product.objects.create(name="Amoxicillin 250mg")
        self.movement = apply_stock_delta(
            product_id=self.product.pk,
            quantity=5,
            movement_type=StockMovement.MovementType.RETURN_IN,
        )

    def test_movement_cannot_be_updated(self):
        self.movement.quantity = 7
        with self.assertRaises(ValidationError):
            self.movement.save()

    def test_movement_cannot_be_deleted(self):
        with self.assertRaises(ValidationError):
            self.movement.delete()
