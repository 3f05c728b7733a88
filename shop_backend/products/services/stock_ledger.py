# products/services/stock_ledger.py

"""
STOCK LEDGER SERVICE

Purpose:
- Apply signed stock deltas to Product.current_stock and (optionally)
  ProductBatch.quantity in lockstep.
- Append exactly one immutable StockMovement per call.

Rules:
- Increments are atomic F() expressions (no read-then-overwrite),
  so concurrent transactions touching the same product never lose updates.
- Sign convention: inbound (customer return) is positive,
  outbound (supplier return) is negative.
- The movement stores the UNSIGNED quantity.
- No idempotency: calling twice applies twice.

Negative stock:
- Allowed by default (settings.ALLOW_NEGATIVE_STOCK = True).
- When disabled, outbound deltas use a conditional update and raise
  InsufficientStockError if the row would go below zero.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.db.models import F

from products.models import Product, ProductBatch, StockMovement

logger = logging.getLogger(__name__)


class StockLedgerError(Exception):
    """Base error for stock ledger failures."""


class ProductNotFoundError(StockLedgerError):
    pass


class BatchNotFoundError(StockLedgerError):
    pass


class InsufficientStockError(StockLedgerError):
    pass


def negative_stock_allowed() -> bool:
    return bool(getattr(settings, "ALLOW_NEGATIVE_STOCK", True))


def _to_int_quantity(value) -> int:
    if isinstance(value, bool):
        # bool is an int subclass
        raise StockLedgerError("quantity must be an integer")
    try:
        qty = int(value)
    except (TypeError, ValueError) as exc:
        raise StockLedgerError("quantity must be an integer") from exc
    if qty == 0:
        raise StockLedgerError("quantity cannot be 0")
    return qty


def _increment(*, queryset, field: str, delta: int, allow_negative: bool) -> int:
    if delta < 0 and not allow_negative:
        queryset = queryset.filter(**{f"{field}__gte": -delta})
    return queryset.update(**{field: F(field) + delta})


def apply_stock_delta(
    *,
    product_id,
    quantity,
    movement_type: str,
    batch_id=None,
    reference_type: str = "",
    reference_id=None,
) -> StockMovement:
    """
    Add a signed quantity to a product (and batch) and record the movement.

    Must run inside the caller's transaction; the caller owns atomicity.
    """
    delta = _to_int_quantity(quantity)
    allow_negative = negative_stock_allowed()

    updated = _increment(
        queryset=Product.objects.filter(pk=product_id),
        field="current_stock",
        delta=delta,
        allow_negative=allow_negative,
    )
    if not updated:
        if not Product.objects.filter(pk=product_id).exists():
            raise ProductNotFoundError(f"Product {product_id} not found")
        raise InsufficientStockError(
            f"Insufficient stock for product {product_id}: requested OUT {abs(delta)}"
        )

    if batch_id:
        updated = _increment(
            queryset=ProductBatch.objects.filter(pk=batch_id, product_id=product_id),
            field="quantity",
            delta=delta,
            allow_negative=allow_negative,
        )
        if not updated:
            if not ProductBatch.objects.filter(
                pk=batch_id, product_id=product_id
            ).exists():
                raise BatchNotFoundError(
                    f"Batch {batch_id} not found for product {product_id}"
                )
            raise InsufficientStockError(
                f"Insufficient stock in batch {batch_id}: requested OUT {abs(delta)}"
            )

    movement = StockMovement.objects.create(
        product_id=product_id,
        batch_id=batch_id or None,
        quantity=abs(delta),
        movement_type=movement_type,
        reference_type=reference_type or "",
        reference_id=reference_id,
    )

    logger.debug(
        "Stock delta applied",
        extra={
            "product_id": str(product_id),
            "batch_id": str(batch_id) if batch_id else None,
            "delta": delta,
            "movement_type": movement_type,
            "reference_id": str(reference_id) if reference_id else None,
        },
    )

    return movement
