# returns/services/returnable.py

"""
RETURNABLE-QUANTITY CALCULATOR (READ-ONLY)

For a finalized originating invoice, computes per line:

    returnable = ordered quantity - quantity already returned

Grouping:
- Lines are identified by LineKey(product_id, batch_id).
- A line without a batch is its own key: None == None, and None never
  equals a concrete batch.
- Invoice lines sharing a key are summed; prior ReturnItems of the same
  invoice and return type are summed per key.

Zero remaining is legal. Negative remaining means earlier data broke the
ceiling invariant and is raised, never clamped.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import NamedTuple

from django.db.models import Sum

from returns.models import ReturnItem
from returns.services.exceptions import ReturnIntegrityError, ReturnNotFoundError
from returns.services.return_rules import rule_for


class LineKey(NamedTuple):
    product_id: object
    batch_id: object | None

    @classmethod
    def of(cls, product_id, batch_id=None) -> "LineKey":
        return cls(str(product_id), str(batch_id) if batch_id else None)


@dataclass(frozen=True)
class ReturnableLine:
    key: LineKey
    product_id: object
    product_name: str
    batch_id: object | None
    batch_number: str | None
    expiry_date: date | None
    unit_price: Decimal
    ordered_quantity: int
    already_returned: int
    returnable_quantity: int

    def as_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "batch_id": self.batch_id,
            "batch_number": self.batch_number,
            "expiry_date": self.expiry_date,
            "unit_price": self.unit_price,
            "ordered_quantity": self.ordered_quantity,
            "already_returned": self.already_returned,
            "returnable_quantity": self.returnable_quantity,
        }


def get_finalized_invoice(*, return_type, invoice_id, party_id=None, lock=False):
    """
    Load a finalized originating invoice for the given return type.

    lock=True takes a row lock (caller must be inside transaction.atomic()).
    """
    rule = rule_for(return_type)
    qs = rule.invoice_model.objects.filter(
        pk=invoice_id, status=rule.invoice_model.STATUS_FINALIZED
    )
    if party_id is not None:
        qs = qs.filter(**{rule.invoice_party_field: party_id})
    if lock:
        qs = qs.select_for_update()

    invoice = qs.first()
    if invoice is None:
        raise ReturnNotFoundError("Invoice not found or not finalized")
    return invoice


def already_returned_by_key(*, return_type, invoice_id) -> dict[LineKey, int]:
    rows = (
        ReturnItem.objects.filter(
            return_record__return_type=str(return_type),
            return_record__invoice_id=invoice_id,
        )
        .values("product_id", "batch_id")
        .annotate(total=Sum("quantity"))
    )

    returned: dict[LineKey, int] = defaultdict(int)
    for row in rows:
        returned[LineKey.of(row["product_id"], row["batch_id"])] += int(
            row["total"] or 0
        )
    return returned


def _returnable_lines_for_invoice(*, return_type, invoice) -> list[ReturnableLine]:
    items = invoice.items.select_related("product", "batch").order_by("product__name")
    returned = already_returned_by_key(return_type=return_type, invoice_id=invoice.pk)

    ordered: dict[LineKey, int] = {}
    first_line = {}
    for item in items:
        key = LineKey.of(item.product_id, item.batch_id)
        ordered[key] = ordered.get(key, 0) + int(item.quantity)
        first_line.setdefault(key, item)

    lines: list[ReturnableLine] = []
    for key, ordered_qty in ordered.items():
        item = first_line[key]
        already = returned.get(key, 0)
        remaining = ordered_qty - already

        if remaining < 0:
            raise ReturnIntegrityError(
                f"Returned quantity exceeds ordered quantity for product "
                f"{item.product_id} (batch {item.batch_id}) on invoice {invoice.pk}: "
                f"ordered {ordered_qty}, returned {already}"
            )

        batch = item.batch
        lines.append(
            ReturnableLine(
                key=key,
                product_id=item.product_id,
                product_name=item.product.name,
                batch_id=item.batch_id,
                batch_number=batch.batch_number if batch else None,
                expiry_date=batch.expiry_date if batch else None,
                unit_price=item.unit_price,
                ordered_quantity=ordered_qty,
                already_returned=already,
                returnable_quantity=remaining,
            )
        )

    return lines


def get_returnable_lines(*, return_type, invoice_id) -> list[ReturnableLine]:
    invoice = get_finalized_invoice(return_type=return_type, invoice_id=invoice_id)
    return _returnable_lines_for_invoice(return_type=return_type, invoice=invoice)


def remaining_by_key(*, return_type, invoice) -> dict[LineKey, int]:
    lines = _returnable_lines_for_invoice(return_type=return_type, invoice=invoice)
    return {line.key: line.returnable_quantity for line in lines}


def get_remaining_quantity(*, return_type, invoice_id, product_id, batch_id=None) -> int:
    """
    Remaining returnable quantity for one (product, batch) line of an invoice.
    A key that is not on the invoice has nothing to return (0).
    """
    invoice = get_finalized_invoice(return_type=return_type, invoice_id=invoice_id)
    remaining = remaining_by_key(return_type=return_type, invoice=invoice)
    return remaining.get(LineKey.of(product_id, batch_id), 0)
