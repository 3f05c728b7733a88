# returns/services/return_orchestrator.py

"""
======================================================
PATH: returns/services/return_orchestrator.py
======================================================
RETURN ORCHESTRATOR (APPLICATION SERVICE)

Purpose:
- Create a CUSTOMER or SUPPLIER return against a finalized invoice,
  atomically, in ONE unit of work:

    1) total = Σ quantity × unit_price          (Decimal-exact, once)
    2) lock + load the originating invoice, party, products and batches
       (and enforce returnable ceilings when enabled)
    3) allocate the document number             (CRET-/SRET-, per type)
    4) insert the Return header                 (status "completed")
    5) per line: insert ReturnItem + stock ledger delta (+ for customer, - for supplier)
    6) party balance ledger: -total            (for BOTH types)
    7) settlement Payment row when the rule for (type, refund_type) says so

- Any failure in any step rolls back everything: no orphan number,
  no stock change, no balance change.

Validation happens BEFORE the transaction opens; a rejected request
performs zero writes.

Not provided here:
- voiding / reversing a committed return (a new opposite transaction would be
  required; none exists yet)
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction

from parties.services.balance_ledger import (
    BalanceLedgerError,
    PartyNotFoundError,
    adjust_balance,
    get_party_model,
)
from payments.models import Payment
from products.models import Product, ProductBatch
from products.services.stock_ledger import (
    BatchNotFoundError,
    InsufficientStockError,
    ProductNotFoundError,
    StockLedgerError,
    apply_stock_delta,
)
from returns.models import RefundType, Return, ReturnItem
from returns.services.exceptions import (
    ReturnError,
    ReturnIntegrityError,
    ReturnNotFoundError,
    ReturnStorageError,
    ReturnValidationError,
)
from returns.services.numbering import allocate_document_number
from returns.services.return_rules import ReturnRule, rule_for
from returns.services.returnable import (
    LineKey,
    get_finalized_invoice,
    remaining_by_key,
)

logger = logging.getLogger(__name__)

REFUND_TYPES = {choice.value for choice in RefundType}
CENT = Decimal("0.01")
# ReturnItem.unit_price is DecimalField(max_digits=10, decimal_places=2)
MAX_UNIT_PRICE = Decimal("99999999.99")


# ============================================================
# REQUEST NORMALIZATION
# ============================================================


@dataclass(frozen=True)
class ReturnLine:
    product_id: uuid.UUID
    batch_id: uuid.UUID | None
    quantity: int
    unit_price: Decimal

    @property
    def key(self) -> LineKey:
        return LineKey.of(self.product_id, self.batch_id)

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class ReturnResult:
    return_record: Return
    return_no: str
    items: list


def _to_uuid(value, *, field: str) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except (TypeError, ValueError, AttributeError) as exc:
        raise ReturnValidationError(f"{field} must be a valid id") from exc


def _to_positive_int(value, *, field: str) -> int:
    if isinstance(value, bool):
        raise ReturnValidationError(f"{field} must be an integer")
    if isinstance(value, Decimal) and value != value.to_integral_value():
        raise ReturnValidationError(f"{field} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ReturnValidationError(f"{field} must be an integer")
    try:
        qty = int(value)
    except (TypeError, ValueError) as exc:
        raise ReturnValidationError(f"{field} must be an integer") from exc
    if qty <= 0:
        raise ReturnValidationError(f"{field} must be an integer >= 1")
    return qty


def _to_price(value, *, field: str) -> Decimal:
    if value is None or isinstance(value, bool):
        raise ReturnValidationError(f"{field} is required")
    try:
        price = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ReturnValidationError(f"{field} must be a valid decimal") from exc
    if not price.is_finite() or price < Decimal("0"):
        raise ReturnValidationError(f"{field} cannot be negative")
    if price > MAX_UNIT_PRICE:
        raise ReturnValidationError(f"{field} cannot exceed {MAX_UNIT_PRICE}")
    if price != price.quantize(CENT):
        raise ReturnValidationError(f"{field} cannot have more than 2 decimal places")
    return price.quantize(CENT)


def _normalize_lines(items) -> list[ReturnLine]:
    if not isinstance(items, (list, tuple)) or not items:
        raise ReturnValidationError("At least one item is required for return")

    lines: list[ReturnLine] = []
    for index, raw in enumerate(items):
        if not isinstance(raw, dict):
            raise ReturnValidationError("Return items must be objects")

        prefix = f"items[{index}]"
        if not raw.get("product_id"):
            raise ReturnValidationError(f"{prefix}.product_id is required")

        batch_raw = raw.get("batch_id")
        lines.append(
            ReturnLine(
                product_id=_to_uuid(raw.get("product_id"), field=f"{prefix}.product_id"),
                batch_id=(
                    _to_uuid(batch_raw, field=f"{prefix}.batch_id") if batch_raw else None
                ),
                quantity=_to_positive_int(raw.get("quantity"), field=f"{prefix}.quantity"),
                unit_price=_to_price(raw.get("unit_price"), field=f"{prefix}.unit_price"),
            )
        )
    return lines


def _normalize_refund_type(refund_type) -> str | None:
    if refund_type in (None, ""):
        return None
    value = str(refund_type).strip().lower()
    if value not in REFUND_TYPES:
        raise ReturnValidationError(
            f"Invalid refund type '{refund_type}'. "
            f"Must be one of: {', '.join(sorted(REFUND_TYPES))}"
        )
    return value


def _clean_text(value) -> str | None:
    text = (str(value) if value is not None else "").strip()
    return text or None


def compute_total(lines: list[ReturnLine]) -> Decimal:
    total = Decimal("0")
    for line in lines:
        total += line.total_price
    return total


# ============================================================
# STEPS (inside the transaction)
# ============================================================


def returnable_ceiling_enforced() -> bool:
    return bool(getattr(settings, "RETURNS_ENFORCE_RETURNABLE_QUANTITY", True))


def _ensure_returnable(*, rule: ReturnRule, invoice, lines: list[ReturnLine]):
    """
    Requested quantities, aggregated per (product, batch), must not exceed
    what is still returnable on the invoice.
    """
    requested: dict[LineKey, int] = defaultdict(int)
    for line in lines:
        requested[line.key] += line.quantity

    remaining = remaining_by_key(return_type=rule.return_type, invoice=invoice)

    for key, qty in requested.items():
        available = remaining.get(key, 0)
        if qty > available:
            raise ReturnValidationError(
                f"Over-return detected for product {key.product_id} "
                f"(batch {key.batch_id or 'none'}). "
                f"Remaining returnable qty: {available}, requested: {qty}"
            )


def _ensure_lines_exist(lines: list[ReturnLine]):
    """Every product must exist and every batch must belong to its line's product."""
    product_ids = {line.product_id for line in lines}
    found = set(
        Product.objects.filter(pk__in=product_ids).values_list("pk", flat=True)
    )
    for product_id in product_ids - found:
        raise ReturnNotFoundError(f"Product {product_id} not found")

    batch_ids = {line.batch_id for line in lines if line.batch_id is not None}
    batch_owner = dict(
        ProductBatch.objects.filter(pk__in=batch_ids).values_list("pk", "product_id")
    )
    for line in lines:
        if line.batch_id is None:
            continue
        if batch_owner.get(line.batch_id) != line.product_id:
            raise ReturnNotFoundError(
                f"Batch {line.batch_id} not found for product {line.product_id}"
            )


def _ensure_party_exists(*, rule: ReturnRule, party_id):
    model = get_party_model(rule.party_type)
    if not model.objects.filter(pk=party_id).exists():
        raise ReturnNotFoundError(
            f"{rule.party_type.capitalize()} {party_id} not found"
        )


def _last_issued_number(return_type: str):
    def lookup():
        return (
            Return.objects.filter(return_type=return_type)
            .order_by("-created_at")
            .values_list("return_no", flat=True)
            .first()
        )

    return lookup


def _record_settlement(*, rule: ReturnRule, refund_type, return_record: Return):
    settlement = rule.settlement_for(refund_type)
    if settlement is None:
        return None

    return Payment.objects.create(
        type=settlement.payment_type,
        reference_id=return_record.pk,
        partner_id=return_record.party_id,
        amount=return_record.total_amount,
        method=settlement.method,
        notes=settlement.note_for(return_record.return_no),
    )


@transaction.atomic
def _apply_return(
    *,
    rule: ReturnRule,
    invoice_id: uuid.UUID,
    party_id: uuid.UUID,
    lines: list[ReturnLine],
    total: Decimal,
    reason: str | None,
    refund_type: str | None,
    notes: str | None,
) -> ReturnResult:
    # Lock the origin so concurrent returns against it are serialized
    invoice = get_finalized_invoice(
        return_type=rule.return_type,
        invoice_id=invoice_id,
        party_id=party_id,
        lock=True,
    )
    _ensure_party_exists(rule=rule, party_id=party_id)
    _ensure_lines_exist(lines)

    if returnable_ceiling_enforced():
        _ensure_returnable(rule=rule, invoice=invoice, lines=lines)

    return_no = allocate_document_number(
        partition=rule.return_type,
        prefix=rule.prefix,
        last_issued=_last_issued_number(rule.return_type),
    )

    return_record = Return.objects.create(
        return_no=return_no,
        return_type=rule.return_type,
        invoice_id=invoice.pk,
        party_id=party_id,
        total_amount=total,
        reason=reason,
        refund_type=refund_type,
        notes=notes,
        status=Return.STATUS_COMPLETED,
    )

    items: list[ReturnItem] = []
    for line in lines:
        items.append(
            ReturnItem.objects.create(
                return_record=return_record,
                product_id=line.product_id,
                batch_id=line.batch_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
                total_price=line.total_price,
            )
        )

        apply_stock_delta(
            product_id=line.product_id,
            batch_id=line.batch_id,
            quantity=rule.signed_quantity(line.quantity),
            movement_type=rule.movement_type,
            reference_type=rule.reference_type,
            reference_id=return_record.pk,
        )

    # A return always reduces what the party owes / is owed
    adjust_balance(party_type=rule.party_type, party_id=party_id, amount=-total)

    _record_settlement(rule=rule, refund_type=refund_type, return_record=return_record)

    return ReturnResult(return_record=return_record, return_no=return_no, items=items)


# ============================================================
# PUBLIC ENTRYPOINT
# ============================================================


def create_return(
    *,
    return_type,
    invoice_id,
    party_id,
    items,
    reason=None,
    refund_type=None,
    notes=None,
) -> ReturnResult:
    """
    Create a customer or supplier return (atomic, all-or-nothing).

    items: [{product_id, quantity, unit_price, batch_id?}, ...]

    Raises:
    - ReturnValidationError : malformed request / over-return / stock floor
    - ReturnNotFoundError   : unknown invoice, party, product or batch
    - ReturnIntegrityError  : corrupt numbering or returnable data
    - ReturnStorageError    : database failure
    """
    # --------------------------------------------------
    # 1. VALIDATE (no writes)
    # --------------------------------------------------
    try:
        rule = rule_for(return_type)
        if not invoice_id:
            raise ReturnValidationError("invoice_id is required")
        if not party_id:
            raise ReturnValidationError("party_id is required")
        invoice_uuid = _to_uuid(invoice_id, field="invoice_id")
        party_uuid = _to_uuid(party_id, field="party_id")
        lines = _normalize_lines(items)
        normalized_refund_type = _normalize_refund_type(refund_type)
    except ReturnValidationError as exc:
        logger.warning(
            "Return request rejected",
            extra={"return_type": str(return_type), "error": str(exc)},
        )
        raise

    total = compute_total(lines)

    logger.info(
        "Creating return",
        extra={
            "return_type": rule.return_type,
            "invoice_id": str(invoice_uuid),
            "party_id": str(party_uuid),
            "lines": len(lines),
            "total_amount": str(total),
        },
    )

    # --------------------------------------------------
    # 2. APPLY (one transaction)
    # --------------------------------------------------
    try:
        result = _apply_return(
            rule=rule,
            invoice_id=invoice_uuid,
            party_id=party_uuid,
            lines=lines,
            total=total,
            reason=_clean_text(reason),
            refund_type=normalized_refund_type,
            notes=_clean_text(notes),
        )
    except ReturnError:
        raise
    except (ProductNotFoundError, BatchNotFoundError, PartyNotFoundError) as exc:
        logger.warning("Return references a missing record", extra={"error": str(exc)})
        raise ReturnNotFoundError(str(exc)) from exc
    except InsufficientStockError as exc:
        logger.warning("Return rejected by stock floor", extra={"error": str(exc)})
        raise ReturnValidationError(str(exc)) from exc
    except (StockLedgerError, BalanceLedgerError, DjangoValidationError) as exc:
        raise ReturnIntegrityError(str(exc)) from exc
    except DatabaseError as exc:
        logger.exception(
            "Storage failure while creating return",
            extra={"return_type": rule.return_type, "invoice_id": str(invoice_uuid)},
        )
        raise ReturnStorageError(f"Failed to persist return: {exc}") from exc

    logger.info(
        "Return created successfully",
        extra={
            "return_id": str(result.return_record.pk),
            "return_no": result.return_no,
            "total_amount": str(total),
        },
    )
    return result
