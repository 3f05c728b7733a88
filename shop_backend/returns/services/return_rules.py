# returns/services/return_rules.py

"""
RETURN-TYPE RULES (VARIANT DISPATCH)

Everything that differs between a CUSTOMER return and a SUPPLIER return
lives here, so the orchestrator never branches on the type string:

- document prefix        (CRET / SRET)
- stock sign             (+1 goods come back / -1 goods leave)
- movement + reference   (return_in / return_out)
- party + origin models  (Customer + SalesInvoice / Supplier + ImportInvoice)
- settlement rule        (which refund_type creates a Payment row)

Party balance delta is the same for both types: -total.
"""

from __future__ import annotations

from dataclasses import dataclass

from invoices.models import ImportInvoice, SalesInvoice
from parties.services.balance_ledger import PARTY_CUSTOMER, PARTY_SUPPLIER
from payments.models import Payment
from products.models import StockMovement
from returns.models import RefundType, ReturnType
from returns.services.exceptions import ReturnValidationError


@dataclass(frozen=True)
class SettlementRule:
    payment_type: str
    method: str
    note_template: str

    def note_for(self, return_no: str) -> str:
        return self.note_template.format(return_no=return_no)


@dataclass(frozen=True)
class ReturnRule:
    return_type: str
    prefix: str
    stock_sign: int
    movement_type: str
    reference_type: str
    party_type: str
    invoice_model: type
    invoice_party_field: str
    settlements: dict

    def signed_quantity(self, quantity: int) -> int:
        return self.stock_sign * int(quantity)

    def settlement_for(self, refund_type: str | None) -> SettlementRule | None:
        if refund_type is None:
            return None
        return self.settlements.get(str(refund_type))


RULES: dict[str, ReturnRule] = {
    ReturnType.CUSTOMER.value: ReturnRule(
        return_type=ReturnType.CUSTOMER.value,
        prefix="CRET",
        stock_sign=1,
        movement_type=StockMovement.MovementType.RETURN_IN,
        reference_type=StockMovement.ReferenceType.CUSTOMER_RETURN,
        party_type=PARTY_CUSTOMER,
        invoice_model=SalesInvoice,
        invoice_party_field="customer_id",
        settlements={
            RefundType.CASH.value: SettlementRule(
                payment_type=Payment.Type.CUSTOMER_REFUND,
                method=Payment.Method.CASH,
                note_template="Refund for return {return_no}",
            ),
        },
    ),
    ReturnType.SUPPLIER.value: ReturnRule(
        return_type=ReturnType.SUPPLIER.value,
        prefix="SRET",
        stock_sign=-1,
        movement_type=StockMovement.MovementType.RETURN_OUT,
        reference_type=StockMovement.ReferenceType.SUPPLIER_RETURN,
        party_type=PARTY_SUPPLIER,
        invoice_model=ImportInvoice,
        invoice_party_field="supplier_id",
        settlements={
            RefundType.CREDIT.value: SettlementRule(
                payment_type=Payment.Type.SUPPLIER_CREDIT,
                method=Payment.Method.ADJUSTMENT,
                note_template="Credit for return {return_no}",
            ),
        },
    ),
}


def rule_for(return_type) -> ReturnRule:
    rule = RULES.get(str(return_type or "").strip().lower())
    if rule is None:
        raise ReturnValidationError(
            "Invalid return type. Must be 'customer' or 'supplier'"
        )
    return rule


def stock_sign_for(return_type) -> int:
    return rule_for(return_type).stock_sign


def settlement_rule_for(return_type, refund_type) -> SettlementRule | None:
    return rule_for(return_type).settlement_for(refund_type)
