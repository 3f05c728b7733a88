# parties/services/balance_ledger.py

"""
PARTY BALANCE LEDGER

One operation: balance += amount, as a single atomic UPDATE.

- No read-modify-write in Python (F() expression), so concurrent
  transactions on the same party cannot lose updates.
- No overdraft or sign validation.
- Runs inside the caller's transaction.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from django.db.models import F

from parties.models import Customer, Supplier

logger = logging.getLogger(__name__)


PARTY_CUSTOMER = "customer"
PARTY_SUPPLIER = "supplier"

PARTY_MODELS = {
    PARTY_CUSTOMER: Customer,
    PARTY_SUPPLIER: Supplier,
}


class BalanceLedgerError(Exception):
    """Base error for party balance ledger failures."""


class PartyNotFoundError(BalanceLedgerError):
    pass


def get_party_model(party_type: str):
    try:
        return PARTY_MODELS[party_type]
    except KeyError as exc:
        raise BalanceLedgerError(f"Unknown party type: {party_type}") from exc


def adjust_balance(*, party_type: str, party_id, amount) -> None:
    """
    Add a signed amount to a customer's or supplier's ledger balance.
    """
    model = get_party_model(party_type)

    try:
        delta = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise BalanceLedgerError("amount must be a valid decimal") from exc

    updated = model.objects.filter(pk=party_id).update(
        ledger_balance=F("ledger_balance") + delta
    )
    if not updated:
        raise PartyNotFoundError(f"{party_type.capitalize()} {party_id} not found")

    logger.debug(
        "Party balance adjusted",
        extra={"party_type": party_type, "party_id": str(party_id), "amount": str(delta)},
    )
