from .balance_ledger import (
    PARTY_CUSTOMER,
    PARTY_SUPPLIER,
    BalanceLedgerError,
    PartyNotFoundError,
    adjust_balance,
    get_party_model,
)

__all__ = [
    "PARTY_CUSTOMER",
    "PARTY_SUPPLIER",
    "BalanceLedgerError",
    "PartyNotFoundError",
    "adjust_balance",
    "get_party_model",
]
