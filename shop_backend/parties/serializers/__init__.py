from .party import CustomerLedgerRowSerializer, SupplierLedgerRowSerializer

__all__ = [
    "CustomerLedgerRowSerializer",
    "SupplierLedgerRowSerializer",
]
