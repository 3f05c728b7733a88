from .stock_ledger import (
    BatchNotFoundError,
    InsufficientStockError,
    ProductNotFoundError,
    StockLedgerError,
    apply_stock_delta,
)

__all__ = [
    "apply_stock_delta",
    "StockLedgerError",
    "ProductNotFoundError",
    "BatchNotFoundError",
    "InsufficientStockError",
]
