from .lookups import InvoiceReturnableLinesView, ReturnableInvoicesView, ReturnStatsView
from .returns import ReturnViewSet

__all__ = [
    "ReturnViewSet",
    "ReturnableInvoicesView",
    "InvoiceReturnableLinesView",
    "ReturnStatsView",
]
