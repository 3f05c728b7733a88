from .return_command import ReturnCreateCommandSerializer, ReturnItemCommandSerializer
from .return_read import (
    ReturnableInvoiceSerializer,
    ReturnableLineSerializer,
    ReturnItemReadSerializer,
    ReturnReadSerializer,
    ReturnStatsSerializer,
)

__all__ = [
    "ReturnCreateCommandSerializer",
    "ReturnItemCommandSerializer",
    "ReturnReadSerializer",
    "ReturnItemReadSerializer",
    "ReturnableInvoiceSerializer",
    "ReturnableLineSerializer",
    "ReturnStatsSerializer",
]
