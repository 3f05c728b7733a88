from .party import CustomerViewSet, SupplierViewSet

__all__ = [
    "CustomerViewSet",
    "SupplierViewSet",
]
