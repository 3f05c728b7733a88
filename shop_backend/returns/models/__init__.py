"""
PATH: returns/models/__init__.py

Returns models export surface.
"""

from .document_sequence import DocumentSequence
from .return_record import RefundType, Return, ReturnItem, ReturnType

__all__ = [
    "DocumentSequence",
    "RefundType",
    "Return",
    "ReturnItem",
    "ReturnType",
]
