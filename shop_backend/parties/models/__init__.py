"""
PATH: parties/models/__init__.py
"""

from .party import Customer, Supplier

__all__ = [
    "Customer",
    "Supplier",
]
