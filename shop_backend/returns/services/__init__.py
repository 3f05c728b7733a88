from .exceptions import (
    ReturnError,
    ReturnIntegrityError,
    ReturnNotFoundError,
    ReturnStorageError,
    ReturnValidationError,
)
from .return_orchestrator import ReturnResult, create_return
from .return_stats import get_return_stats
from .returnable import get_remaining_quantity, get_returnable_lines

__all__ = [
    "ReturnError",
    "ReturnIntegrityError",
    "ReturnNotFoundError",
    "ReturnStorageError",
    "ReturnValidationError",
    "ReturnResult",
    "create_return",
    "get_return_stats",
    "get_remaining_quantity",
    "get_returnable_lines",
]
