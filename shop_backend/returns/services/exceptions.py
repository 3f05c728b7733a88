# returns/services/exceptions.py

"""
RETURNS SERVICE ERRORS

Centralized domain errors for the returns core.

Every error aborts the enclosing unit of work; nothing is committed.
`code` is a stable identifier surfaced by the HTTP layer.
"""


class ReturnError(Exception):
    """Base exception for all returns failures."""

    code = "RETURN_FAILED"


class ReturnValidationError(ReturnError):
    """Malformed or missing request fields. Raised before any write."""

    code = "VALIDATION_ERROR"


class ReturnNotFoundError(ReturnError):
    """A referenced product, batch, party or invoice does not exist."""

    code = "NOT_FOUND"


class ReturnStorageError(ReturnError):
    """Underlying persistence failure at any step."""

    code = "STORAGE_ERROR"


class ReturnIntegrityError(ReturnError):
    """Upstream data corruption (unparseable document number, negative remaining)."""

    code = "INTEGRITY_ERROR"
