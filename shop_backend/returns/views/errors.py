# returns/views/errors.py

from rest_framework import status
from rest_framework.response import Response

from returns.services.exceptions import ReturnError


# ======================================================
# API ERROR NORMALIZATION
# ======================================================

ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INTEGRITY_ERROR": status.HTTP_409_CONFLICT,
    "STORAGE_ERROR": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(*, code: str, message: str, http_status: int):
    """
    Canonical API error response.
    """
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


def return_error_response(exc: ReturnError):
    return error_response(
        code=exc.code,
        message=str(exc),
        http_status=ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST),
    )
