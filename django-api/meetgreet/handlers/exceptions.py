"""DRF exception handler mapping domain and framework errors to responses.

Every failure leaves the API as ``{"success": false, "error": ..., "status": ...}``
where ``status`` is ``"fail"`` for client errors and ``"error"`` for server errors.
Server errors never carry internal details.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from meetgreet.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

HTTP_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.CAPACITY_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

SERVER_ERROR_MESSAGE = "Server Error"


def failure(message: str, http_status: int, headers: dict[str, str] | None = None) -> Response:
    body = {
        "success": False,
        "error": message,
        "status": "fail" if http_status < 500 else "error",
    }
    return Response(body, status=http_status, headers=headers)


def _validation_message(detail) -> str:
    if isinstance(detail, dict):
        parts = []
        for field, value in detail.items():
            text = _validation_message(value)
            parts.append(text if field == "non_field_errors" else f"{field}: {text}")
        return ", ".join(parts)
    if isinstance(detail, list):
        return ", ".join(_validation_message(item) for item in detail)
    return str(detail)


def api_exception_handler(exc: Exception, context: dict) -> Response | None:
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else "unknown"

    if isinstance(exc, DomainError):
        http_status = HTTP_STATUS_BY_CODE[exc.code]
        if http_status >= 500:
            logger.error("%s failed: %s", view_name, exc, exc_info=exc)
            return failure(SERVER_ERROR_MESSAGE, http_status)
        return failure(exc.message, http_status)

    if isinstance(exc, exceptions.ValidationError):
        return failure(_validation_message(exc.detail), status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is not None:
        # NotAuthenticated, PermissionDenied, MethodNotAllowed, ParseError ...
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        headers = {
            name: response[name] for name in ("WWW-Authenticate", "Allow") if response.has_header(name)
        }
        return failure(str(detail), response.status_code, headers=headers or None)

    logger.exception("Unhandled error in %s", view_name, exc_info=exc)
    return failure(SERVER_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
