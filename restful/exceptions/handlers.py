"""Global exception handler for the pageable resource service."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.http import Http404

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from restful.constants import REQUEST_ID_HEADER
from restful.exceptions.pagination_exceptions import InvalidInputError
from restful.logging.context import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Translate exceptions raised by views into HTTP responses.

    DRF formats its own exceptions. Paging input errors become 400 responses
    naming the offending field. Anything else, endpoint wiring errors
    included, becomes a 500 that does not expose internal details.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, InvalidInputError):
            response_data = _create_error_response(
                status_code=status.HTTP_400_BAD_REQUEST,
                message=str(exc),
                request_id=request_id,
            )
            response_data["field"] = exc.field
            response = Response(response_data, status=status.HTTP_400_BAD_REQUEST)
        else:
            response_data = _create_error_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=INTERNAL_ERROR_MESSAGE,
                request_id=request_id,
            )
            response = Response(
                response_data, status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)

    return response


def _create_error_response(
    status_code: int, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response body.

    Args:
        status_code: The HTTP status code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with standard error response format.
    """
    return {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log exception details, as a warning for client errors.

    Stack traces are included only in DEBUG mode.
    """
    if isinstance(exc, InvalidInputError):
        log_level = logging.WARNING
    elif isinstance(exc, (Http404, APIException)) and 400 <= getattr(
        exc, "status_code", 404
    ) < 500:
        log_level = logging.WARNING
    else:
        log_level = logging.ERROR

    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {response.status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
