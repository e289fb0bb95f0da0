"""DRF exception handler that maps error kinds to HTTP responses."""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError as RequestValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .errors import AppError, ErrorKind, kind_of

logger = logging.getLogger(__name__)


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


def status_from_error(exc: BaseException) -> int:
    """Return the HTTP status for an error, 500 for internal/unknown kinds."""
    return STATUS_BY_KIND.get(kind_of(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


def app_exception_handler(exc, context):
    """
    Render ``AppError`` as ``{"error": message, "code": kind}``.

    Request-body validation failures get the same shape with the per-field
    messages under ``fields``. Everything else goes through DRF's default
    handler first. Exceptions DRF does not know about are logged and answered
    with a generic 500 body.
    """
    if isinstance(exc, AppError):
        status_code = status_from_error(exc)
        if status_code >= 500:
            logger.error("Internal application error", exc_info=exc)
        return Response(
            {'error': exc.message, 'code': exc.kind.value},
            status=status_code,
        )

    if isinstance(exc, RequestValidationError):
        return Response(
            {
                'error': 'invalid request',
                'code': ErrorKind.INVALID_INPUT.value,
                'fields': exc.detail,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get('view')
    logger.error(
        "Unhandled exception in %s",
        view.__class__.__name__ if view is not None else 'unknown view',
        exc_info=exc,
    )
    return Response(
        {'error': 'Internal server error', 'code': ErrorKind.INTERNAL.value},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
