import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

# Backend wording for unique violations: SQLite, PostgreSQL, MySQL.
UNIQUE_VIOLATION_MARKERS = ("unique constraint", "duplicate key", "duplicate entry")


class ConflictError(APIException):
    """A unique field (email, username, tag name, attachment id) already exists."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Resource already exists."
    default_code = "conflict"


def is_unique_violation(exc):
    message = str(exc).lower()
    return any(marker in message for marker in UNIQUE_VIOLATION_MARKERS)


def api_exception_handler(exc, context):
    if isinstance(exc, IntegrityError) and is_unique_violation(exc):
        logger.warning("Unique constraint violation translated to conflict: %s", exc)
        exc = ConflictError()

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view else "unknown view",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return Response(
            {"detail": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if not (isinstance(response.data, dict) and "detail" in response.data):
        response.data = {"detail": "Validation failed.", "errors": response.data}
    return response
