"""
Global exception handler for the Bookwise platform.

This module provides a custom exception handler for DRF that handles
custom exceptions and provides consistent error responses of the form
``{"error": <code>, "message": <text>, "details": <optional>}``.
"""

import logging
from typing import Any, Dict, Optional

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.utils import DatabaseError, IntegrityError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException as DRFAPIException,
    NotAuthenticated,
    NotFound,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from utils.constants import ERROR_MESSAGES

from .custom_exceptions import APIException

logger = logging.getLogger(__name__)


def get_error_code(exception: Exception) -> str:
    """
    Get standardized error code from exception.

    Args:
        exception: The exception to get code for

    Returns:
        str: Standardized error code
    """
    if isinstance(exception, APIException):
        return exception.error_code
    elif isinstance(exception, ValidationError):
        return "validation_error"
    elif isinstance(exception, PermissionDenied):
        return "permission_denied"
    elif isinstance(exception, (Http404, NotFound, ObjectDoesNotExist)):
        return "not_found"
    elif isinstance(exception, NotAuthenticated):
        return "authentication_required"
    elif isinstance(exception, IntegrityError):
        return "integrity_error"
    elif isinstance(exception, DatabaseError):
        return "database_error"
    elif isinstance(exception, DRFAPIException):
        codes = exception.get_codes()
        return codes if isinstance(codes, str) else "api_error"
    return "internal_error"


def get_error_message(exception: Exception, error_code: str) -> str:
    """
    Get the human-readable error message for an exception.

    Args:
        exception: The exception
        error_code: The error code

    Returns:
        str: Error message
    """
    if isinstance(exception, APIException):
        return str(exception.message)

    if hasattr(exception, "detail") and isinstance(exception.detail, str):
        return str(exception.detail)

    if error_code in ERROR_MESSAGES:
        return str(ERROR_MESSAGES[error_code])

    # Never leak internals of unexpected failures
    return str(ERROR_MESSAGES["internal_error"])


def get_error_details(exception: Exception) -> Optional[Any]:
    """
    Get detailed error information from exception.

    Args:
        exception: The exception

    Returns:
        Field-level validation details when available
    """
    if isinstance(exception, APIException):
        return exception.errors

    if (
        isinstance(exception, ValidationError)
        and hasattr(exception, "detail")
        and not isinstance(exception.detail, str)
    ):
        if isinstance(exception.detail, list):
            return {"validation_errors": exception.detail}
        return exception.detail

    return None


def exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """
    Custom exception handler for DRF views.

    Handles both DRF and custom exceptions, providing consistent response format.

    Args:
        exc: The exception
        context: The exception context

    Returns:
        Response: Consistent error response
    """
    # Handle Django ValidationError by converting to DRF ValidationError
    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, "message_dict"):
            exc = ValidationError(detail=exc.message_dict)
        else:
            exc = ValidationError(detail=exc.messages)

    error_code = get_error_code(exc)
    error_message = get_error_message(exc, error_code)
    error_details = get_error_details(exc)
    view_name = context.get("view").__class__.__name__ if context.get("view") else None

    if isinstance(exc, APIException):
        status_code = exc.status_code
    else:
        response = drf_exception_handler(exc, context)
        if response is not None:
            status_code = response.status_code
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if status_code >= 500:
        logger.error(
            f"Exception in {view_name}: {error_code} - {error_message}",
            exc_info=exc,
        )
    else:
        logger.warning(
            f"Exception in {view_name}: {error_code} - {error_message}\n"
            f"Details: {error_details}"
        )

    if isinstance(exc, APIException):
        payload = exc.to_dict()
    else:
        payload = {"error": error_code, "message": error_message}
        if error_details is not None:
            payload["details"] = error_details
    return Response(payload, status=status_code)
