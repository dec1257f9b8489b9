"""
Custom exceptions for the Bookwise platform.

This module defines a hierarchy of custom exceptions used across the platform
to provide consistent error handling and reporting.
"""

from django.utils.translation import gettext_lazy as _
from rest_framework import status


class APIException(Exception):
    """Base exception for all API-related exceptions."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = _("An unexpected error occurred.")
    error_code = "internal_error"

    def __init__(self, message=None, status_code=None, errors=None):
        self.message = message or self.default_message
        if status_code:
            self.status_code = status_code
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self):
        """Convert exception to the API error payload."""
        error_dict = {
            "error": self.error_code,
            "message": str(self.message),
        }

        if self.errors:
            error_dict["details"] = self.errors

        return error_dict


class ResourceNotFoundException(APIException):
    """Exception raised when a requested entity is not found."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = _("The requested resource was not found.")
    error_code = "not_found"


class OfferingNotFoundException(ResourceNotFoundException):
    """Exception raised when the requested offering does not exist."""

    default_message = _("Offering not found")
    error_code = "offering_not_found"


class LocationNotFoundException(ResourceNotFoundException):
    """Exception raised when the requested location does not exist."""

    default_message = _("Location not found")
    error_code = "location_not_found"


class StaffNotFoundException(ResourceNotFoundException):
    """Exception raised when no matching staff member exists at the location."""

    default_message = _("Staff member not found")
    error_code = "staff_not_found"


class AvailabilityComputationException(APIException):
    """Exception raised when the store fails while availability is computed.

    The computation is aborted as a whole; no partial availability is ever
    returned.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = _("Internal server error")
    error_code = "internal_error"
