"""
Global constants for the Bookwise platform.

This module defines constants used throughout the application, including
format strings and error messages.
"""

# Wire formats
DATE_FORMAT = "%Y-%m-%d"
HOUR_BUCKET_FORMAT = "%Y-%m-%dT%H:00Z"

# Error messages by error code
ERROR_MESSAGES = {
    "validation_error": "Validation error",
    "authentication_required": "Authentication required",
    "permission_denied": "Permission denied",
    "not_found": "Resource not found",
    "offering_not_found": "Offering not found",
    "location_not_found": "Location not found",
    "staff_not_found": "Staff member not found",
    "no_staff_found": "No staff members found",
    "integrity_error": "Data integrity error",
    "database_error": "Database error",
    "method_not_allowed": "Method not allowed",
    "internal_error": "Internal server error",
}
