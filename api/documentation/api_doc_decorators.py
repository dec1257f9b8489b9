"""
API Documentation Decorators

This module contains decorators for documenting API endpoints
using drf-yasg (Yet Another Swagger Generator).
"""

import functools
from typing import Any, Dict, List

from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status

from api.documentation.utils import dedupe_manual_parameters


# ----------------------------------------------------------------------
# Endpoint Decorator
# ----------------------------------------------------------------------
def document_api_endpoint(
    summary: str = None,
    description: str = None,
    request_body: Any = None,
    responses: Dict = None,
    tags: List[str] = None,
    query_params: List[Dict] = None,
    operation_id: str = None,
):
    """
    Decorator for documenting API endpoints.

    Args:
        summary: Short summary of what the operation does
        description: Verbose explanation of the operation behavior
        request_body: Request body schema
        responses: Response schemas for different HTTP status codes
        tags: A list of tags for API documentation control
        query_params: List of query parameters with name, description, required, and type
        operation_id: Unique string used to identify the operation

    Returns:
        Decorated function with Swagger documentation
    """
    if responses is None:
        responses = {
            status.HTTP_200_OK: "Success",
            status.HTTP_400_BAD_REQUEST: "Bad Request",
            status.HTTP_404_NOT_FOUND: "Not Found",
            status.HTTP_500_INTERNAL_SERVER_ERROR: "Server Error",
        }

    manual_parameters = []

    # Add query parameters
    if query_params:
        for param in query_params:
            param_type = param.get("type", openapi.TYPE_STRING)
            required = param.get("required", False)
            manual_parameters.append(
                openapi.Parameter(
                    param["name"],
                    openapi.IN_QUERY,
                    description=param.get("description", ""),
                    type=param_type,
                    format=param.get("format"),
                    required=required,
                )
            )

    manual_parameters = dedupe_manual_parameters(manual_parameters)

    def decorator(view_func):
        # Skip decorating classes directly
        if isinstance(view_func, type):
            return view_func

        @functools.wraps(view_func)
        def wrapped_view(*args, **kwargs):
            return view_func(*args, **kwargs)

        decorated_view = swagger_auto_schema(
            operation_summary=summary,
            operation_description=description,
            request_body=request_body,
            responses=responses,
            tags=tags,
            manual_parameters=manual_parameters or None,
            operation_id=operation_id,
        )(wrapped_view)

        return decorated_view

    return decorator
