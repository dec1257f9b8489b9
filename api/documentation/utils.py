"""
API Documentation Utilities
Common utility functions for working with drf-yasg API documentation.
"""

import logging
from typing import List

from drf_yasg import openapi

logger = logging.getLogger(__name__)


def dedupe_manual_parameters(
    params: List[openapi.Parameter],
) -> List[openapi.Parameter]:
    """
    Remove duplicate openapi.Parameters by (name, in_) tuple.
    This helps avoid the "duplicate Parameters found" error in drf_yasg.

    Args:
        params: List of openapi.Parameter objects

    Returns:
        Deduplicated list of parameters
    """
    if not params:
        return []

    seen = set()
    deduped = []

    for p in params:
        param_name = getattr(p, "name", None)
        param_in = getattr(p, "in_", None)
        key = (param_name, param_in)

        if key not in seen and None not in key:
            deduped.append(p)
            seen.add(key)
        elif key in seen:
            logger.debug(f"Removed duplicate parameter: {key}")

    return deduped
