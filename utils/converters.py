"""
Data type conversion utilities for Bookwise.

This module provides functions for converting values into the shapes used in
API responses.
"""

import datetime
from typing import Any, Optional

from django.utils import timezone


def to_iso_instant(value: datetime.datetime) -> str:
    """
    Render an instant as a UTC ISO-8601 string with millisecond precision.

    Args:
        value: Datetime to render; naive values are taken to be in the
            current Django time zone

    Returns:
        String like 2025-01-06T09:00:00.000Z
    """
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    value = value.astimezone(datetime.timezone.utc)
    return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"


def serialize_uuid(uuid_obj: Optional[Any]) -> Optional[str]:
    """
    Convert UUID to string.

    Args:
        uuid_obj: UUID object (or anything that renders as one)

    Returns:
        String representation or None
    """
    if uuid_obj is None:
        return None

    return str(uuid_obj)

