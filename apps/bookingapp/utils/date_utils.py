# apps/bookingapp/utils/date_utils.py
from datetime import datetime, time

from django.conf import settings
from django.utils import timezone


def schedule_weekday(date):
    """
    Convert a date to the schedule weekday numbering

    Args:
        date: Date to convert

    Returns:
        Weekday number where 0 is Sunday and 6 is Saturday
    """
    # Python's weekday() is 0 = Monday, 6 = Sunday
    return (date.weekday() + 1) % 7


def availability_timezone(location):
    """
    Get the time zone that schedule wall-clock times are read in

    Uses the server's configured TIME_ZONE unless
    AVAILABILITY_USE_LOCATION_TIMEZONE is enabled, in which case the
    location's own IANA zone is used.

    Args:
        location: Location the availability is computed for

    Returns:
        tzinfo object
    """
    if getattr(settings, "AVAILABILITY_USE_LOCATION_TIMEZONE", False) and location.timezone:
        return location.get_zoneinfo()
    return timezone.get_default_timezone()


def day_bounds(date, tzinfo):
    """
    Get the first and last instant of a calendar day

    Args:
        date: Calendar day
        tzinfo: Zone the day is measured in

    Returns:
        Tuple of aware datetimes (start_of_day, end_of_day)
    """
    start_of_day = datetime.combine(date, time.min).replace(tzinfo=tzinfo)
    end_of_day = datetime.combine(date, time.max).replace(tzinfo=tzinfo)
    return start_of_day, end_of_day

