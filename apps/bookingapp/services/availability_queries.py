# apps/bookingapp/services/availability_queries.py
import functools
import logging
from datetime import datetime
from typing import Iterable, List, Optional

from django.db import DatabaseError

from algorithms.availability.conflict_detector import Obstruction
from apps.bookingapp.models import Booking
from apps.offeringsapp.models import Offering
from apps.organizationsapp.models import Location
from apps.resourcesapp.models import Block, Resource, Schedule
from core.exceptions import (
    AvailabilityComputationException,
    LocationNotFoundException,
    OfferingNotFoundException,
)

logger = logging.getLogger(__name__)


def store_query(func):
    """
    Turn store failures into an availability computation failure.

    The request is aborted as a whole; callers never see partial data.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as e:
            logger.error(f"Store query {func.__name__} failed: {str(e)}")
            raise AvailabilityComputationException() from e

    return wrapper


class AvailabilityQueries:
    """
    Read-only store access for availability computation.

    Every lookup is a simple predicate query; rows are returned in a stable
    order so repeated computations over unchanged data give identical results.
    """

    @staticmethod
    @store_query
    def get_offering(offering_id) -> Offering:
        offering = Offering.objects.filter(id=offering_id).first()
        if offering is None:
            logger.warning(f"Offering {offering_id} not found")
            raise OfferingNotFoundException()
        return offering

    @staticmethod
    @store_query
    def get_location(location_id) -> Location:
        location = Location.objects.filter(id=location_id).first()
        if location is None:
            logger.warning(f"Location {location_id} not found")
            raise LocationNotFoundException()
        return location

    @staticmethod
    @store_query
    def get_staff_members(location_id, staff_id=None) -> List[Resource]:
        """Active staff resources at the location, optionally narrowed to one id"""
        queryset = Resource.objects.active().staff().filter(location_id=location_id)
        if staff_id:
            queryset = queryset.filter(id=staff_id)
        return list(queryset.order_by("name", "id"))

    @staticmethod
    @store_query
    def get_schedules(
        location_id, day_of_week: int, resource_ids: Optional[Iterable] = None
    ) -> List[Schedule]:
        """Active schedule rows for a weekday (0 = Sunday)"""
        queryset = Schedule.objects.filter(
            location_id=location_id,
            day_of_week=day_of_week,
            is_active=True,
        )
        if resource_ids is not None:
            queryset = queryset.filter(resource_id__in=list(resource_ids))
        return list(queryset.order_by("start_time", "created_at", "id"))

    @staticmethod
    @store_query
    def get_bookings(
        location_id,
        offering_id,
        day_start: datetime,
        day_end: datetime,
        resource_ids: Optional[Iterable] = None,
    ) -> List[Obstruction]:
        """
        Active bookings of the offering lying entirely within the day

        Args:
            location_id: Location the bookings belong to
            offering_id: Offering that was booked
            day_start: First instant of the day
            day_end: Last instant of the day
            resource_ids: Restrict to bookings assigned to these resources

        Returns:
            Booking obstructions
        """
        queryset = Booking.objects.active().filter(
            location_id=location_id,
            offering_id=offering_id,
            start_time__gte=day_start,
            end_time__lte=day_end,
        )
        if resource_ids is not None:
            queryset = queryset.filter(resource_id__in=list(resource_ids))

        rows = queryset.order_by("start_time").values("start_time", "end_time", "resource_id")
        return [Obstruction.from_booking(row) for row in rows]

    @staticmethod
    @store_query
    def get_blocks(location_id, day_start: datetime, day_end: datetime) -> List[Obstruction]:
        """Blocks at the location lying entirely within the day"""
        rows = (
            Block.objects.filter(
                location_id=location_id,
                start_time__gte=day_start,
                end_time__lte=day_end,
            )
            .order_by("start_time")
            .values("start_time", "end_time", "resource_id")
        )
        return [Obstruction.from_block(row) for row in rows]
