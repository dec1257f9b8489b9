# apps/bookingapp/services/staff_availability_service.py
import logging
from datetime import date
from typing import Optional, Union

from django.conf import settings

from algorithms.availability import aggregate_staff_availability, build_staff_availability
from algorithms.availability.capacity_aggregator import DEFAULT_SUMMARY_BUCKETS
from apps.bookingapp.services.availability_queries import AvailabilityQueries
from apps.bookingapp.services.availability_results import (
    AggregatedAvailabilityResult,
    IndividualAvailabilityResult,
    MultiAvailabilityResult,
)
from apps.bookingapp.services.availability_service import slot_stride_minutes
from apps.bookingapp.utils.date_utils import (
    availability_timezone,
    day_bounds,
    schedule_weekday,
)
from core.exceptions import StaffNotFoundException
from utils.constants import ERROR_MESSAGES

logger = logging.getLogger(__name__)

StaffAvailabilityResult = Union[
    IndividualAvailabilityResult, AggregatedAvailabilityResult, MultiAvailabilityResult
]


class StaffAvailabilityService:
    """
    Staff-aware availability.

    Slots are computed per staff resource: a booking only obstructs the staff
    member it is assigned to, a block obstructs its own resource or, when it
    has none, everyone at the location.
    """

    @classmethod
    def get_staff_availability(
        cls,
        location_id,
        offering_id,
        target_date: date,
        staff_id=None,
        aggregated: bool = False,
        duration_override: Optional[int] = None,
    ) -> StaffAvailabilityResult:
        """
        Calculate staff availability in one of three modes.

        A staff id selects the individual mode; otherwise the aggregated flag
        selects the capacity rollup, and without it every staff member is
        listed side by side.

        Args:
            location_id: ID of the location
            offering_id: ID of the offering
            target_date: Date to check availability for
            staff_id: Optional ID of a specific staff member
            aggregated: Roll all staff up into capacity metrics
            duration_override: Optional custom duration (overrides offering duration)

        Returns:
            Individual, aggregated or multi result

        Raises:
            OfferingNotFoundException, LocationNotFoundException
            StaffNotFoundException: No matching staff in individual or aggregated mode
        """
        offering = AvailabilityQueries.get_offering(offering_id)
        location = AvailabilityQueries.get_location(location_id)

        duration = duration_override or offering.duration_minutes
        tzinfo = availability_timezone(location)

        staff_members = AvailabilityQueries.get_staff_members(location.id, staff_id)
        if not staff_members:
            if aggregated:
                logger.warning(f"No staff members found at location {location.id}")
                raise StaffNotFoundException(ERROR_MESSAGES["no_staff_found"])
            if staff_id:
                logger.warning(f"Staff member {staff_id} not found at location {location.id}")
                raise StaffNotFoundException()
            logger.info(f"Location {location.id} has no staff members")
            return MultiAvailabilityResult(date=target_date.isoformat())

        staff_ids = [staff.id for staff in staff_members]
        day_start, day_end = day_bounds(target_date, tzinfo)

        schedules = AvailabilityQueries.get_schedules(
            location.id, schedule_weekday(target_date), resource_ids=staff_ids
        )
        bookings = AvailabilityQueries.get_bookings(
            location.id, offering.id, day_start, day_end, resource_ids=staff_ids
        )
        blocks = AvailabilityQueries.get_blocks(location.id, day_start, day_end)

        stride = slot_stride_minutes()
        staff_availabilities = [
            build_staff_availability(
                staff.id,
                staff.name,
                target_date,
                [schedule for schedule in schedules if schedule.resource_id == staff.id],
                duration,
                bookings=bookings,
                blocks=blocks,
                stride_minutes=stride,
                tzinfo=tzinfo,
            )
            for staff in staff_members
        ]

        if staff_id:
            return IndividualAvailabilityResult(
                date=target_date.isoformat(), staff_member=staff_availabilities[0]
            )

        if aggregated:
            summary_buckets = getattr(
                settings, "AVAILABILITY_SUMMARY_BUCKETS", DEFAULT_SUMMARY_BUCKETS
            )
            return AggregatedAvailabilityResult(
                aggregated=aggregate_staff_availability(
                    target_date, staff_availabilities, summary_buckets
                ),
                staff_details=staff_availabilities,
            )

        return MultiAvailabilityResult(
            date=target_date.isoformat(), staff_availabilities=staff_availabilities
        )
