# apps/bookingapp/services/availability_service.py
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from django.conf import settings

from algorithms.availability import AvailabilitySlot, build_slots
from algorithms.availability.slot_analysis import (
    availability_summary,
    find_consecutive_available_slots,
    next_available_slot,
    peak_available_hours,
    suggest_best_times,
)
from algorithms.availability.slot_generator import DEFAULT_SLOT_STRIDE_MINUTES
from apps.bookingapp.services.availability_queries import AvailabilityQueries
from apps.bookingapp.utils.date_utils import (
    availability_timezone,
    day_bounds,
    schedule_weekday,
)

logger = logging.getLogger(__name__)


def slot_stride_minutes() -> int:
    return getattr(settings, "AVAILABILITY_SLOT_STRIDE_MINUTES", DEFAULT_SLOT_STRIDE_MINUTES)


class AvailabilityService:
    """
    Location-wide availability without a staff dimension.

    All schedules, bookings and blocks of the location form a single pool:
    every fetched booking or block obstructs every slot it overlaps.
    """

    @classmethod
    def get_available_slots(
        cls,
        location_id,
        offering_id,
        target_date: date,
        duration_override: Optional[int] = None,
    ) -> List[AvailabilitySlot]:
        """
        Calculate the annotated slot list for a location and offering on a date.

        Args:
            location_id: ID of the location
            offering_id: ID of the offering
            target_date: Date to check availability for
            duration_override: Optional custom duration (overrides offering duration)

        Returns:
            Slots in schedule-row order, each flagged available or not
        """
        slots, _ = cls._compute_slots(location_id, offering_id, target_date, duration_override)
        return slots

    @classmethod
    def get_availability_summary(
        cls,
        location_id,
        offering_id,
        target_date: date,
        duration_override: Optional[int] = None,
        min_consecutive: int = 2,
        day_part: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Summarize a day's availability for quick booking decisions.

        Returns:
            Dict with the slot summary, the next available slot, runs of
            back-to-back free slots, suggested times and the best hours
        """
        slots, tzinfo = cls._compute_slots(
            location_id, offering_id, target_date, duration_override
        )

        next_slot = next_available_slot(slots)
        return {
            "summary": availability_summary(slots),
            "nextAvailable": next_slot.to_dict() if next_slot else None,
            "consecutive": [
                [slot.to_dict() for slot in run]
                for run in find_consecutive_available_slots(slots, min_consecutive)
            ],
            "suggestions": [
                slot.to_dict()
                for slot in suggest_best_times(slots, preferred_day_part=day_part, tzinfo=tzinfo)
            ],
            "peakAvailableHours": peak_available_hours(slots, tzinfo=tzinfo),
        }

    @classmethod
    def _compute_slots(
        cls,
        location_id,
        offering_id,
        target_date: date,
        duration_override: Optional[int],
    ) -> Tuple[List[AvailabilitySlot], Any]:
        offering = AvailabilityQueries.get_offering(offering_id)
        location = AvailabilityQueries.get_location(location_id)

        duration = duration_override or offering.duration_minutes
        tzinfo = availability_timezone(location)

        schedules = AvailabilityQueries.get_schedules(location.id, schedule_weekday(target_date))
        if not schedules:
            logger.info(f"Location {location.name} has no schedules on {target_date}")
            return [], tzinfo

        day_start, day_end = day_bounds(target_date, tzinfo)
        bookings = AvailabilityQueries.get_bookings(location.id, offering.id, day_start, day_end)
        blocks = AvailabilityQueries.get_blocks(location.id, day_start, day_end)

        slots = build_slots(
            target_date,
            schedules,
            duration,
            bookings=bookings,
            blocks=blocks,
            stride_minutes=slot_stride_minutes(),
            tzinfo=tzinfo,
        )
        logger.debug(
            f"Computed {len(slots)} slots for location {location.id} on {target_date} "
            f"({len(bookings)} bookings, {len(blocks)} blocks)"
        )
        return slots, tzinfo
