"""
Single-resource availability builder.

Composes the slot generator with conflict detection to produce the ordered,
annotated slot list for one resource (or for the location-wide pool) on one
calendar day.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from utils.converters import serialize_uuid, to_iso_instant

from .conflict_detector import Obstruction, is_slot_available
from .slot_generator import DEFAULT_SLOT_STRIDE_MINUTES, generate_schedule_slots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilitySlot:
    """A candidate bookable interval and whether it is free."""

    start_time: datetime
    end_time: datetime
    available: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTime": to_iso_instant(self.start_time),
            "endTime": to_iso_instant(self.end_time),
            "available": self.available,
        }


@dataclass
class StaffAvailability:
    """Slots and utilization metrics for one staff resource."""

    staff_id: str
    staff_name: str
    slots: List[AvailabilitySlot] = field(default_factory=list)

    @property
    def total_slots(self) -> int:
        return len(self.slots)

    @property
    def available_slots(self) -> int:
        return sum(1 for slot in self.slots if slot.available)

    @property
    def utilization_rate(self) -> float:
        return utilization_rate(self.total_slots, self.available_slots)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "staffId": self.staff_id,
            "staffName": self.staff_name,
            "slots": [slot.to_dict() for slot in self.slots],
            "availableSlots": self.available_slots,
            "totalSlots": self.total_slots,
            "utilizationRate": self.utilization_rate,
        }


def utilization_rate(total_slots: int, available_slots: int) -> float:
    """Percentage of slots that are booked or blocked; 0 when there are none."""
    if total_slots <= 0:
        return 0.0
    return (total_slots - available_slots) / total_slots * 100


def build_slots(
    target_date: date,
    schedules: Iterable[Any],
    duration_minutes: int,
    bookings: Iterable[Obstruction] = (),
    blocks: Iterable[Obstruction] = (),
    resource_id: Optional[Any] = None,
    stride_minutes: int = DEFAULT_SLOT_STRIDE_MINUTES,
    tzinfo=None,
) -> List[AvailabilitySlot]:
    """
    Build the annotated slot list for one resource or the location pool.

    Args:
        target_date: Calendar day to compute
        schedules: Schedule rows for that weekday, processed in the given order
        duration_minutes: Requested service duration
        bookings: Booking obstructions
        blocks: Block obstructions
        resource_id: Resource whose scope applies, None for the single pool
        stride_minutes: Distance between consecutive candidate starts
        tzinfo: Zone the schedule wall clock is interpreted in

    Returns:
        Slots in generation order
    """
    bookings = list(bookings)
    blocks = list(blocks)

    slots = []
    for candidate in generate_schedule_slots(
        target_date,
        schedules,
        duration_minutes,
        stride_minutes=stride_minutes,
        tzinfo=tzinfo,
    ):
        slots.append(
            AvailabilitySlot(
                start_time=candidate.start,
                end_time=candidate.end,
                available=is_slot_available(candidate, bookings, blocks, resource_id),
            )
        )
    return slots


def build_staff_availability(
    staff_id: Any,
    staff_name: str,
    target_date: date,
    schedules: Iterable[Any],
    duration_minutes: int,
    bookings: Iterable[Obstruction] = (),
    blocks: Iterable[Obstruction] = (),
    stride_minutes: int = DEFAULT_SLOT_STRIDE_MINUTES,
    tzinfo=None,
) -> StaffAvailability:
    """Build one staff member's availability, scoped to their own obstructions."""
    slots = build_slots(
        target_date,
        schedules,
        duration_minutes,
        bookings=bookings,
        blocks=blocks,
        resource_id=staff_id,
        stride_minutes=stride_minutes,
        tzinfo=tzinfo,
    )
    if not slots:
        logger.debug(f"No slots for staff {staff_id} on {target_date}")
    return StaffAvailability(
        staff_id=serialize_uuid(staff_id), staff_name=staff_name, slots=slots
    )
