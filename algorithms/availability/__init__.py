"""
Availability calculation algorithms.

This package turns working-hour schedules, existing bookings and ad-hoc blocks
into annotated time slots, and rolls those slots up into capacity metrics.

Key components:
- SlotGenerator: Generates fixed-stride candidate slots for a schedule window
- is_slot_available: Decides a slot's availability against obstructions
- build_slots / build_staff_availability: Annotated slots for one resource
- aggregate_staff_availability: Location-wide capacity and utilization rollup
"""

from .availability_builder import (
    AvailabilitySlot,
    StaffAvailability,
    build_slots,
    build_staff_availability,
    utilization_rate,
)
from .capacity_aggregator import AggregatedAvailability, aggregate_staff_availability
from .conflict_detector import Obstruction, TimeRange, is_slot_available
from .slot_generator import SlotGenerator, generate_schedule_slots

__all__ = [
    "AggregatedAvailability",
    "AvailabilitySlot",
    "Obstruction",
    "SlotGenerator",
    "StaffAvailability",
    "TimeRange",
    "aggregate_staff_availability",
    "build_slots",
    "build_staff_availability",
    "generate_schedule_slots",
    "is_slot_available",
    "utilization_rate",
]
