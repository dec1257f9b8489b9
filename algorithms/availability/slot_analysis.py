"""
Helpers for reading a computed slot list.

Used by the availability summary endpoint to pick the next free slot, find
back-to-back runs for longer visits and suggest convenient times. Hours are
read in the wall clock of the zone passed in (UTC when none is given).
"""

from collections import OrderedDict
from datetime import datetime, timezone as dt_timezone
from typing import Dict, Iterable, List, Optional, Sequence

from .availability_builder import AvailabilitySlot

DAY_PARTS = {
    "morning": range(6, 12),
    "afternoon": range(12, 18),
    "evening": range(18, 23),
}


def _local_hour(instant: datetime, tzinfo=None) -> int:
    return instant.astimezone(tzinfo or dt_timezone.utc).hour


def filter_available_slots(slots: Iterable[AvailabilitySlot]) -> List[AvailabilitySlot]:
    return [slot for slot in slots if slot.available]


def next_available_slot(slots: Iterable[AvailabilitySlot]) -> Optional[AvailabilitySlot]:
    """First available slot in list order, or None."""
    for slot in slots:
        if slot.available:
            return slot
    return None


def slots_for_hour(
    slots: Iterable[AvailabilitySlot], hour: int, tzinfo=None
) -> List[AvailabilitySlot]:
    """Available slots whose start falls in the given hour."""
    return [
        slot
        for slot in slots
        if slot.available and _local_hour(slot.start_time, tzinfo) == hour
    ]


def group_slots_by_hour(
    slots: Iterable[AvailabilitySlot], tzinfo=None
) -> "OrderedDict[int, List[AvailabilitySlot]]":
    grouped: "OrderedDict[int, List[AvailabilitySlot]]" = OrderedDict()
    for slot in slots:
        grouped.setdefault(_local_hour(slot.start_time, tzinfo), []).append(slot)
    return grouped


def is_time_available(
    slots: Iterable[AvailabilitySlot], start_time: datetime, end_time: datetime
) -> bool:
    """Whether a slot with exactly these bounds exists and is available."""
    return any(
        slot.start_time == start_time and slot.end_time == end_time and slot.available
        for slot in slots
    )


def peak_available_hours(
    slots: Iterable[AvailabilitySlot], limit: int = 3, tzinfo=None
) -> List[int]:
    """Hours with the most available slots, best first."""
    counts = [
        (hour, sum(1 for slot in hour_slots if slot.available))
        for hour, hour_slots in group_slots_by_hour(slots, tzinfo).items()
    ]
    counts.sort(key=lambda item: item[1], reverse=True)
    return [hour for hour, _ in counts[:limit]]


def availability_summary(slots: Sequence[AvailabilitySlot]) -> Dict[str, int]:
    """Slot totals and the occupancy percentage rounded to an integer."""
    total = len(slots)
    available = len(filter_available_slots(slots))
    occupancy = (total - available) / total * 100 if total > 0 else 0
    return {
        "totalSlots": total,
        "availableSlots": available,
        # Halves round up.
        "occupancyRate": int(occupancy + 0.5),
    }


def find_consecutive_available_slots(
    slots: Iterable[AvailabilitySlot], min_consecutive: int = 2
) -> List[List[AvailabilitySlot]]:
    """
    Runs of available slots where each one starts exactly when the previous ends.

    Only runs of at least ``min_consecutive`` slots are returned.
    """
    available = sorted(filter_available_slots(slots), key=lambda slot: slot.start_time)

    groups = []
    current: List[AvailabilitySlot] = []
    for slot in available:
        if current and current[-1].end_time != slot.start_time:
            if len(current) >= min_consecutive:
                groups.append(current)
            current = []
        current.append(slot)

    if len(current) >= min_consecutive:
        groups.append(current)
    return groups


def suggest_best_times(
    slots: Iterable[AvailabilitySlot],
    preferred_hours: Optional[Iterable[int]] = None,
    preferred_day_part: Optional[str] = None,
    tzinfo=None,
) -> List[AvailabilitySlot]:
    """
    Available slots matching the caller's preferences, earliest first.

    Args:
        slots: Computed slots
        preferred_hours: Keep only slots starting in these hours
        preferred_day_part: One of morning, afternoon or evening
        tzinfo: Zone used to read the start hour
    """
    if preferred_day_part is not None and preferred_day_part not in DAY_PARTS:
        raise ValueError(f"Unknown day part: {preferred_day_part}")

    suggestions = filter_available_slots(slots)

    if preferred_day_part:
        part_hours = DAY_PARTS[preferred_day_part]
        suggestions = [
            slot for slot in suggestions if _local_hour(slot.start_time, tzinfo) in part_hours
        ]

    if preferred_hours is not None:
        hours = set(preferred_hours)
        suggestions = [
            slot for slot in suggestions if _local_hour(slot.start_time, tzinfo) in hours
        ]

    return sorted(suggestions, key=lambda slot: slot.start_time)
