"""
Multi-resource capacity aggregation.

Rolls the per-staff slot lists of a location up into a single capacity and
utilization summary used for staffing decisions:

1. Every staff member's slots are pooled into one flat list.
2. Pooled slots are bucketed by the hour their start falls in, counting the
   available slots per bucket.
3. Buckets are ranked by available count; the least available are the peak
   hours, the most available are the free hours.
4. Capacity figures scale the location-wide free ratio by the staff count.

The available and booked capacities are rounded independently (floor and
complement-of-ceil) and therefore do not always add up to the total.
"""

import logging
import math
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime, timezone as dt_timezone
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from utils.constants import HOUR_BUCKET_FORMAT

from .availability_builder import AvailabilitySlot, StaffAvailability, utilization_rate

logger = logging.getLogger(__name__)

STATUS_GREEN = "green"
STATUS_ORANGE = "orange"
STATUS_RED = "red"

# Free-fraction thresholds (percent); strictly greater than the bound.
GREEN_THRESHOLD = 50
ORANGE_THRESHOLD = 20

DEFAULT_SUMMARY_BUCKETS = 3


@dataclass
class AggregatedAvailability:
    """Location-wide capacity rollup for one day."""

    date: str
    total_capacity: int
    booked_capacity: int
    available_capacity: int
    utilization_rate: float
    peak_hours: List[str] = field(default_factory=list)
    free_slots: List[str] = field(default_factory=list)
    status: str = STATUS_GREEN
    staff_summary: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "totalCapacity": self.total_capacity,
            "bookedCapacity": self.booked_capacity,
            "availableCapacity": self.available_capacity,
            "utilizationRate": self.utilization_rate,
            "peakHours": list(self.peak_hours),
            "freeSlots": list(self.free_slots),
            "status": self.status,
            "staffSummary": [dict(entry) for entry in self.staff_summary],
        }


def hour_bucket(instant: datetime) -> str:
    """Label of the UTC hour containing the instant, e.g. 2025-01-06T09:00Z."""
    if instant.tzinfo is not None:
        instant = instant.astimezone(dt_timezone.utc)
    return instant.strftime(HOUR_BUCKET_FORMAT)


def count_available_by_hour(slots: Iterable[AvailabilitySlot]) -> "OrderedDict[str, int]":
    """
    Count available slots per hour bucket.

    Buckets appear in order of first occurrence; hours whose slots are all
    unavailable are kept with a count of zero.
    """
    counts: "OrderedDict[str, int]" = OrderedDict()
    for slot in slots:
        bucket = hour_bucket(slot.start_time)
        counts[bucket] = counts.get(bucket, 0) + (1 if slot.available else 0)
    return counts


def rank_hours(
    counts: "OrderedDict[str, int]", limit: int = DEFAULT_SUMMARY_BUCKETS
) -> Tuple[List[str], List[str]]:
    """
    Split hour buckets into peak (least available) and free (most available).

    Sorting is stable, so ties keep first-occurrence order. With fewer
    buckets than the limit every bucket is returned, without padding.

    Returns:
        (peak_hours, free_hours)
    """
    ranked = sorted(counts.items(), key=lambda item: item[1])
    peak = [hour for hour, _ in ranked[:limit]]
    free = [hour for hour, _ in ranked[-limit:]] if limit > 0 else []
    return peak, free


def capacity_status(utilization: float) -> str:
    """Classify a utilization rate by the share of capacity still free."""
    availability_rate = 100 - utilization
    if availability_rate > GREEN_THRESHOLD:
        return STATUS_GREEN
    if availability_rate > ORANGE_THRESHOLD:
        return STATUS_ORANGE
    return STATUS_RED


def capacity_split(
    total_available: int, total_slots: int, resource_count: int
) -> Tuple[int, int]:
    """
    Scale the free ratio by the resource count.

    Returns:
        (available_capacity, booked_capacity), rounded independently
    """
    ratio = total_available / (total_slots or 1) * resource_count
    return math.floor(ratio), resource_count - math.ceil(ratio)


def aggregate_staff_availability(
    target_date: date,
    staff_availabilities: Sequence[StaffAvailability],
    summary_buckets: int = DEFAULT_SUMMARY_BUCKETS,
) -> AggregatedAvailability:
    """
    Merge per-staff availability into one location-wide summary.

    Args:
        target_date: The computed day
        staff_availabilities: One entry per staff resource
        summary_buckets: How many hours to report as peak and free

    Returns:
        Aggregated capacity summary
    """
    pooled = [slot for staff in staff_availabilities for slot in staff.slots]
    total_available = sum(staff.available_slots for staff in staff_availabilities)
    total_slots = sum(staff.total_slots for staff in staff_availabilities)
    resource_count = len(staff_availabilities)

    peak_hours, free_hours = rank_hours(count_available_by_hour(pooled), summary_buckets)
    available_capacity, booked_capacity = capacity_split(
        total_available, total_slots, resource_count
    )
    utilization = utilization_rate(total_slots, total_available)

    logger.debug(
        f"Aggregated {resource_count} staff on {target_date}: "
        f"{total_available}/{total_slots} slots free"
    )

    return AggregatedAvailability(
        date=target_date.isoformat(),
        total_capacity=resource_count,
        booked_capacity=booked_capacity,
        available_capacity=available_capacity,
        utilization_rate=utilization,
        peak_hours=peak_hours,
        free_slots=free_hours,
        status=capacity_status(utilization),
        staff_summary=[
            {
                "staffId": staff.staff_id,
                "staffName": staff.staff_name,
                "utilization": staff.utilization_rate,
            }
            for staff in staff_availabilities
        ],
    )
