# apps/bookingapp/services/availability_results.py
"""
Result variants of the staff-aware availability computation.

Each variant carries a ``type`` discriminant that is rendered into the
response so clients can tell the shapes apart.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from algorithms.availability import AggregatedAvailability, StaffAvailability
from apps.bookingapp.constants import (
    AVAILABILITY_TYPE_AGGREGATED,
    AVAILABILITY_TYPE_INDIVIDUAL,
    AVAILABILITY_TYPE_MULTI,
)


@dataclass
class IndividualAvailabilityResult:
    """One requested staff member"""

    date: str
    staff_member: StaffAvailability
    type: str = field(default=AVAILABILITY_TYPE_INDIVIDUAL, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "date": self.date,
            "staffMember": self.staff_member.to_dict(),
        }


@dataclass
class AggregatedAvailabilityResult:
    """Location-wide capacity rollup plus the per-staff detail it was built from"""

    aggregated: AggregatedAvailability
    staff_details: List[StaffAvailability] = field(default_factory=list)
    type: str = field(default=AVAILABILITY_TYPE_AGGREGATED, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "aggregated": self.aggregated.to_dict(),
            "staffDetails": [staff.to_dict() for staff in self.staff_details],
        }


@dataclass
class MultiAvailabilityResult:
    """Every staff member at the location, side by side"""

    date: str
    staff_availabilities: List[StaffAvailability] = field(default_factory=list)
    type: str = field(default=AVAILABILITY_TYPE_MULTI, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "date": self.date,
            "staffAvailabilities": [staff.to_dict() for staff in self.staff_availabilities],
        }
