"""
Obstruction-aware conflict detection.

This module decides whether a candidate slot can be booked by testing it
against two kinds of obstruction: existing bookings and ad-hoc blocks
(holidays, breaks, maintenance windows). All tests use open intervals, so two
ranges that merely touch at an edge do not conflict.
"""

import logging
from datetime import datetime
from typing import Any, Iterable, Optional

logger = logging.getLogger(__name__)

OBSTRUCTION_BOOKING = "booking"
OBSTRUCTION_BLOCK = "block"


class TimeRange:
    """Represents a half-open time range [start, end)."""

    def __init__(self, start: datetime, end: datetime):
        """
        Initialize a time range.

        Args:
            start: Start of the range
            end: End of the range (exclusive)
        """
        self.start = start
        self.end = end

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"{self.start.strftime('%Y-%m-%d %H:%M')} - "
            f"{self.end.strftime('%H:%M')}"
        )

    def __repr__(self) -> str:
        return f"TimeRange({self.start.isoformat()}, {self.end.isoformat()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeRange):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def overlaps(self, other: "TimeRange") -> bool:
        """
        Check if this time range overlaps with another.

        Args:
            other: Another time range

        Returns:
            True if the ranges share any instant, False otherwise
        """
        return (self.start < other.end) and (self.end > other.start)


class Obstruction(TimeRange):
    """
    A booking or block that makes overlapping slots unavailable.

    Bookings only obstruct the resource they are assigned to. Blocks without a
    resource apply to every resource at their location.
    """

    def __init__(
        self,
        start: datetime,
        end: datetime,
        kind: str = OBSTRUCTION_BOOKING,
        resource_id: Optional[Any] = None,
    ):
        super().__init__(start, end)
        if kind not in (OBSTRUCTION_BOOKING, OBSTRUCTION_BLOCK):
            raise ValueError(f"Unknown obstruction kind: {kind}")
        self.kind = kind
        self.resource_id = str(resource_id) if resource_id is not None else None

    def __repr__(self) -> str:
        return (
            f"Obstruction({self.kind}, {self.start.isoformat()}, "
            f"{self.end.isoformat()}, resource={self.resource_id})"
        )

    @classmethod
    def from_booking(cls, booking: Any) -> "Obstruction":
        """Build an obstruction from a booking row (model instance or dict)."""
        return cls(
            _field(booking, "start_time"),
            _field(booking, "end_time"),
            kind=OBSTRUCTION_BOOKING,
            resource_id=_field(booking, "resource_id"),
        )

    @classmethod
    def from_block(cls, block: Any) -> "Obstruction":
        """Build an obstruction from a block row (model instance or dict)."""
        return cls(
            _field(block, "start_time"),
            _field(block, "end_time"),
            kind=OBSTRUCTION_BLOCK,
            resource_id=_field(block, "resource_id"),
        )

    def applies_to(self, resource_id: Any) -> bool:
        """Whether this obstruction is in scope for the given resource."""
        resource_id = str(resource_id)
        if self.kind == OBSTRUCTION_BLOCK:
            return self.resource_id is None or self.resource_id == resource_id
        return self.resource_id == resource_id

    def obstructs(self, slot: TimeRange, resource_id: Optional[Any] = None) -> bool:
        """
        Check whether this obstruction makes the slot unavailable.

        Args:
            slot: Candidate slot
            resource_id: Resource the slot belongs to. None means the
                location-wide pool, where every obstruction is in scope.

        Returns:
            True if the obstruction is in scope and overlaps the slot
        """
        if resource_id is not None and not self.applies_to(resource_id):
            return False
        return self.overlaps(slot)


def _field(row: Any, name: str) -> Any:
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def is_slot_available(
    slot: TimeRange,
    bookings: Iterable[Obstruction],
    blocks: Iterable[Obstruction],
    resource_id: Optional[Any] = None,
) -> bool:
    """
    Decide whether a candidate slot is free of obstructions.

    Bookings are checked before blocks and the search stops at the first
    obstruction that overlaps the slot.

    Args:
        slot: Candidate slot
        bookings: Booking obstructions (already filtered to active statuses)
        blocks: Block obstructions
        resource_id: Resource scope, or None for the location-wide pool

    Returns:
        True if no obstruction in scope overlaps the slot
    """
    if any(booking.obstructs(slot, resource_id) for booking in bookings):
        return False
    if any(block.obstructs(slot, resource_id) for block in blocks):
        return False
    return True
