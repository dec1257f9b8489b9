"""
Candidate slot generation.

Turns a working-hours window into a run of fixed-stride candidate slots. The
stride is independent of the requested duration, so a 45-minute service
produces overlapping candidates at :00 and :30.
"""

import itertools
import logging
from datetime import date, datetime, time, timedelta, timezone as dt_timezone
from typing import Any, Iterable, Iterator, Tuple, Union

from .conflict_detector import TimeRange

logger = logging.getLogger(__name__)

DEFAULT_SLOT_STRIDE_MINUTES = 30

WallClock = Union[time, str]


def parse_wall_clock(value: WallClock) -> time:
    """
    Parse a schedule boundary into a time object.

    Args:
        value: A time, or a string in HH:MM or HH:MM:SS format

    Returns:
        Parsed time
    """
    if isinstance(value, time):
        return value
    parts = [int(part) for part in str(value).strip().split(":")]
    if len(parts) < 2 or len(parts) > 3:
        raise ValueError(f"Invalid wall-clock time: {value!r}")
    return time(*parts)


def anchor(target_date: date, wall_clock: WallClock, tzinfo=None) -> datetime:
    """
    Combine a date with a wall-clock time and return the matching instant.

    The result is expressed in UTC so that later arithmetic moves in absolute
    time, even across a DST change.
    """
    local = datetime.combine(target_date, parse_wall_clock(wall_clock))
    if tzinfo is None:
        tzinfo = dt_timezone.utc
    return local.replace(tzinfo=tzinfo).astimezone(dt_timezone.utc)


class SlotGenerator:
    """
    Lazy, restartable sequence of candidate slots for one schedule window.

    Iterating twice yields the same slots; nothing is computed until the
    sequence is consumed.
    """

    def __init__(
        self,
        target_date: date,
        start_time: WallClock,
        end_time: WallClock,
        duration_minutes: int,
        stride_minutes: int = DEFAULT_SLOT_STRIDE_MINUTES,
        tzinfo=None,
    ):
        if duration_minutes <= 0:
            raise ValueError("duration_minutes must be positive")
        if stride_minutes <= 0:
            raise ValueError("stride_minutes must be positive")

        self.window_start = anchor(target_date, start_time, tzinfo)
        self.window_end = anchor(target_date, end_time, tzinfo)
        self.duration = timedelta(minutes=duration_minutes)
        self.stride = timedelta(minutes=stride_minutes)

    def __iter__(self) -> Iterator[TimeRange]:
        cursor = self.window_start
        while cursor + self.duration <= self.window_end:
            yield TimeRange(cursor, cursor + self.duration)
            cursor += self.stride


def schedule_window(schedule: Any) -> Tuple[WallClock, WallClock]:
    """Extract (start_time, end_time) from a schedule row or dict."""
    if isinstance(schedule, dict):
        return schedule["start_time"], schedule["end_time"]
    return schedule.start_time, schedule.end_time


def generate_schedule_slots(
    target_date: date,
    schedules: Iterable[Any],
    duration_minutes: int,
    stride_minutes: int = DEFAULT_SLOT_STRIDE_MINUTES,
    tzinfo=None,
) -> Iterator[TimeRange]:
    """
    Generate candidate slots for every schedule row, in row order.

    Rows are not merged, so overlapping rows can produce duplicate starts.
    """
    generators = []
    for schedule in schedules:
        start_time, end_time = schedule_window(schedule)
        generators.append(
            SlotGenerator(
                target_date,
                start_time,
                end_time,
                duration_minutes,
                stride_minutes=stride_minutes,
                tzinfo=tzinfo,
            )
        )
    return itertools.chain.from_iterable(generators)
