# algorithms/tests/test_slot_generation.py
from datetime import date, datetime, time, timezone as dt_timezone
from zoneinfo import ZoneInfo

from django.test import SimpleTestCase

from algorithms.availability.slot_generator import (
    SlotGenerator,
    anchor,
    generate_schedule_slots,
    parse_wall_clock,
)

MONDAY = date(2025, 1, 6)


def utc(hour, minute=0, day=MONDAY):
    return datetime.combine(day, time(hour, minute), tzinfo=dt_timezone.utc)


class SlotGeneratorTest(SimpleTestCase):
    """Test cases for fixed-stride slot generation"""

    def test_stride_is_independent_of_duration(self):
        slots = list(SlotGenerator(MONDAY, time(9), time(12), 45))

        self.assertEqual(
            [slot.start for slot in slots],
            [utc(9), utc(9, 30), utc(10), utc(10, 30), utc(11)],
        )
        self.assertEqual(slots[-1].end, utc(11, 45))

    def test_last_slot_may_end_on_window_end(self):
        slots = list(SlotGenerator(MONDAY, "09:00", "10:00", 30))

        self.assertEqual([slot.end for slot in slots], [utc(9, 30), utc(10)])

    def test_duration_longer_than_window(self):
        self.assertEqual(list(SlotGenerator(MONDAY, time(9), time(10), 90)), [])

    def test_generator_is_restartable(self):
        generator = SlotGenerator(MONDAY, time(9), time(11), 60)

        self.assertEqual(list(generator), list(generator))

    def test_custom_stride(self):
        slots = list(SlotGenerator(MONDAY, time(9), time(10), 30, stride_minutes=15))

        self.assertEqual([slot.start for slot in slots], [utc(9), utc(9, 15), utc(9, 30)])

    def test_rejects_non_positive_duration(self):
        with self.assertRaises(ValueError):
            SlotGenerator(MONDAY, time(9), time(10), 0)

    def test_schedule_rows_are_concatenated_unmerged(self):
        schedules = [
            {"start_time": "14:00", "end_time": "15:00"},
            {"start_time": "09:00", "end_time": "10:00"},
            {"start_time": "09:30", "end_time": "10:00"},
        ]

        starts = [slot.start for slot in generate_schedule_slots(MONDAY, schedules, 30)]

        self.assertEqual(
            starts,
            [utc(14), utc(14, 30), utc(9), utc(9, 30), utc(9, 30)],
        )


class WallClockTest(SimpleTestCase):
    def test_parse_wall_clock(self):
        self.assertEqual(parse_wall_clock("09:30"), time(9, 30))
        self.assertEqual(parse_wall_clock("17:00:00"), time(17))
        self.assertEqual(parse_wall_clock(time(8, 15)), time(8, 15))

    def test_parse_wall_clock_rejects_garbage(self):
        with self.assertRaises(ValueError):
            parse_wall_clock("9")

    def test_anchor_defaults_to_utc(self):
        self.assertEqual(anchor(MONDAY, "09:00"), utc(9))

    def test_anchor_in_zone(self):
        # New York is UTC-5 in January
        self.assertEqual(anchor(MONDAY, "09:00", ZoneInfo("America/New_York")), utc(14))
