# apps/bookingapp/tests/test_utils.py
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from django.test import SimpleTestCase, override_settings

from apps.bookingapp.utils.date_utils import (
    availability_timezone,
    day_bounds,
    schedule_weekday,
)
from apps.organizationsapp.models import Location


class DateUtilsTest(SimpleTestCase):
    def test_schedule_weekday_starts_on_sunday(self):
        self.assertEqual(schedule_weekday(date(2025, 1, 5)), 0)
        self.assertEqual(schedule_weekday(date(2025, 1, 6)), 1)
        self.assertEqual(schedule_weekday(date(2025, 1, 11)), 6)

    def test_server_timezone_by_default(self):
        location = Location(name="Berlin", timezone="Europe/Berlin")

        self.assertEqual(str(availability_timezone(location)), "UTC")

    @override_settings(AVAILABILITY_USE_LOCATION_TIMEZONE=True)
    def test_location_timezone_when_enabled(self):
        location = Location(name="Berlin", timezone="Europe/Berlin")

        self.assertEqual(availability_timezone(location), ZoneInfo("Europe/Berlin"))

    def test_day_bounds(self):
        berlin = ZoneInfo("Europe/Berlin")

        start, end = day_bounds(date(2025, 1, 6), berlin)

        self.assertEqual(start, datetime(2025, 1, 6, 0, 0, tzinfo=berlin))
        self.assertEqual(end.time(), time.max)
