# apps/bookingapp/tests/test_services.py
import uuid
from datetime import time
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase, override_settings

from apps.bookingapp.models import Booking
from apps.bookingapp.services.availability_results import (
    AggregatedAvailabilityResult,
    IndividualAvailabilityResult,
    MultiAvailabilityResult,
)
from apps.bookingapp.services.availability_service import AvailabilityService
from apps.bookingapp.services.staff_availability_service import StaffAvailabilityService
from apps.offeringsapp.models import Offering
from apps.resourcesapp.constants import RESOURCE_TYPE_ROOM, TUESDAY
from apps.resourcesapp.models import Block, Schedule
from core.exceptions import (
    AvailabilityComputationException,
    LocationNotFoundException,
    OfferingNotFoundException,
    StaffNotFoundException,
)

from .fixtures import (
    TEST_DATE,
    at,
    create_block,
    create_booking,
    create_location,
    create_offering,
    create_schedule,
    create_staff,
)

# Store lookups made after the offering and location are resolved
STORE_QUERIES = [
    (Schedule.objects, "filter"),
    (Booking.objects, "active"),
    (Block.objects, "filter"),
]


class AvailabilityServiceTest(TestCase):
    """Test cases for the location-wide AvailabilityService"""

    def setUp(self):
        """Set up test data"""
        self.location = create_location()
        self.offering = create_offering(self.location, duration_minutes=45)
        self.staff = create_staff(self.location, "Alice")
        create_schedule(self.staff, time(9, 0), time(12, 0))

    def get_slots(self, **kwargs):
        return AvailabilityService.get_available_slots(
            self.location.id, self.offering.id, TEST_DATE, **kwargs
        )

    def test_slots_follow_fixed_stride(self):
        """45 minute slots start every 30 minutes and end inside the window"""
        slots = self.get_slots()

        self.assertEqual(
            [slot.start_time for slot in slots],
            [at(9), at(9, 30), at(10), at(10, 30), at(11)],
        )
        self.assertTrue(all(slot.available for slot in slots))
        for slot in slots:
            self.assertEqual((slot.end_time - slot.start_time).total_seconds(), 45 * 60)
            self.assertLessEqual(slot.end_time, at(12))

    def test_booking_blocks_overlapping_slots(self):
        """A booking marks every overlapping slot unavailable and nothing else"""
        create_booking(self.offering, at(10), at(10, 45), resource=self.staff)

        availability = {slot.start_time: slot.available for slot in self.get_slots()}

        self.assertEqual(
            availability,
            {
                at(9): True,
                at(9, 30): False,
                at(10): False,
                at(10, 30): False,
                at(11): True,
            },
        )

    def test_touching_booking_does_not_conflict(self):
        create_booking(self.offering, at(9, 45), at(10))

        availability = {slot.start_time: slot.available for slot in self.get_slots()}

        self.assertTrue(availability[at(9)])
        self.assertFalse(availability[at(9, 30)])
        self.assertTrue(availability[at(10)])

    def test_inactive_bookings_are_ignored(self):
        create_booking(self.offering, at(9), at(12), status="cancelled")
        create_booking(self.offering, at(9), at(12), status="completed")

        self.assertTrue(all(slot.available for slot in self.get_slots()))

    def test_bookings_of_other_offerings_are_ignored(self):
        other = create_offering(self.location, name="Facial")
        create_booking(other, at(9), at(12))

        self.assertTrue(all(slot.available for slot in self.get_slots()))

    def test_any_block_at_location_obstructs(self):
        """Without a staff dimension even resource-scoped blocks obstruct"""
        other_staff = create_staff(self.location, "Bob")
        create_block(self.location, at(11), at(11, 30), resource=other_staff)

        availability = {slot.start_time: slot.available for slot in self.get_slots()}

        self.assertTrue(availability[at(10)])
        self.assertFalse(availability[at(10, 30)])
        self.assertFalse(availability[at(11)])

    def test_blocks_of_other_locations_are_ignored(self):
        other_location = create_location(name="Harbour", slug="acme-harbour")
        create_block(other_location, at(9), at(12))

        self.assertTrue(all(slot.available for slot in self.get_slots()))

    def test_duration_override(self):
        slots = self.get_slots(duration_override=90)

        self.assertEqual(
            [slot.start_time for slot in slots], [at(9), at(9, 30), at(10), at(10, 30)]
        )

    def test_duration_longer_than_window(self):
        self.assertEqual(self.get_slots(duration_override=240), [])

    def test_no_schedule_for_weekday(self):
        """A weekday without schedule rows is an empty result, not an error"""
        slots = AvailabilityService.get_available_slots(
            self.location.id, self.offering.id, TEST_DATE.replace(day=7)
        )
        self.assertEqual(slots, [])

    def test_inactive_schedules_are_ignored(self):
        create_schedule(self.staff, time(14, 0), time(15, 0), day_of_week=TUESDAY, is_active=False)

        slots = AvailabilityService.get_available_slots(
            self.location.id, self.offering.id, TEST_DATE.replace(day=7)
        )
        self.assertEqual(slots, [])

    def test_split_shifts_are_concatenated(self):
        create_schedule(self.staff, time(14, 0), time(15, 0))

        starts = [slot.start_time for slot in self.get_slots()]

        self.assertEqual(starts[-2:], [at(11), at(14)])
        self.assertEqual(len(starts), 6)

    def test_repeated_computation_is_identical(self):
        create_booking(self.offering, at(10), at(10, 45))

        self.assertEqual(self.get_slots(), self.get_slots())

    def test_missing_offering(self):
        with self.assertRaises(OfferingNotFoundException):
            AvailabilityService.get_available_slots(self.location.id, uuid.uuid4(), TEST_DATE)

    def test_missing_location(self):
        with self.assertRaises(LocationNotFoundException):
            AvailabilityService.get_available_slots(uuid.uuid4(), self.offering.id, TEST_DATE)

    def test_store_failure(self):
        with patch.object(Offering.objects, "filter", side_effect=DatabaseError("boom")):
            with self.assertRaises(AvailabilityComputationException):
                self.get_slots()

    def test_store_failure_in_any_query_aborts(self):
        """A failing schedule, booking or block query yields no slots at all"""
        create_booking(self.offering, at(10), at(10, 45))
        create_block(self.location, at(11), at(12))

        for manager, method in STORE_QUERIES:
            with self.subTest(query=method):
                with patch.object(manager, method, side_effect=DatabaseError("boom")):
                    with self.assertRaises(AvailabilityComputationException):
                        self.get_slots()

    @override_settings(AVAILABILITY_USE_LOCATION_TIMEZONE=True)
    def test_location_timezone_setting(self):
        """Schedule times are read in the location's zone when enabled"""
        self.location.timezone = "Europe/Berlin"
        self.location.save()

        slots = self.get_slots()

        # Berlin is UTC+1 in January
        self.assertEqual(slots[0].start_time, at(8))
        self.assertEqual(slots[-1].start_time, at(10))

    def test_availability_summary(self):
        create_booking(self.offering, at(10), at(10, 45))

        summary = AvailabilityService.get_availability_summary(
            self.location.id, self.offering.id, TEST_DATE, min_consecutive=1
        )

        self.assertEqual(
            summary["summary"], {"totalSlots": 5, "availableSlots": 2, "occupancyRate": 60}
        )
        self.assertEqual(summary["nextAvailable"]["startTime"], "2025-01-06T09:00:00.000Z")
        self.assertEqual(len(summary["consecutive"]), 2)
        self.assertEqual(
            [slot["startTime"] for slot in summary["suggestions"]],
            ["2025-01-06T09:00:00.000Z", "2025-01-06T11:00:00.000Z"],
        )
        self.assertEqual(summary["peakAvailableHours"], [9, 11, 10])

    def test_availability_summary_day_part(self):
        summary = AvailabilityService.get_availability_summary(
            self.location.id, self.offering.id, TEST_DATE, day_part="afternoon"
        )

        self.assertEqual(summary["suggestions"], [])
        self.assertEqual(summary["summary"]["availableSlots"], 5)


class StaffAvailabilityServiceTest(TestCase):
    """Test cases for the staff-aware StaffAvailabilityService"""

    def setUp(self):
        """Set up test data"""
        self.location = create_location()
        self.offering = create_offering(self.location, duration_minutes=60)
        self.alice = create_staff(self.location, "Alice")
        self.bob = create_staff(self.location, "Bob")
        create_schedule(self.alice, time(9, 0), time(12, 0))
        create_schedule(self.bob, time(9, 0), time(12, 0))

    def get_availability(self, **kwargs):
        return StaffAvailabilityService.get_staff_availability(
            self.location.id, self.offering.id, TEST_DATE, **kwargs
        )

    def test_multi_lists_every_staff_member(self):
        result = self.get_availability()

        self.assertIsInstance(result, MultiAvailabilityResult)
        self.assertEqual(result.type, "multi")
        self.assertEqual(result.date, "2025-01-06")
        self.assertEqual(
            [staff.staff_name for staff in result.staff_availabilities], ["Alice", "Bob"]
        )
        self.assertEqual(result.staff_availabilities[0].total_slots, 5)

    def test_bookings_only_obstruct_their_staff_member(self):
        create_booking(self.offering, at(10), at(11), resource=self.alice)

        alice, bob = self.get_availability().staff_availabilities

        self.assertEqual(alice.available_slots, 2)
        self.assertEqual(bob.available_slots, 5)
        self.assertEqual(alice.utilization_rate, 60.0)
        self.assertEqual(bob.utilization_rate, 0.0)

    def test_unassigned_bookings_do_not_obstruct_staff(self):
        create_booking(self.offering, at(9), at(12))

        result = self.get_availability()

        for staff in result.staff_availabilities:
            self.assertEqual(staff.available_slots, 5)

    def test_location_wide_block_obstructs_everyone(self):
        create_block(self.location, at(9), at(10))

        for staff in self.get_availability().staff_availabilities:
            self.assertEqual(staff.available_slots, 3)

    def test_resource_block_obstructs_only_its_resource(self):
        create_block(self.location, at(9), at(10), resource=self.bob)

        alice, bob = self.get_availability().staff_availabilities

        self.assertEqual(alice.available_slots, 5)
        self.assertEqual(bob.available_slots, 3)

    def test_individual_mode(self):
        result = self.get_availability(staff_id=self.bob.id)

        self.assertIsInstance(result, IndividualAvailabilityResult)
        self.assertEqual(result.staff_member.staff_id, str(self.bob.id))
        self.assertEqual(result.staff_member.staff_name, "Bob")

    def test_individual_mode_wins_over_aggregated(self):
        result = self.get_availability(staff_id=self.bob.id, aggregated=True)

        self.assertIsInstance(result, IndividualAvailabilityResult)

    def test_staff_without_schedule_has_no_slots(self):
        carol = create_staff(self.location, "Carol")

        result = self.get_availability(staff_id=carol.id)

        self.assertEqual(result.staff_member.slots, [])
        self.assertEqual(result.staff_member.utilization_rate, 0.0)

    def test_aggregated_half_booked_is_orange(self):
        """One fully booked and one free staff member sit on the orange boundary"""
        create_booking(self.offering, at(9), at(12), resource=self.alice)

        result = self.get_availability(aggregated=True)

        self.assertIsInstance(result, AggregatedAvailabilityResult)
        aggregated = result.aggregated
        self.assertEqual(aggregated.utilization_rate, 50.0)
        self.assertEqual(aggregated.status, "orange")
        self.assertEqual(aggregated.total_capacity, 2)
        self.assertEqual(aggregated.available_capacity, 1)
        self.assertEqual(aggregated.booked_capacity, 1)
        self.assertEqual(
            aggregated.peak_hours,
            ["2025-01-06T11:00Z", "2025-01-06T09:00Z", "2025-01-06T10:00Z"],
        )
        self.assertEqual(
            aggregated.staff_summary,
            [
                {"staffId": str(self.alice.id), "staffName": "Alice", "utilization": 100.0},
                {"staffId": str(self.bob.id), "staffName": "Bob", "utilization": 0.0},
            ],
        )
        self.assertEqual(len(result.staff_details), 2)

    def test_staff_at_other_location_not_found(self):
        other_location = create_location(name="Harbour", slug="acme-harbour")
        stranger = create_staff(other_location, "Dave")

        with self.assertRaises(StaffNotFoundException) as ctx:
            self.get_availability(staff_id=stranger.id)
        self.assertEqual(str(ctx.exception.message), "Staff member not found")

    def test_inactive_staff_not_found(self):
        self.bob.is_active = False
        self.bob.save()

        with self.assertRaises(StaffNotFoundException):
            self.get_availability(staff_id=self.bob.id)

    def test_non_staff_resource_not_found(self):
        room = create_staff(self.location, "Room 1", type=RESOURCE_TYPE_ROOM)

        with self.assertRaises(StaffNotFoundException):
            self.get_availability(staff_id=room.id)

    def test_aggregated_without_staff_not_found(self):
        empty_location = create_location(name="Harbour", slug="acme-harbour")
        offering = create_offering(empty_location)

        with self.assertRaises(StaffNotFoundException) as ctx:
            StaffAvailabilityService.get_staff_availability(
                empty_location.id, offering.id, TEST_DATE, aggregated=True
            )
        self.assertEqual(str(ctx.exception.message), "No staff members found")

    def test_multi_without_staff_is_empty(self):
        empty_location = create_location(name="Harbour", slug="acme-harbour")
        offering = create_offering(empty_location)

        result = StaffAvailabilityService.get_staff_availability(
            empty_location.id, offering.id, TEST_DATE
        )

        self.assertIsInstance(result, MultiAvailabilityResult)
        self.assertEqual(result.staff_availabilities, [])

    def test_missing_offering_checked_first(self):
        with self.assertRaises(OfferingNotFoundException):
            StaffAvailabilityService.get_staff_availability(
                uuid.uuid4(), uuid.uuid4(), TEST_DATE
            )

    def test_repeated_computation_is_identical(self):
        create_booking(self.offering, at(10), at(11), resource=self.alice)

        first = self.get_availability(aggregated=True).to_dict()
        second = self.get_availability(aggregated=True).to_dict()

        self.assertEqual(first, second)

    def test_store_failure_in_any_query_aborts(self):
        create_booking(self.offering, at(10), at(11), resource=self.alice)
        create_block(self.location, at(11), at(12))

        for manager, method in STORE_QUERIES:
            for mode in ({}, {"aggregated": True}, {"staff_id": self.bob.id}):
                with self.subTest(query=method, mode=mode):
                    with patch.object(manager, method, side_effect=DatabaseError("boom")):
                        with self.assertRaises(AvailabilityComputationException):
                            self.get_availability(**mode)
