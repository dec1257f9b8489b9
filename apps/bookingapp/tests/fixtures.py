# apps/bookingapp/tests/fixtures.py
from datetime import date, datetime, time
from datetime import timezone as dt_timezone

from apps.bookingapp.models import Booking
from apps.offeringsapp.models import Offering
from apps.organizationsapp.models import Location, Organization
from apps.resourcesapp.constants import MONDAY, RESOURCE_TYPE_STAFF
from apps.resourcesapp.models import Block, Resource, Schedule

# A Monday
TEST_DATE = date(2025, 1, 6)


def at(hour, minute=0, day=TEST_DATE):
    """Aware UTC datetime on the test day"""
    return datetime.combine(day, time(hour, minute), tzinfo=dt_timezone.utc)


def create_location(name="Main Street", slug="acme", timezone_name="UTC"):
    """Create an organization with one location"""
    organization = Organization.objects.create(name="Acme Wellness", slug=slug)
    return Location.objects.create(
        organization=organization, name=name, timezone=timezone_name
    )


def create_offering(location, duration_minutes=45, name="Massage"):
    return Offering.objects.create(
        organization=location.organization,
        location=location,
        name=name,
        duration_minutes=duration_minutes,
    )


def create_staff(location, name, is_active=True, type=RESOURCE_TYPE_STAFF):
    return Resource.objects.create(
        organization=location.organization,
        location=location,
        name=name,
        type=type,
        is_active=is_active,
    )


def create_schedule(resource, start, end, day_of_week=MONDAY, is_active=True):
    return Schedule.objects.create(
        organization=resource.organization,
        location=resource.location,
        resource=resource,
        day_of_week=day_of_week,
        start_time=start,
        end_time=end,
        is_active=is_active,
    )


def create_booking(offering, start, end, resource=None, status="confirmed"):
    return Booking.objects.create(
        organization=offering.organization,
        location=offering.location,
        offering=offering,
        resource=resource,
        customer_name="Jane Doe",
        customer_email="jane@example.com",
        start_time=start,
        end_time=end,
        status=status,
    )


def create_block(location, start, end, resource=None, reason="Break"):
    return Block.objects.create(
        organization=location.organization,
        location=location,
        resource=resource,
        start_time=start,
        end_time=end,
        reason=reason,
    )
