# apps/bookingapp/models.py
import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.bookingapp.constants import (
    ACTIVE_BOOKING_STATUSES,
    BOOKING_STATUS_CHOICES,
    BOOKING_STATUS_PENDING,
)
from apps.offeringsapp.models import Offering
from apps.organizationsapp.models import Location, Organization
from apps.resourcesapp.models import Resource


class BookingQuerySet(models.QuerySet):
    def active(self):
        """Bookings that still occupy their slot"""
        return self.filter(status__in=ACTIVE_BOOKING_STATUSES)


class Booking(models.Model):
    """Customer reservation of an offering at a location"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="bookings",
        verbose_name=_("Organization"),
    )
    location = models.ForeignKey(
        Location,
        on_delete=models.CASCADE,
        related_name="bookings",
        verbose_name=_("Location"),
    )
    offering = models.ForeignKey(
        Offering,
        on_delete=models.SET_NULL,
        related_name="bookings",
        verbose_name=_("Offering"),
        null=True,
        blank=True,
    )
    resource = models.ForeignKey(
        Resource,
        on_delete=models.SET_NULL,
        related_name="bookings",
        verbose_name=_("Resource"),
        null=True,
        blank=True,
    )
    customer_name = models.CharField(_("Customer Name"), max_length=255)
    customer_email = models.EmailField(_("Customer Email"))
    customer_phone = models.CharField(_("Customer Phone"), max_length=30, null=True, blank=True)
    start_time = models.DateTimeField(_("Start Time"), db_index=True)
    end_time = models.DateTimeField(_("End Time"), db_index=True)
    status = models.CharField(
        _("Status"),
        max_length=20,
        choices=BOOKING_STATUS_CHOICES,
        default=BOOKING_STATUS_PENDING,
        db_index=True,
    )
    notes = models.TextField(_("Notes"), null=True, blank=True)
    metadata = models.JSONField(_("Metadata"), default=dict, blank=True)
    created_at = models.DateTimeField(_("Created At"), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_("Updated At"), auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-start_time"]
        indexes = [
            models.Index(fields=["start_time", "end_time"]),
            models.Index(fields=["location", "start_time", "status"]),
            models.Index(fields=["resource", "start_time", "status"]),
            models.Index(fields=["offering", "start_time"]),
        ]

    def __str__(self):
        return f"{self.customer_name} - {self.start_time} ({self.get_status_display()})"

    def clean(self):
        if self.start_time and self.end_time and self.start_time >= self.end_time:
            raise ValidationError(_("End time must be after start time"))

    @property
    def is_active(self):
        return self.status in ACTIVE_BOOKING_STATUSES
