# apps/resourcesapp/models.py
import uuid

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.organizationsapp.models import Location, Organization
from apps.resourcesapp.constants import (
    BLOCK_TYPE_CHOICES,
    RESOURCE_TYPE_CHOICES,
    RESOURCE_TYPE_STAFF,
    WEEKDAY_CHOICES,
)


class ResourceQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def staff(self):
        return self.filter(type=RESOURCE_TYPE_STAFF)


class Resource(models.Model):
    """A bookable unit: staff member, table, room or piece of equipment"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="resources",
        verbose_name=_("Organization"),
    )
    location = models.ForeignKey(
        Location,
        on_delete=models.CASCADE,
        related_name="resources",
        verbose_name=_("Location"),
    )
    name = models.CharField(_("Name"), max_length=255)
    type = models.CharField(
        _("Type"),
        max_length=20,
        choices=RESOURCE_TYPE_CHOICES,
        default=RESOURCE_TYPE_STAFF,
        db_index=True,
    )
    capacity = models.PositiveIntegerField(_("Capacity"), default=1)
    is_active = models.BooleanField(_("Active"), default=True)
    created_at = models.DateTimeField(_("Created At"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Updated At"), auto_now=True)

    objects = ResourceQuerySet.as_manager()

    class Meta:
        verbose_name = _("Resource")
        verbose_name_plural = _("Resources")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["location", "type", "is_active"]),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_type_display()})"


class Schedule(models.Model):
    """Recurring weekly working-hours window for one resource"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="schedules",
        verbose_name=_("Organization"),
    )
    location = models.ForeignKey(
        Location,
        on_delete=models.CASCADE,
        related_name="schedules",
        verbose_name=_("Location"),
    )
    resource = models.ForeignKey(
        Resource,
        on_delete=models.CASCADE,
        related_name="schedules",
        verbose_name=_("Resource"),
    )
    day_of_week = models.PositiveSmallIntegerField(_("Day of Week"), choices=WEEKDAY_CHOICES)
    start_time = models.TimeField(_("Start Time"))
    end_time = models.TimeField(_("End Time"))
    is_active = models.BooleanField(_("Active"), default=True)
    created_at = models.DateTimeField(_("Created At"), auto_now_add=True)

    class Meta:
        verbose_name = _("Schedule")
        verbose_name_plural = _("Schedules")
        # Split shifts are allowed, so no uniqueness on (resource, day_of_week).
        indexes = [
            models.Index(fields=["location", "day_of_week", "is_active"]),
            models.Index(fields=["resource", "day_of_week"]),
        ]

    def __str__(self):
        return (
            f"{self.resource.name} - {self.get_day_of_week_display()}: "
            f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')}"
        )

    def clean(self):
        if self.start_time and self.end_time and self.start_time >= self.end_time:
            raise ValidationError(_("End time must be after start time"))


class Block(models.Model):
    """Ad-hoc unavailability window such as a holiday, break or maintenance"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="blocks",
        verbose_name=_("Organization"),
    )
    location = models.ForeignKey(
        Location,
        on_delete=models.CASCADE,
        related_name="blocks",
        verbose_name=_("Location"),
    )
    resource = models.ForeignKey(
        Resource,
        on_delete=models.CASCADE,
        related_name="blocks",
        verbose_name=_("Resource"),
        null=True,
        blank=True,
        help_text=_("Leave empty to block every resource at the location"),
    )
    start_time = models.DateTimeField(_("Start Time"), db_index=True)
    end_time = models.DateTimeField(_("End Time"), db_index=True)
    reason = models.CharField(_("Reason"), max_length=255, null=True, blank=True)
    type = models.CharField(
        _("Type"), max_length=20, choices=BLOCK_TYPE_CHOICES, default="other"
    )
    created_at = models.DateTimeField(_("Created At"), auto_now_add=True)

    class Meta:
        verbose_name = _("Block")
        verbose_name_plural = _("Blocks")
        ordering = ["start_time"]
        indexes = [
            models.Index(fields=["location", "start_time", "end_time"]),
        ]

    def __str__(self):
        scope = self.resource.name if self.resource_id else _("All resources")
        return f"{self.get_type_display()} - {scope}: {self.start_time} - {self.end_time}"

    def clean(self):
        if self.start_time and self.end_time and self.start_time >= self.end_time:
            raise ValidationError(_("End time must be after start time"))
