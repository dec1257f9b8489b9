# apps/organizationsapp/models.py
import uuid
import zoneinfo

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _


def timezone_name_validator(value):
    """Validate that the value is a known IANA time zone name"""
    if value not in zoneinfo.available_timezones():
        raise ValidationError(_("Enter a valid IANA time zone (e.g., Europe/Berlin)"))
    return value


class Organization(models.Model):
    """Tenant that owns locations, offerings and resources"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(_("Name"), max_length=255)
    slug = models.SlugField(_("Slug"), max_length=100, unique=True)
    settings = models.JSONField(_("Settings"), default=dict, blank=True)
    created_at = models.DateTimeField(_("Created At"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Updated At"), auto_now=True)

    class Meta:
        verbose_name = _("Organization")
        verbose_name_plural = _("Organizations")
        ordering = ["name"]

    def __str__(self):
        return self.name


class Location(models.Model):
    """A branch of an organization where bookings take place"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="locations",
        verbose_name=_("Organization"),
    )
    name = models.CharField(_("Name"), max_length=255)
    address = models.TextField(_("Address"), null=True, blank=True)
    timezone = models.CharField(
        _("Time Zone"),
        max_length=64,
        default="UTC",
        validators=[timezone_name_validator],
    )
    settings = models.JSONField(_("Settings"), default=dict, blank=True)
    created_at = models.DateTimeField(_("Created At"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Updated At"), auto_now=True)

    class Meta:
        verbose_name = _("Location")
        verbose_name_plural = _("Locations")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["organization"]),
        ]

    def __str__(self):
        return f"{self.name} ({self.organization.name})"

    def get_zoneinfo(self):
        """Return the location's time zone as a tzinfo object"""
        return zoneinfo.ZoneInfo(self.timezone)
