# apps/offeringsapp/models.py
import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.organizationsapp.models import Location, Organization


class Offering(models.Model):
    """A bookable service with a default duration"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="offerings",
        verbose_name=_("Organization"),
    )
    location = models.ForeignKey(
        Location,
        on_delete=models.CASCADE,
        related_name="offerings",
        verbose_name=_("Location"),
    )
    name = models.CharField(_("Name"), max_length=255)
    description = models.TextField(_("Description"), null=True, blank=True)
    duration_minutes = models.PositiveIntegerField(
        _("Duration (minutes)"), validators=[MinValueValidator(1)]
    )
    capacity = models.PositiveIntegerField(_("Capacity"), default=1)
    price_cents = models.PositiveIntegerField(_("Price (cents)"), null=True, blank=True)
    color = models.CharField(_("Color"), max_length=20, null=True, blank=True)
    is_active = models.BooleanField(_("Active"), default=True)
    created_at = models.DateTimeField(_("Created At"), auto_now_add=True)
    updated_at = models.DateTimeField(_("Updated At"), auto_now=True)

    class Meta:
        verbose_name = _("Offering")
        verbose_name_plural = _("Offerings")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["location", "is_active"]),
        ]

    def __str__(self):
        return f"{self.name} ({self.duration_minutes} min)"
