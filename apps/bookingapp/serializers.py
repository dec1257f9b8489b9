# apps/bookingapp/serializers.py
import re

from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from apps.bookingapp.constants import DAY_PART_CHOICES
from utils.constants import DATE_FORMAT

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class StrictDateField(serializers.DateField):
    """Calendar date accepted only in the zero-padded YYYY-MM-DD form"""

    def to_internal_value(self, value):
        if not isinstance(value, str) or not DATE_PATTERN.match(value):
            self.fail("invalid", format="YYYY-MM-DD")
        return super().to_internal_value(value)


class StrictBooleanField(serializers.BooleanField):
    """Flag accepted only as a boolean or the literal strings true and false"""

    LITERALS = {"true": True, "false": False}

    def to_internal_value(self, value):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value in self.LITERALS:
            return self.LITERALS[value]
        self.fail("invalid")


class AvailabilityQuerySerializer(serializers.Serializer):
    """Input of the location-wide availability calculation"""

    locationId = serializers.UUIDField()
    offeringId = serializers.UUIDField()
    date = StrictDateField(input_formats=[DATE_FORMAT])
    duration = serializers.IntegerField(
        min_value=1,
        required=False,
        allow_null=True,
        help_text=_("Overrides the offering duration (minutes)"),
    )


class EnhancedAvailabilityQuerySerializer(AvailabilityQuerySerializer):
    """Input of the staff-aware availability calculation"""

    staffId = serializers.UUIDField(required=False, allow_null=True)
    aggregated = StrictBooleanField(required=False, default=False)


class AvailabilitySummaryQuerySerializer(AvailabilityQuerySerializer):
    """Input of the availability summary"""

    minConsecutive = serializers.IntegerField(min_value=1, required=False, default=2)
    dayPart = serializers.ChoiceField(choices=DAY_PART_CHOICES, required=False, allow_null=True)
