from django.utils.translation import gettext_lazy as _

# Booking statuses
BOOKING_STATUS_PENDING = "pending"
BOOKING_STATUS_CONFIRMED = "confirmed"
BOOKING_STATUS_CANCELLED = "cancelled"
BOOKING_STATUS_COMPLETED = "completed"
BOOKING_STATUS_NO_SHOW = "no_show"

BOOKING_STATUS_CHOICES = (
    (BOOKING_STATUS_PENDING, _("Pending")),
    (BOOKING_STATUS_CONFIRMED, _("Confirmed")),
    (BOOKING_STATUS_CANCELLED, _("Cancelled")),
    (BOOKING_STATUS_COMPLETED, _("Completed")),
    (BOOKING_STATUS_NO_SHOW, _("No Show")),
)

# Only these statuses occupy a slot
ACTIVE_BOOKING_STATUSES = (BOOKING_STATUS_PENDING, BOOKING_STATUS_CONFIRMED)

# Availability response discriminants
AVAILABILITY_TYPE_INDIVIDUAL = "individual"
AVAILABILITY_TYPE_MULTI = "multi"
AVAILABILITY_TYPE_AGGREGATED = "aggregated"

DAY_PART_CHOICES = (
    ("morning", _("Morning")),
    ("afternoon", _("Afternoon")),
    ("evening", _("Evening")),
)
