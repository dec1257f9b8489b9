from django.utils.translation import gettext_lazy as _

# Resource types
RESOURCE_TYPE_STAFF = "staff"
RESOURCE_TYPE_TABLE = "table"
RESOURCE_TYPE_ROOM = "room"
RESOURCE_TYPE_EQUIPMENT = "equipment"

RESOURCE_TYPE_CHOICES = (
    (RESOURCE_TYPE_STAFF, _("Staff")),
    (RESOURCE_TYPE_TABLE, _("Table")),
    (RESOURCE_TYPE_ROOM, _("Room")),
    (RESOURCE_TYPE_EQUIPMENT, _("Equipment")),
)

# Block types
BLOCK_TYPE_CHOICES = (
    ("holiday", _("Holiday")),
    ("break", _("Break")),
    ("maintenance", _("Maintenance")),
    ("other", _("Other")),
)

# Working day choices - for readability in code
SUNDAY = 0
MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

WEEKDAY_CHOICES = (
    (SUNDAY, _("Sunday")),
    (MONDAY, _("Monday")),
    (TUESDAY, _("Tuesday")),
    (WEDNESDAY, _("Wednesday")),
    (THURSDAY, _("Thursday")),
    (FRIDAY, _("Friday")),
    (SATURDAY, _("Saturday")),
)
