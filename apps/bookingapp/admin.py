from django.contrib import admin

from apps.bookingapp.models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "customer_name",
        "offering",
        "resource",
        "location",
        "start_time",
        "end_time",
        "status",
    )
    list_filter = ("status", "location", "start_time")
    search_fields = ("customer_name", "customer_email", "customer_phone")
    date_hierarchy = "start_time"
    readonly_fields = ("created_at", "updated_at")
