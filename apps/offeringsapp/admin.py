from django.contrib import admin

from apps.offeringsapp.models import Offering


@admin.register(Offering)
class OfferingAdmin(admin.ModelAdmin):
    list_display = ("name", "location", "duration_minutes", "capacity", "is_active")
    list_filter = ("is_active", "location")
    search_fields = ("name", "location__name")
