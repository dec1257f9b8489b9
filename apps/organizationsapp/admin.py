from django.contrib import admin

from apps.organizationsapp.models import Location, Organization


class LocationInline(admin.TabularInline):
    model = Location
    extra = 0
    fields = ("name", "address", "timezone")


@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "created_at")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
    inlines = [LocationInline]


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ("name", "organization", "timezone", "created_at")
    list_filter = ("timezone",)
    search_fields = ("name", "organization__name")
