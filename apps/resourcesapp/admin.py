from django.contrib import admin

from apps.resourcesapp.models import Block, Resource, Schedule


class ScheduleInline(admin.TabularInline):
    model = Schedule
    extra = 1
    fields = ("organization", "location", "day_of_week", "start_time", "end_time", "is_active")


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "location", "capacity", "is_active")
    list_filter = ("type", "is_active", "location")
    search_fields = ("name", "location__name")
    inlines = [ScheduleInline]


@admin.register(Schedule)
class ScheduleAdmin(admin.ModelAdmin):
    list_display = ("resource", "day_of_week", "start_time", "end_time", "is_active")
    list_filter = ("day_of_week", "is_active", "location")


@admin.register(Block)
class BlockAdmin(admin.ModelAdmin):
    list_display = ("type", "resource", "location", "start_time", "end_time")
    list_filter = ("type", "location")
    date_hierarchy = "start_time"
