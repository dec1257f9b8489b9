# apps/resourcesapp/apps.py
from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ResourcesAppConfig(AppConfig):
    name = "apps.resourcesapp"
    verbose_name = _("Resources & Schedules")
