# apps/organizationsapp/apps.py
from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class OrganizationsAppConfig(AppConfig):
    name = "apps.organizationsapp"
    verbose_name = _("Organizations")
