# apps/offeringsapp/apps.py
from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class OfferingsAppConfig(AppConfig):
    name = "apps.offeringsapp"
    verbose_name = _("Offerings")
