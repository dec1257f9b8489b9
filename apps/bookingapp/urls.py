# apps/bookingapp/urls.py
from django.urls import path

from apps.bookingapp.views import (
    AvailabilitySummaryView,
    AvailabilityView,
    EnhancedAvailabilityView,
)

urlpatterns = [
    path("", AvailabilityView.as_view(), name="availability"),
    path("enhanced/", EnhancedAvailabilityView.as_view(), name="availability-enhanced"),
    path("summary/", AvailabilitySummaryView.as_view(), name="availability-summary"),
]
