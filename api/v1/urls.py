# api/v1/urls.py
from django.urls import include, path

# API URLs
urlpatterns = [
    path("availability/", include("apps.bookingapp.urls")),
]
