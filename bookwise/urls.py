"""Bookwise project URL configuration."""

import logging

from django.contrib import admin
from django.db import DatabaseError
from django.http import JsonResponse
from django.urls import include, path
from django.utils import timezone

from api.documentation.swagger import swagger_urlpatterns
from apps.organizationsapp.models import Organization

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Health check endpoint
# -----------------------------------------------------------------------------
def health(request):
    """Health-check endpoint used by load-balancers / uptime checks.

    Runs a cheap query so an unreachable database reports as unhealthy.
    """
    try:
        Organization.objects.exists()
    except DatabaseError as e:
        logger.error(f"Health check failed: {str(e)}")
        return JsonResponse(
            {"status": "error", "message": "Database connection failed"},
            status=500,
        )

    return JsonResponse(
        {
            "status": "ok",
            "database": "connected",
            "timestamp": timezone.now().isoformat(),
        }
    )


# -----------------------------------------------------------------------------
# URL patterns
# -----------------------------------------------------------------------------
urlpatterns = [
    # Django admin
    path("admin/", admin.site.urls),
    # Application API (versioned)
    path("api/v1/", include("api.v1.urls")),
    # API documentation
    path("api/docs/", include(swagger_urlpatterns)),
    path("health/", health, name="health_check"),
]
