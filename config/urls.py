"""
URL configuration for the district grievance service.
"""

from django.contrib import admin
from django.urls import path, include
from grievances.api.health import health_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/", include("grievances.api.urls")),
    path("health", health_check, name="health_check"),
]
