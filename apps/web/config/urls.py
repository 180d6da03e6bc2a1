"""
URL configuration for the Model Home Art site.
"""

from django.contrib import admin
from django.urls import include, path

admin.site.site_header = "Model Home Art admin"

urlpatterns = [
    path("admin/", admin.site.urls),
    path("dashboard/", include("apps.web.dashboard.urls")),
    # Public API endpoints
    path("api/", include("apps.web.inquiries.urls")),
    path("api/", include("apps.web.shop.urls")),
]
