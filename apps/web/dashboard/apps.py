"""Django app configuration for the staff dashboard."""

from django.apps import AppConfig


class DashboardConfig(AppConfig):
    """Dashboard app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.dashboard"
    verbose_name = "Dashboard"
