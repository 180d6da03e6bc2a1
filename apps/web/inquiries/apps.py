"""Django app configuration for the inquiries module."""

from django.apps import AppConfig


class InquiriesConfig(AppConfig):
    """Inquiries app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.inquiries"
    verbose_name = "Inquiries"
