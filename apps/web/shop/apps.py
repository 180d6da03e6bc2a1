"""Django app configuration for the shop module."""

from django.apps import AppConfig


class ShopConfig(AppConfig):
    """Shop app configuration."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.web.shop"
    verbose_name = "Shop"
