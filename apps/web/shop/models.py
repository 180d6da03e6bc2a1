"""
Shop models - ready-made frame collections and products.

Prices are whole cents, the same unit the cart and shipping policy use.
"""

from django.db import models


class Collection(models.Model):
    """A themed group of products (Modern Frames, Shadow Boxes, ...)."""

    slug = models.SlugField(max_length=100, unique=True)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image_url = models.URLField(blank=True)
    featured = models.BooleanField(default=False)
    display_order = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["display_order", "name"]

    def __str__(self) -> str:
        return self.name


class Product(models.Model):
    """A frame sold online in one or more sizes at a single price."""

    collection = models.ForeignKey(
        Collection,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    slug = models.SlugField(max_length=100, unique=True)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    price = models.PositiveIntegerField(help_text="Price in cents")
    images = models.JSONField(default=list, blank=True)
    sizes = models.JSONField(default=list, blank=True, help_text='e.g. ["8×10"]')
    materials = models.CharField(max_length=500, blank=True)
    in_stock = models.BooleanField(default=True)
    inventory = models.PositiveIntegerField(default=0)
    featured = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None

    def offers_size(self, size: str) -> bool:
        return size in (self.sizes or [])
