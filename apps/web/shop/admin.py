"""Admin registrations for shop models."""

from django.contrib import admin

from .models import Collection, Product


class ProductInline(admin.TabularInline):  # type: ignore[type-arg]
    model = Product
    fields = ["name", "slug", "price", "in_stock", "inventory", "featured"]
    extra = 0


@admin.register(Collection)
class CollectionAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "slug", "featured", "display_order"]
    list_editable = ["featured", "display_order"]
    prepopulated_fields = {"slug": ["name"]}
    inlines = [ProductInline]


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "collection", "price", "in_stock", "inventory", "featured"]
    list_filter = ["collection", "in_stock", "featured"]
    search_fields = ["name", "slug", "description"]
    prepopulated_fields = {"slug": ["name"]}
    readonly_fields = ["created_at", "updated_at"]
