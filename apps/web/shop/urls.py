"""
URL routing for shop API endpoints.

Catalog endpoints are public and cacheable; cart endpoints are session-scoped.
"""

from django.urls import path, re_path

from apps.web.shop import views

app_name = "shop"

urlpatterns = [
    # Catalog
    path("shop/collections/", views.collection_list, name="collection_list"),
    path(
        "shop/collections/<slug:slug>/",
        views.collection_detail,
        name="collection_detail",
    ),
    path("shop/products/", views.product_list, name="product_list"),
    path("shop/products/<slug:slug>/", views.product_detail, name="product_detail"),
    # Cart
    path("cart/", views.cart, name="cart"),
    path("cart/items/", views.cart_items, name="cart_items"),
    path("cart/items/<str:item_id>/", views.cart_item, name="cart_item"),
    re_path(
        r"^cart/(?P<action>open|close|toggle)/$", views.cart_panel, name="cart_panel"
    ),
]
