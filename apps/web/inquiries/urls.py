"""
URL routing for the public form endpoints.

Paths have no trailing slash so browser ``fetch`` calls match exactly.
"""

from django.urls import path

from apps.web.inquiries import views

app_name = "inquiries"

urlpatterns = [
    path("quote", views.quotes, name="quote"),
    path("contact", views.contact, name="contact"),
    path("business-inquiry", views.business_inquiry, name="business_inquiry"),
]
