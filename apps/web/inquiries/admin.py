"""Admin registrations for inquiry models."""

from django.contrib import admin

from .models import BusinessInquiry, ContactSubmission, QuoteRequest


@admin.register(QuoteRequest)
class QuoteRequestAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "category", "email", "status", "created_at"]
    list_filter = ["status", "category", "timeline"]
    list_editable = ["status"]
    search_fields = ["name", "email", "phone", "description"]
    readonly_fields = ["created_at", "updated_at", "images"]
    fieldsets = [
        (None, {"fields": ["status", "internal_notes"]}),
        (
            "Item",
            {
                "fields": [
                    "category",
                    "description",
                    "width",
                    "height",
                    "not_sure_size",
                    "images",
                    "repairs_needed",
                    "repair_notes",
                ]
            },
        ),
        (
            "Style",
            {"fields": ["style_preference", "matting", "protection", "budget_range"]},
        ),
        ("Service", {"fields": ["timeline", "service", "services", "zip_code"]}),
        ("Contact", {"fields": ["name", "email", "phone", "preferred_contact"]}),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "email", "subject", "status", "created_at"]
    list_filter = ["status"]
    list_editable = ["status"]
    search_fields = ["name", "email", "subject", "message"]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(BusinessInquiry)
class BusinessInquiryAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["business_name", "contact_name", "email", "status", "created_at"]
    list_filter = ["status", "invoicing"]
    list_editable = ["status"]
    search_fields = ["business_name", "contact_name", "email", "project_description"]
    readonly_fields = ["created_at", "updated_at", "images"]
