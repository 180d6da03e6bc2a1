"""
Email rendering for inquiries.

Bodies are Django templates under ``inquiries/emails/``. Option values are
turned into their display labels through the shared form option registry so
emails always match what the customer picked in the form.
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings
from django.template.loader import render_to_string
from django.urls import reverse

from framing_schemas import BUSINESS, get_form_options

from .models import BusinessInquiry, ContactSubmission, QuoteRequest


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    html: str


def admin_url(record: QuoteRequest | ContactSubmission | BusinessInquiry) -> str:
    """Absolute link to the record's change page in the Django admin."""
    opts = record._meta
    path = reverse(
        f"admin:{opts.app_label}_{opts.model_name}_change", args=[record.pk]
    )
    return f"{settings.SITE_URL.rstrip('/')}{path}"


def photo_note(count: int, attached: bool) -> str:
    if not count:
        return ""
    noun = "photo" if count == 1 else "photos"
    if attached:
        return f"{count} {noun} attached"
    return f"{count} {noun} received but too large to attach - ask for a link"


def _render(template: str, context: dict[str, Any]) -> str:
    return render_to_string(
        f"inquiries/emails/{template}", {"business": BUSINESS, **context}
    )


def _quote_context(quote: QuoteRequest, attached: bool) -> dict[str, Any]:
    options = get_form_options()
    return {
        "quote": quote,
        "size": quote.size_display,
        "style": options.label_for("styles", quote.style_preference),
        "matting": options.label_for("matting", quote.matting),
        "protection": options.label_for("protection", quote.protection),
        "budget": options.label_for("budget", quote.budget_range),
        "timeline": options.label_for("timeline", quote.timeline),
        "services": ", ".join(options.labels_for("services", quote.services)),
        "preferred_contact": options.label_for(
            "contact_methods", quote.preferred_contact
        ),
        "photo_note": photo_note(quote.image_count, attached),
    }


def quote_customer_email(quote: QuoteRequest, attached: bool) -> RenderedEmail:
    return RenderedEmail(
        subject="We received your quote request!",
        html=_render("quote_customer.html", _quote_context(quote, attached)),
    )


def quote_admin_email(quote: QuoteRequest, attached: bool) -> RenderedEmail:
    context = _quote_context(quote, attached)
    context["admin_url"] = admin_url(quote)
    return RenderedEmail(
        subject=f"New Quote Request: {quote.category} from {quote.name}",
        html=_render("quote_admin.html", context),
    )


def business_customer_email(inquiry: BusinessInquiry) -> RenderedEmail:
    return RenderedEmail(
        subject="We received your business inquiry!",
        html=_render("business_customer.html", {"inquiry": inquiry}),
    )


def business_admin_email(inquiry: BusinessInquiry, attached: bool) -> RenderedEmail:
    return RenderedEmail(
        subject=f"Business Inquiry: {inquiry.business_name}",
        html=_render(
            "business_admin.html",
            {
                "inquiry": inquiry,
                "photo_note": photo_note(inquiry.image_count, attached),
                "admin_url": admin_url(inquiry),
            },
        ),
    )


def contact_customer_email(submission: ContactSubmission) -> RenderedEmail:
    return RenderedEmail(
        subject=f"Thanks for contacting {BUSINESS.name}",
        html=_render("contact_customer.html", {"submission": submission}),
    )


def contact_admin_email(submission: ContactSubmission) -> RenderedEmail:
    return RenderedEmail(
        subject=(
            f"Contact Form: {submission.subject or 'New message'} "
            f"from {submission.name}"
        ),
        html=_render(
            "contact_admin.html",
            {"submission": submission, "admin_url": admin_url(submission)},
        ),
    )
