"""
Post-save notifications for new submissions.

Every record gets up to three side effects once it is safely in the
database: a confirmation email to the customer, a notification email to the
shop, and a one-line chat notice. Each one is attempted independently and a
failure is logged but never reaches the caller; the submission already
succeeded.
"""

import logging
from collections.abc import Sequence

from django.conf import settings

from . import emails
from .emails import RenderedEmail
from .models import BusinessInquiry, ContactSubmission, QuoteRequest
from .parsing import Attachment
from .services import (
    EmailError,
    NotificationError,
    attachments_fit,
    post_chat_notification,
    send_email,
)

logger = logging.getLogger(__name__)


def _email_enabled() -> bool:
    return bool(settings.RESEND_API_KEY)


def _deliver(
    to_email: str,
    email: RenderedEmail,
    attachments: Sequence[Attachment] = (),
    reply_to: str = "",
) -> bool:
    """Send one email, logging instead of raising. Returns True on success."""
    try:
        send_email(
            to_email,
            email.subject,
            email.html,
            attachments=attachments,
            reply_to=reply_to,
        )
    except EmailError as e:
        logger.warning("Email '%s' to %s not sent: %s", email.subject, to_email, e)
        return False
    return True


def _chat(text: str) -> None:
    if not settings.SLACK_WEBHOOK_URL:
        return
    try:
        post_chat_notification(text)
    except NotificationError as e:
        logger.warning("Chat notice not sent: %s", e)


def notify_quote_request(
    quote: QuoteRequest, attachments: Sequence[Attachment] = ()
) -> None:
    """Customer confirmation, shop notification and chat notice for a quote."""
    if _email_enabled():
        attached = bool(attachments) and attachments_fit(attachments)
        if attachments and not attached:
            logger.info(
                "Quote %s photos too large to attach (%d files)",
                quote.pk,
                len(attachments),
            )
        files = attachments if attached else ()

        _deliver(quote.email, emails.quote_customer_email(quote, attached), files)
        if settings.ADMIN_EMAIL:
            _deliver(
                settings.ADMIN_EMAIL,
                emails.quote_admin_email(quote, attached),
                files,
                reply_to=quote.email,
            )

    _chat(
        f"New quote request #{quote.pk}: {quote.category} from {quote.name} "
        f"({quote.email}), {quote.image_count} photo(s)"
    )


def notify_contact_submission(submission: ContactSubmission) -> None:
    """Shop notification, customer acknowledgement and chat notice."""
    if _email_enabled():
        if settings.ADMIN_EMAIL:
            _deliver(
                settings.ADMIN_EMAIL,
                emails.contact_admin_email(submission),
                reply_to=submission.email,
            )
        _deliver(submission.email, emails.contact_customer_email(submission))

    _chat(
        f"New contact message #{submission.pk} from {submission.name} "
        f"({submission.email}): {submission.subject or 'New message'}"
    )


def notify_business_inquiry(
    inquiry: BusinessInquiry, attachments: Sequence[Attachment] = ()
) -> None:
    """Customer confirmation, shop notification and chat notice for an inquiry."""
    if _email_enabled():
        attached = bool(attachments) and attachments_fit(attachments)
        files = attachments if attached else ()

        _deliver(inquiry.email, emails.business_customer_email(inquiry), files)
        if settings.ADMIN_EMAIL:
            _deliver(
                settings.ADMIN_EMAIL,
                emails.business_admin_email(inquiry, attached),
                files,
                reply_to=inquiry.email,
            )

    _chat(
        f"New business inquiry #{inquiry.pk}: {inquiry.business_name} "
        f"({inquiry.contact_name}, {inquiry.email})"
    )
