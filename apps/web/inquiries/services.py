"""
Inquiry services - email via Resend, chat-ops notices via an incoming webhook.
"""

import logging
from collections.abc import Sequence

from django.conf import settings

import httpx
import resend

from .parsing import Attachment

logger = logging.getLogger(__name__)


class EmailError(Exception):
    """Raised when email sending fails."""

    pass


class NotificationError(Exception):
    """Raised when the chat webhook call fails."""

    pass


def attachments_fit(attachments: Sequence[Attachment]) -> bool:
    """True when the photos are small enough to ride along on an email."""
    total = sum(a.size for a in attachments)
    return total < settings.EMAIL_ATTACHMENT_LIMIT_BYTES


def send_email(
    to_email: str,
    subject: str,
    html: str,
    attachments: Sequence[Attachment] = (),
    reply_to: str = "",
) -> str:
    """
    Send an HTML email via Resend.

    Args:
        to_email: Recipient email address
        subject: Email subject
        html: Rendered HTML body
        attachments: Photos to attach (bytes are sent inline)
        reply_to: Optional Reply-To address (the customer, for admin mail)

    Returns:
        Resend email ID

    Raises:
        EmailError: If sending fails
    """
    if not to_email:
        raise EmailError("Recipient email address is required")

    if not subject:
        raise EmailError("Email subject is required")

    api_key = getattr(settings, "RESEND_API_KEY", None)
    if not api_key:
        raise EmailError("Resend API key not configured")

    resend.api_key = api_key

    try:
        email_params: dict[str, object] = {
            "from": settings.EMAIL_FROM,
            "to": [to_email],
            "subject": subject,
            "html": html,
        }

        if reply_to:
            email_params["reply_to"] = reply_to

        if attachments:
            email_params["attachments"] = [
                {"filename": a.filename, "content": list(a.content)}
                for a in attachments
            ]

        response = resend.Emails.send(email_params)  # type: ignore[arg-type]

        email_id = response.get("id", "") if isinstance(response, dict) else ""

        logger.info(
            "Sent email to %s (%d attachments, ID: %s)",
            to_email,
            len(attachments),
            email_id,
        )

        return str(email_id)

    except Exception as e:
        logger.exception("Failed to send email to %s: %s", to_email, e)
        raise EmailError(f"Failed to send email: {e}") from e


def post_chat_notification(text: str, http_client: httpx.Client | None = None) -> None:
    """
    Post a one-line notice to the configured chat webhook (Slack format).

    Raises:
        NotificationError: If no webhook is configured or the call fails
    """
    url = getattr(settings, "SLACK_WEBHOOK_URL", "")
    if not url:
        raise NotificationError("Chat webhook URL not configured")

    client = http_client or httpx.Client(timeout=10.0)
    try:
        response = client.post(url, json={"text": text})
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.exception("Chat webhook call failed: %s", e)
        raise NotificationError(f"Chat webhook call failed: {e}") from e
    finally:
        if http_client is None:
            client.close()

    logger.info("Posted chat notification (%d chars)", len(text))
