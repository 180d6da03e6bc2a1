"""
Tests for inquiry services (email sending, chat webhook).
"""

import json
from unittest.mock import patch

import httpx
import pytest
import respx

from apps.web.inquiries.services import (
    EmailError,
    NotificationError,
    attachments_fit,
    post_chat_notification,
    send_email,
)

from .factories import make_attachment

WEBHOOK_URL = "https://hooks.slack.test/services/T000/B000/XXX"


class TestSendEmail:
    """Tests for email sending via Resend."""

    def test_send_email_success(self) -> None:
        """Successful email sending should return email ID."""
        with patch("apps.web.inquiries.services.resend") as mock_resend:
            mock_resend.Emails.send.return_value = {"id": "email_123abc"}

            with patch("apps.web.inquiries.services.settings") as mock_settings:
                mock_settings.RESEND_API_KEY = "test_api_key"
                mock_settings.EMAIL_FROM = "Model Home Art <hello@example.com>"

                email_id = send_email(
                    "customer@example.com",
                    "We received your quote request!",
                    "<p>Thanks!</p>",
                )

        assert email_id == "email_123abc"
        call_args = mock_resend.Emails.send.call_args[0][0]
        assert call_args["to"] == ["customer@example.com"]
        assert call_args["from"] == "Model Home Art <hello@example.com>"
        assert call_args["html"] == "<p>Thanks!</p>"
        assert "attachments" not in call_args
        assert "reply_to" not in call_args

    def test_send_email_with_attachments_and_reply_to(self) -> None:
        """Attachments are sent as byte lists; reply_to is passed through."""
        with patch("apps.web.inquiries.services.resend") as mock_resend:
            mock_resend.Emails.send.return_value = {"id": "email_456def"}

            with patch("apps.web.inquiries.services.settings") as mock_settings:
                mock_settings.RESEND_API_KEY = "test_api_key"

                send_email(
                    "shop@example.com",
                    "New Quote Request",
                    "<p>Quote</p>",
                    attachments=[make_attachment("a.jpg", size=3)],
                    reply_to="customer@example.com",
                )

        call_args = mock_resend.Emails.send.call_args[0][0]
        assert call_args["reply_to"] == "customer@example.com"
        assert call_args["attachments"] == [
            {"filename": "a.jpg", "content": [255, 255, 255]}
        ]

    def test_send_email_no_recipient(self) -> None:
        with pytest.raises(EmailError, match="Recipient email address is required"):
            send_email("", "Subject", "<p>Body</p>")

    def test_send_email_no_subject(self) -> None:
        with pytest.raises(EmailError, match="Email subject is required"):
            send_email("test@example.com", "", "<p>Body</p>")

    def test_send_email_no_api_key(self) -> None:
        """Should raise error if Resend API key not configured."""
        with patch("apps.web.inquiries.services.settings") as mock_settings:
            mock_settings.RESEND_API_KEY = ""

            with pytest.raises(EmailError, match="Resend API key not configured"):
                send_email("test@example.com", "Subject", "<p>Body</p>")

    def test_send_email_api_error(self) -> None:
        """Should raise error if Resend API fails."""
        with patch("apps.web.inquiries.services.resend") as mock_resend:
            mock_resend.Emails.send.side_effect = Exception("API error")

            with patch("apps.web.inquiries.services.settings") as mock_settings:
                mock_settings.RESEND_API_KEY = "test_api_key"

                with pytest.raises(EmailError, match="Failed to send email"):
                    send_email("test@example.com", "Subject", "<p>Body</p>")


class TestAttachmentsFit:
    def test_under_limit(self, settings) -> None:
        settings.EMAIL_ATTACHMENT_LIMIT_BYTES = 100
        assert attachments_fit([make_attachment(size=40), make_attachment(size=59)])

    def test_at_limit_does_not_fit(self, settings) -> None:
        settings.EMAIL_ATTACHMENT_LIMIT_BYTES = 100
        assert not attachments_fit([make_attachment(size=100)])


class TestPostChatNotification:
    """Tests for the chat webhook notice."""

    @respx.mock
    def test_posts_text_payload(self, settings) -> None:
        settings.SLACK_WEBHOOK_URL = WEBHOOK_URL
        route = respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(200))

        post_chat_notification("New quote request #1")

        assert route.called
        assert json.loads(route.calls.last.request.content) == {
            "text": "New quote request #1"
        }

    def test_not_configured(self, settings) -> None:
        settings.SLACK_WEBHOOK_URL = ""

        with pytest.raises(NotificationError, match="not configured"):
            post_chat_notification("hello")

    @respx.mock
    def test_webhook_error(self, settings) -> None:
        settings.SLACK_WEBHOOK_URL = WEBHOOK_URL
        respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(NotificationError, match="Chat webhook call failed"):
            post_chat_notification("hello")

    @respx.mock
    def test_uses_injected_client(self, settings) -> None:
        settings.SLACK_WEBHOOK_URL = WEBHOOK_URL
        respx.post(WEBHOOK_URL).mock(return_value=httpx.Response(200))
        client = httpx.Client()

        post_chat_notification("hello", http_client=client)

        assert not client.is_closed
        client.close()
