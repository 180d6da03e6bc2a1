"""
Tests for dashboard views.
"""

import csv
import io

from django.test import Client as DjangoTestClient
from django.urls import reverse

import pytest

from apps.web.inquiries.models import SubmissionStatus
from apps.web.inquiries.tests.factories import (
    BusinessInquiryFactory,
    ContactSubmissionFactory,
    QuoteRequestFactory,
)


@pytest.mark.django_db
class TestLoginView:
    """Tests for the login view."""

    def test_login_page_renders(self):
        """Login page should render for anonymous users."""
        http_client = DjangoTestClient()
        response = http_client.get(reverse("dashboard:login"))
        assert response.status_code == 200
        assert b"Sign in" in response.content

    def test_login_redirects_staff_user(self, staff_client):
        """Signed-in staff should be redirected to home."""
        response = staff_client.get(reverse("dashboard:login"))
        assert response.status_code == 302
        assert response.url == reverse("dashboard:home")

    def test_login_with_valid_credentials(self, staff_user):
        """Valid staff credentials should log in and redirect."""
        http_client = DjangoTestClient()
        response = http_client.post(
            reverse("dashboard:login"),
            {"username": "staff", "password": "testpass123"},
        )
        assert response.status_code == 302
        assert response.url == reverse("dashboard:home")

    def test_login_with_invalid_credentials(self, staff_user):
        """Invalid credentials should show error."""
        http_client = DjangoTestClient()
        response = http_client.post(
            reverse("dashboard:login"),
            {"username": "staff", "password": "wrongpass"},
        )
        assert response.status_code == 200
        assert b"Invalid username or password" in response.content

    def test_non_staff_user_is_refused(self, user):
        """Accounts without staff rights cannot sign in."""
        http_client = DjangoTestClient()
        response = http_client.post(
            reverse("dashboard:login"),
            {"username": "testuser", "password": "testpass123"},
        )
        assert response.status_code == 200
        assert b"does not have dashboard access" in response.content

    def test_login_respects_next_parameter(self, staff_user):
        """Login should redirect to 'next' URL after success."""
        http_client = DjangoTestClient()
        next_url = "/dashboard/quotes/export/"
        response = http_client.post(
            f"{reverse('dashboard:login')}?next={next_url}",
            {"username": "staff", "password": "testpass123"},
        )
        assert response.status_code == 302
        assert response.url == next_url

    def test_login_ignores_offsite_next(self, staff_user):
        """An absolute URL on another host falls back to home."""
        http_client = DjangoTestClient()
        response = http_client.post(
            f"{reverse('dashboard:login')}?next=//evil.example.com/",
            {"username": "staff", "password": "testpass123"},
        )
        assert response.url == reverse("dashboard:home")


@pytest.mark.django_db
class TestLogoutView:
    """Tests for the logout view."""

    def test_logout_logs_out_user(self, staff_client):
        """Logout should log out user and redirect to login."""
        response = staff_client.get(reverse("dashboard:logout"))
        assert response.status_code == 302
        assert response.url == reverse("dashboard:login")

        # Verify user is logged out
        response = staff_client.get(reverse("dashboard:home"))
        assert response.status_code == 302


@pytest.mark.django_db
class TestHomeView:
    """Tests for the dashboard home view."""

    def test_home_requires_authentication(self):
        """Home page should redirect anonymous users to login."""
        http_client = DjangoTestClient()
        response = http_client.get(reverse("dashboard:home"))
        assert response.status_code == 302
        assert "login" in response.url

    def test_home_requires_staff(self, user):
        http_client = DjangoTestClient()
        http_client.force_login(user)
        response = http_client.get(reverse("dashboard:home"))
        assert response.status_code == 302

    def test_home_renders_for_staff(self, staff_client):
        response = staff_client.get(reverse("dashboard:home"))
        assert response.status_code == 200
        assert b"Welcome back" in response.content
        assert b"staff" in response.content

    def test_home_shows_stats(self, staff_client):
        QuoteRequestFactory.create_batch(2, status=SubmissionStatus.NEW)
        QuoteRequestFactory(status=SubmissionStatus.CLOSED)
        ContactSubmissionFactory()
        BusinessInquiryFactory()

        response = staff_client.get(reverse("dashboard:home"))

        stats = {s["title"]: s["value"] for s in response.context["stats"]}
        assert stats == {
            "New quotes": 2,
            "Total quotes": 3,
            "New messages": 1,
            "Business inquiries": 1,
        }

    def test_status_filter_and_search(self, staff_client):
        QuoteRequestFactory(name="Alex Smith", status=SubmissionStatus.QUOTED)
        QuoteRequestFactory(name="Alex Jones", status=SubmissionStatus.NEW)
        QuoteRequestFactory(name="Sam Smith", status=SubmissionStatus.NEW)

        response = staff_client.get(
            reverse("dashboard:home"), {"status": "NEW", "q": "smith"}
        )

        assert [q.name for q in response.context["quotes"]] == ["Sam Smith"]

    def test_htmx_returns_table_partial(self, staff_client):
        QuoteRequestFactory(name="Alex Smith")

        response = staff_client.get(reverse("dashboard:home"), HTTP_HX_REQUEST="true")

        assert b"Alex Smith" in response.content
        assert b"Welcome back" not in response.content


@pytest.mark.django_db
class TestExportQuotes:
    """Tests for the CSV export."""

    def test_export_requires_staff(self):
        http_client = DjangoTestClient()
        response = http_client.get(reverse("dashboard:export_quotes"))
        assert response.status_code == 302

    def test_export_filtered_quotes(self, staff_client):
        QuoteRequestFactory(name="Alex Smith", status=SubmissionStatus.QUOTED)
        QuoteRequestFactory(name="Sam Smith", status=SubmissionStatus.NEW)

        response = staff_client.get(
            reverse("dashboard:export_quotes"), {"status": "QUOTED"}
        )

        assert response["Content-Type"] == "text/csv"
        assert "attachment;" in response["Content-Disposition"]
        rows = list(csv.reader(io.StringIO(response.content.decode())))
        assert rows[0] == [
            "ID",
            "Name",
            "Email",
            "Phone",
            "Category",
            "Status",
            "Created",
        ]
        assert len(rows) == 2
        assert rows[1][1] == "Alex Smith"
        assert rows[1][5] == "QUOTED"
