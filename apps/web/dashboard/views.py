"""
Dashboard views - staff sign-in, submission overview and quote export.

Full page views return complete HTML on initial load.
HTMX requests for the quote table return just the table partial.
"""

import csv

from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth import authenticate, login, logout
from django.db.models import Q, QuerySet
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_GET, require_http_methods

from apps.web.inquiries.models import (
    BusinessInquiry,
    ContactSubmission,
    QuoteRequest,
    SubmissionStatus,
)
from framing_schemas import get_form_options

CSV_COLUMNS = ["ID", "Name", "Email", "Phone", "Category", "Status", "Created"]

staff_required = staff_member_required(login_url="dashboard:login")


@require_http_methods(["GET", "POST"])
def login_view(request: HttpRequest) -> HttpResponse:
    """
    GET/POST /dashboard/login/

    Login page with username/password form. Only staff accounts get in.
    """
    if request.user.is_authenticated and request.user.is_staff:
        return redirect("dashboard:home")

    error = None

    if request.method == "POST":
        username = request.POST.get("username", "").strip()
        password = request.POST.get("password", "")

        user = authenticate(request, username=username, password=password)
        if user is None:
            error = "Invalid username or password"
        elif not user.is_staff:
            error = "This account does not have dashboard access"
        else:
            login(request, user)
            next_url = request.GET.get("next", "")
            if not url_has_allowed_host_and_scheme(
                next_url,
                allowed_hosts={request.get_host()},
                require_https=request.is_secure(),
            ):
                next_url = "dashboard:home"
            return redirect(next_url)

    return render(request, "dashboard/login.html", {"error": error})


@require_GET
def logout_view(request: HttpRequest) -> HttpResponse:
    """
    GET /dashboard/logout/

    Logout and redirect to login page.
    """
    logout(request)
    return redirect("dashboard:login")


def _filtered_quotes(request: HttpRequest) -> tuple[QuerySet[QuoteRequest], str, str]:
    """Apply the ``status`` and ``q`` query params to the quote listing."""
    quotes = QuoteRequest.objects.order_by("-created_at")

    status = request.GET.get("status", "")
    if status in SubmissionStatus.values:
        quotes = quotes.filter(status=status)
    else:
        status = ""

    query = request.GET.get("q", "").strip()
    if query:
        quotes = quotes.filter(Q(name__icontains=query) | Q(email__icontains=query))

    return quotes, status, query


@staff_required
@require_GET
def home(request: HttpRequest) -> HttpResponse:
    """
    GET /dashboard/?status=NEW&q=smith

    Quick stats plus the quote request table.
    - Full page on initial load (non-HTMX)
    - Just the table partial on HTMX requests
    """
    quotes, status, query = _filtered_quotes(request)

    context = {
        "quotes": quotes[:100],
        "current_status": status,
        "query": query,
        "statuses": get_form_options().statuses,
    }

    if request.headers.get("HX-Request"):
        return render(request, "dashboard/partials/quote_table.html", context)

    context["stats"] = [
        {
            "title": "New quotes",
            "value": QuoteRequest.objects.with_status(SubmissionStatus.NEW).count(),
        },
        {"title": "Total quotes", "value": QuoteRequest.objects.count()},
        {
            "title": "New messages",
            "value": ContactSubmission.objects.with_status(
                SubmissionStatus.NEW
            ).count(),
        },
        {
            "title": "Business inquiries",
            "value": BusinessInquiry.objects.with_status(SubmissionStatus.NEW).count(),
        },
    ]
    return render(request, "dashboard/home.html", context)


@staff_required
@require_GET
def export_quotes(request: HttpRequest) -> HttpResponse:
    """
    GET /dashboard/quotes/export/?status=NEW&q=smith

    The filtered quote table as a CSV download.
    """
    quotes, _status, _query = _filtered_quotes(request)

    filename = f"quote-requests-{timezone.localdate().isoformat()}.csv"
    response = HttpResponse(content_type="text/csv")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'

    writer = csv.writer(response)
    writer.writerow(CSV_COLUMNS)
    for quote in quotes:
        writer.writerow(
            [
                quote.pk,
                quote.name,
                quote.email,
                quote.phone,
                quote.category,
                quote.status,
                quote.created_at.date().isoformat(),
            ]
        )
    return response
