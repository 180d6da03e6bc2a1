"""
Decorators for public API request handling.
"""

import hmac
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse


def cors_headers() -> dict[str, str]:
    """CORS headers for the marketing site's browser calls."""
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOWED_ORIGIN,
        "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
    }


def json_response(data: dict[str, Any], status: int = 200) -> JsonResponse:
    """Create a JSON response with CORS headers."""
    response = JsonResponse(data, status=status)
    for key, value in cors_headers().items():
        response[key] = value
    return response


def api_endpoint(view_func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for public JSON endpoints.

    Answers CORS preflight (OPTIONS) with 204 and adds CORS headers to
    every response the view returns.

    Usage:
        @csrf_exempt
        @api_endpoint
        def quote(request):
            ...
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
        if request.method == "OPTIONS":
            response: HttpResponse = HttpResponse(status=204)
        else:
            response = view_func(request, *args, **kwargs)

        for key, value in cors_headers().items():
            response[key] = value
        return response

    return wrapper


def body_size_limit(view_func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator that rejects oversized request bodies with 413.

    Mirrors the body ceiling of the hosting platform so clients see the same
    status locally. Checked against Content-Length before the body is read.
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
        try:
            length = int(request.META.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0

        if length > settings.MAX_REQUEST_BODY_BYTES:
            limit_mb = settings.MAX_REQUEST_BODY_BYTES / (1024 * 1024)
            return json_response(
                {"error": f"Request body exceeds the {limit_mb:.1f}MB limit"},
                status=413,
            )

        return view_func(request, *args, **kwargs)

    return wrapper


def staff_or_token_required(view_func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for admin-only JSON endpoints.

    Allows logged-in staff users, or callers presenting
    ``Authorization: Bearer <ADMIN_API_TOKEN>`` when a token is configured.
    Everyone else gets a JSON 401.
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated and user.is_staff:
            return view_func(request, *args, **kwargs)

        token = settings.ADMIN_API_TOKEN
        header = request.headers.get("Authorization", "")
        if token and hmac.compare_digest(header, f"Bearer {token}"):
            return view_func(request, *args, **kwargs)

        return json_response({"error": "Authentication required"}, status=401)

    return wrapper
