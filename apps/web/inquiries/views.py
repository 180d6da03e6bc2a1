"""
Inquiry API views - public form endpoints for the marketing site.

POST /api/quote              Quote wizard submission (up to 3 photos)
GET  /api/quote              Staff listing of quote requests
POST /api/contact            Contact page message
POST /api/business-inquiry   Business pricing request (up to 5 photos)

Records are saved first; emails and chat notices are best-effort and never
turn a saved submission into an error response.
"""

import logging
from typing import Any, TypeVar

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from apps.web.core.decorators import (
    api_endpoint,
    body_size_limit,
    json_response,
    staff_or_token_required,
)
from framing_schemas import (
    BusinessInquirySubmission,
    ContactFormSubmission,
    QuoteFormFields,
)

from .models import (
    BusinessInquiry,
    ContactSubmission,
    QuoteRequest,
    SubmissionStatus,
    image_placeholders,
)
from .notifications import (
    notify_business_inquiry,
    notify_contact_submission,
    notify_quote_request,
)
from .parsing import (
    BadRequestError,
    ParsedSubmission,
    PayloadTooLargeError,
    parse_submission,
)
from .serializers import (
    Pagination,
    QuoteListResponse,
    QuoteRequestSchema,
    SubmissionResponse,
    ValidationErrorDetail,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

QUOTE_MAX_IMAGES = 3
BUSINESS_MAX_IMAGES = 5

FormT = TypeVar("FormT", bound=BaseModel)


class _Rejected(Exception):
    """Carries the error response for a submission that cannot be saved."""

    def __init__(self, response: JsonResponse) -> None:
        self.response = response
        super().__init__(response.status_code)


def _server_error(message: str, exc: Exception) -> JsonResponse:
    """500 response; the exception class is exposed only in DEBUG."""
    data: dict[str, Any] = {"error": message}
    if settings.DEBUG:
        data["code"] = type(exc).__name__
    return json_response(data, status=500)


def _read_submission(
    request: HttpRequest, schema: type[FormT], max_images: int
) -> tuple[FormT, ParsedSubmission]:
    """
    Parse and validate a submission body.

    Raises:
        _Rejected: With a 400/413 response when the body is unusable
    """
    try:
        parsed = parse_submission(request, max_images)
    except PayloadTooLargeError:
        raise _Rejected(
            json_response({"error": "Request body is too large"}, status=413)
        ) from None
    except BadRequestError as e:
        logger.info("Rejected %s: %s", request.path, e.message)
        raise _Rejected(json_response({"error": e.message}, status=400)) from e

    missing = schema.missing_fields(parsed.fields)  # type: ignore[attr-defined]
    if missing:
        logger.info("Rejected %s: missing %s", request.path, ", ".join(missing))
        raise _Rejected(
            json_response({"error": "Missing required fields"}, status=400)
        )

    try:
        submission = schema.model_validate(parsed.fields)
    except PydanticValidationError as e:
        errors = [
            ValidationErrorDetail(
                field=".".join(str(loc) for loc in err["loc"]),
                message=err["msg"],
            )
            for err in e.errors()
        ]
        response = ValidationErrorResponse(error="validation_error", details=errors)
        raise _Rejected(json_response(response.model_dump(), status=400)) from e

    return submission, parsed


# =============================================================================
# Quote requests
# =============================================================================


@csrf_exempt
@api_endpoint
@require_http_methods(["GET", "POST"])
def quotes(request: HttpRequest) -> JsonResponse:
    """
    GET  /api/quote - paginated listing (staff only)
    POST /api/quote - create a quote request
    """
    if request.method == "GET":
        return list_quotes(request)
    return create_quote(request)


@body_size_limit
def create_quote(request: HttpRequest) -> JsonResponse:
    """
    POST /api/quote

    Request body: multipart ``formData`` + ``image0..image2``, or legacy JSON
    with ``images`` as data URLs.
    Response: SubmissionResponse (200), error (400/413/500)
    """
    try:
        form, parsed = _read_submission(request, QuoteFormFields, QUOTE_MAX_IMAGES)
    except _Rejected as rejected:
        return rejected.response

    try:
        quote = QuoteRequest.objects.create(
            **form.model_dump(),
            images=image_placeholders(len(parsed.attachments)),
        )
    except DatabaseError as e:
        logger.exception("Failed to save quote request: %s", e)
        return _server_error("Failed to submit quote request", e)

    logger.info(
        "Created quote request %s (%s, %d photos via %s)",
        quote.pk,
        quote.category,
        len(parsed.attachments),
        parsed.transport,
    )

    notify_quote_request(quote, parsed.attachments)

    return json_response(SubmissionResponse(id=quote.pk).to_response())


def _int_param(request: HttpRequest, name: str, default: int) -> int:
    raw = request.GET.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise _Rejected(
            json_response({"error": f"'{name}' must be a whole number"}, status=400)
        ) from e


@staff_or_token_required
def list_quotes(request: HttpRequest) -> JsonResponse:
    """
    GET /api/quote?status=NEW&page=1&limit=20

    Newest first. ``limit`` is clamped to [1, 100].
    Response: QuoteListResponse
    """
    status = request.GET.get("status") or None
    if status and status not in SubmissionStatus.values:
        return json_response({"error": f"Unknown status '{status}'"}, status=400)

    try:
        page_number = _int_param(request, "page", 1)
        limit = _int_param(request, "limit", 20)
    except _Rejected as rejected:
        return rejected.response

    try:
        page = QuoteRequest.objects.with_status(status).paginate(page_number, limit)
    except DatabaseError as e:
        logger.exception("Failed to list quote requests: %s", e)
        return _server_error("Failed to fetch quotes", e)

    response = QuoteListResponse(
        quotes=[QuoteRequestSchema.model_validate(q) for q in page.items],
        pagination=Pagination(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        ),
    )
    return json_response(response.to_response())


# =============================================================================
# Contact messages
# =============================================================================


@csrf_exempt
@api_endpoint
@require_http_methods(["POST"])
@body_size_limit
def contact(request: HttpRequest) -> JsonResponse:
    """
    POST /api/contact

    Request body: JSON (or a url-encoded form) with name, email, message and
    optional phone/subject.
    Response: SubmissionResponse (200), error (400/500)
    """
    try:
        form, _parsed = _read_submission(request, ContactFormSubmission, 0)
    except _Rejected as rejected:
        return rejected.response

    try:
        submission = ContactSubmission.objects.create(**form.model_dump())
    except DatabaseError as e:
        logger.exception("Failed to save contact message: %s", e)
        return _server_error("Failed to submit message", e)

    logger.info("Created contact message %s", submission.pk)

    notify_contact_submission(submission)

    return json_response(SubmissionResponse(id=submission.pk).to_response())


# =============================================================================
# Business inquiries
# =============================================================================


@csrf_exempt
@api_endpoint
@require_http_methods(["POST"])
@body_size_limit
def business_inquiry(request: HttpRequest) -> JsonResponse:
    """
    POST /api/business-inquiry

    Request body: multipart ``formData`` + ``image0..image4``, or JSON.
    Response: SubmissionResponse (200), error (400/413/500)
    """
    try:
        form, parsed = _read_submission(
            request, BusinessInquirySubmission, BUSINESS_MAX_IMAGES
        )
    except _Rejected as rejected:
        return rejected.response

    try:
        inquiry = BusinessInquiry.objects.create(
            **form.model_dump(),
            images=image_placeholders(len(parsed.attachments)),
        )
    except DatabaseError as e:
        logger.exception("Failed to save business inquiry: %s", e)
        return _server_error("Failed to submit inquiry", e)

    logger.info(
        "Created business inquiry %s (%s, %d photos)",
        inquiry.pk,
        inquiry.business_name,
        len(parsed.attachments),
    )

    notify_business_inquiry(inquiry, parsed.attachments)

    return json_response(SubmissionResponse(id=inquiry.pk).to_response())
