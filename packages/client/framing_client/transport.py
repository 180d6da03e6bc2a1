"""Submission transport - sends completed forms to the site API.

Quote and business-inquiry forms go out as ``multipart/form-data``: every
scalar field is serialized once into a ``formData`` JSON part and each photo
is its own binary part keyed by position (``image0``, ``image1``, ...). With
no photos the same ``formData`` field is sent url-encoded.
Contact messages are plain JSON.
"""

import base64
import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx
from framing_schemas import (
    BusinessInquirySubmission,
    ContactFormSubmission,
    QuoteFormFields,
)

from framing_client.exceptions import SubmissionError
from framing_client.uploads import MAX_UPLOAD_SIZE_MB, UploadFile

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error. Please try again or contact us directly."
NETWORK_ERROR_MESSAGE = "Something went wrong. Please try again."


@dataclass(frozen=True)
class SubmissionResult:
    """Successful submission - the id of the persisted record."""

    id: int | str


def field_label(name: str) -> str:
    """Display label for a wire or Python field name: "zipCode" -> "Zip code"."""
    words = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name).replace("_", " ")
    return " ".join(words.split()).capitalize()


def validation_message(field: str, message: str) -> str:
    """One readable line for a field validation failure."""
    message = message.removeprefix("Value error, ")
    name = field.split(".")[0]
    if not name:
        return message
    return f"{field_label(name)}: {message}"


def encode_data_url(upload: UploadFile) -> str:
    """Encode a file as a ``data:`` URL, the shape legacy JSON clients send."""
    encoded = base64.b64encode(upload.data).decode("ascii")
    return f"data:{upload.content_type};base64,{encoded}"


def _error_text(data: dict[str, Any]) -> str:
    """The user-facing text of an error body; field errors name the field."""
    error = str(data.get("error") or "")
    if error != "validation_error":
        return error
    details = data.get("details")
    if not isinstance(details, list) or not details:
        return ""
    first = details[0] if isinstance(details[0], dict) else {}
    return validation_message(
        str(first.get("field", "")), str(first.get("message", ""))
    )


def _image_parts(images: Sequence[UploadFile]) -> list[tuple[str, Any]]:
    return [
        (f"image{index}", (image.name, image.data, image.content_type))
        for index, image in enumerate(images)
    ]


class FormSubmitter:
    """
    Posts forms to the site API and turns failures into user-facing messages.

    Args:
        base_url: Site origin, e.g. "https://modelhomeart.com".
        http_client: Optional HTTP client for dependency injection (testing).
        production: When False, server diagnostic codes are appended to
            error messages.
        max_upload_mb: Size limit quoted in the payload-too-large message.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.Client | None = None,
        production: bool = False,
        max_upload_mb: int = MAX_UPLOAD_SIZE_MB,
    ) -> None:
        self._client = http_client or httpx.Client(timeout=30.0)
        self._owns_client = http_client is None
        self._base_url = base_url.rstrip("/")
        self._production = production
        self._max_upload_mb = max_upload_mb

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "FormSubmitter":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    # =========================================================================
    # Forms
    # =========================================================================

    def submit_quote(
        self, fields: QuoteFormFields, images: Sequence[UploadFile]
    ) -> SubmissionResult:
        return self._post(
            "/api/quote",
            default_error="Failed to submit quote request",
            too_large_hint="Please use smaller images or fewer photos.",
            data={"formData": json.dumps(fields.to_payload())},
            files=_image_parts(images),
        )

    def submit_business_inquiry(
        self, fields: BusinessInquirySubmission, images: Sequence[UploadFile]
    ) -> SubmissionResult:
        return self._post(
            "/api/business-inquiry",
            default_error="Failed to submit inquiry",
            too_large_hint="Please use smaller images or provide a link instead.",
            data={"formData": json.dumps(fields.to_payload())},
            files=_image_parts(images),
        )

    def submit_contact(self, fields: ContactFormSubmission) -> SubmissionResult:
        return self._post(
            "/api/contact",
            default_error="Failed to submit message",
            too_large_hint="Please shorten your message.",
            json=fields.to_payload(),
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _post(
        self,
        path: str,
        default_error: str,
        too_large_hint: str,
        **request_kwargs: Any,
    ) -> SubmissionResult:
        try:
            response = self._client.post(f"{self._base_url}{path}", **request_kwargs)
        except httpx.HTTPError as e:
            logger.warning("Submission to %s failed: %s", path, e)
            raise SubmissionError(NETWORK_ERROR_MESSAGE) from e

        return self._handle_response(response, default_error, too_large_hint)

    def _handle_response(
        self, response: httpx.Response, default_error: str, too_large_hint: str
    ) -> SubmissionResult:
        if response.status_code == 413:
            raise SubmissionError(
                f"Your photos exceed the {self._max_upload_mb}MB limit. "
                f"{too_large_hint}",
                status_code=413,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise SubmissionError(
                SERVER_ERROR_MESSAGE, status_code=response.status_code
            ) from e

        if not isinstance(data, dict):
            raise SubmissionError(
                SERVER_ERROR_MESSAGE, status_code=response.status_code
            )

        if not response.is_success:
            message = _error_text(data) or default_error
            code = data.get("code")
            if code and not self._production:
                message = f"{message} (Code: {code})"
            raise SubmissionError(message, status_code=response.status_code)

        return SubmissionResult(id=data.get("id", ""))
