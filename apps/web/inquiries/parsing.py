"""
Request body parsing for the public form endpoints.

Two shapes are accepted:
- Form posts (multipart or url-encoded): a ``formData`` field holding the
  JSON-encoded scalar fields, plus photos under the fixed keys ``image0``,
  ``image1``, ... When ``formData`` is absent the form fields themselves
  are used, so plain HTML forms work too.
- JSON bodies (legacy clients): the whole body is the field object and
  ``images`` is a list of ``data:`` URLs.

Either way the result is the same field dict plus in-memory attachments.
"""

import base64
import binascii
import json
import logging
import mimetypes
import re
from dataclasses import dataclass, field
from typing import Any

from django.core.exceptions import RequestDataTooBig
from django.http import HttpRequest

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")

DATA_URL_RE = re.compile(
    r"^data:(?P<content_type>[\w.+-]+/[\w.+-]+)?(?:;[\w.+-]+=[\w.+-]+)*;base64,"
    r"(?P<data>.*)$",
    re.DOTALL,
)

# Form fields Django adds that are not part of any submission
IGNORED_FORM_FIELDS = frozenset({"csrfmiddlewaretoken"})


class BadRequestError(Exception):
    """The request body could not be parsed into a submission."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PayloadTooLargeError(Exception):
    """The request body was larger than Django is configured to read."""


@dataclass(frozen=True)
class Attachment:
    """A photo received with a submission, held in memory until emailed."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class ParsedSubmission:
    fields: dict[str, Any]
    attachments: list[Attachment] = field(default_factory=list)
    transport: str = "json"

    @property
    def attachment_bytes(self) -> int:
        return sum(a.size for a in self.attachments)


def decode_data_url(value: str, index: int) -> Attachment:
    """
    Decode a ``data:<type>;base64,<payload>`` string into an attachment.

    Raises:
        BadRequestError: If the value is not a base64 data URL
    """
    match = DATA_URL_RE.match(value.strip())
    if not match:
        raise BadRequestError(f"Image {index + 1} is not a base64 data URL")

    content_type = match.group("content_type") or "application/octet-stream"
    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise BadRequestError(f"Image {index + 1} could not be decoded") from e

    extension = mimetypes.guess_extension(content_type) or ".bin"
    return Attachment(
        filename=f"photo-{index + 1}{extension}",
        content_type=content_type,
        content=content,
    )


def _parse_form(request: HttpRequest, max_images: int) -> ParsedSubmission:
    try:
        post = request.POST
        files = request.FILES
    except RequestDataTooBig as e:
        raise PayloadTooLargeError(str(e)) from e

    raw = post.get("formData")
    if raw is None:
        fields = {k: v for k, v in post.items() if k not in IGNORED_FORM_FIELDS}
    else:
        try:
            fields = json.loads(raw)
        except json.JSONDecodeError as e:
            raise BadRequestError("Invalid JSON in formData field") from e
        if not isinstance(fields, dict):
            raise BadRequestError("formData must be a JSON object")

    attachments = []
    for index in range(max_images):
        upload = files.get(f"image{index}")
        if upload is None:
            continue
        attachments.append(
            Attachment(
                filename=upload.name or f"photo-{index + 1}",
                content_type=upload.content_type or "application/octet-stream",
                content=upload.read(),
            )
        )

    return ParsedSubmission(fields=fields, attachments=attachments, transport="form")


def _parse_json(request: HttpRequest, max_images: int) -> ParsedSubmission:
    try:
        body = json.loads(request.body)
    except RequestDataTooBig as e:
        raise PayloadTooLargeError(str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BadRequestError("Invalid JSON in request body") from e

    if not isinstance(body, dict):
        raise BadRequestError("Request body must be a JSON object")

    images = body.pop("images", None) or []
    if not isinstance(images, list):
        raise BadRequestError("images must be a list of data URLs")

    if len(images) > max_images:
        logger.info(
            "Ignoring %d images beyond the limit of %d",
            len(images) - max_images,
            max_images,
        )

    attachments = []
    for index, value in enumerate(images[:max_images]):
        if not isinstance(value, str):
            raise BadRequestError(f"Image {index + 1} is not a base64 data URL")
        attachments.append(decode_data_url(value, index))

    return ParsedSubmission(fields=body, attachments=attachments, transport="json")


def parse_submission(request: HttpRequest, max_images: int) -> ParsedSubmission:
    """
    Parse a form submission, branching on the request's content type.

    Args:
        request: The incoming POST
        max_images: How many photo keys (``image0``..) or data URLs to read

    Raises:
        BadRequestError: Malformed JSON or image data
        PayloadTooLargeError: Body over Django's in-memory limit
    """
    if request.content_type in FORM_CONTENT_TYPES:
        return _parse_form(request, max_images)
    return _parse_json(request, max_images)
