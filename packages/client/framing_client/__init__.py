"""Framing Client - quote wizard, upload guard and submission transport."""

from framing_client.exceptions import SubmissionError
from framing_client.transport import (
    FormSubmitter,
    SubmissionResult,
    encode_data_url,
    field_label,
    validation_message,
)
from framing_client.uploads import (
    MAX_UPLOAD_SIZE_BYTES,
    UploadFile,
    UploadGuard,
    format_file_size,
)
from framing_client.wizard import QuoteFormState, QuoteWizard, validate_step

__all__ = [
    "FormSubmitter",
    "MAX_UPLOAD_SIZE_BYTES",
    "QuoteFormState",
    "QuoteWizard",
    "SubmissionError",
    "SubmissionResult",
    "UploadFile",
    "UploadGuard",
    "encode_data_url",
    "field_label",
    "format_file_size",
    "validate_step",
    "validation_message",
]
