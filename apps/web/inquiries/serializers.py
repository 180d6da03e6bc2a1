"""
Pydantic schemas for inquiry API responses.

Response keys are camelCased to match what the site's JavaScript expects.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


# =============================================================================
# Submissions
# =============================================================================


class SubmissionResponse(_ApiModel):
    """Returned by every successful POST."""

    success: Literal[True] = True
    id: int


class ValidationErrorDetail(BaseModel):
    """A single validation error."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Response for validation errors."""

    error: Literal["validation_error"]
    details: list[ValidationErrorDetail]


# =============================================================================
# Quote listing
# =============================================================================


class QuoteRequestSchema(_ApiModel):
    """A stored quote request as returned by the admin listing."""

    id: int
    created_at: datetime
    updated_at: datetime
    status: str

    category: str
    description: str
    width: str
    height: str
    not_sure_size: bool
    images: list[str] = Field(default_factory=list)
    repairs_needed: bool
    repair_notes: str

    style_preference: str
    matting: str
    protection: str
    budget_range: str

    timeline: str
    service: str
    services: list[str] = Field(default_factory=list)
    zip_code: str

    name: str
    email: str
    phone: str
    preferred_contact: str
    internal_notes: str


class Pagination(_ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int


class QuoteListResponse(_ApiModel):
    quotes: list[QuoteRequestSchema]
    pagination: Pagination
