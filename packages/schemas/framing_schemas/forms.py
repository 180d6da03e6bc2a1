"""Form submission schemas.

Field names travel camelCased on the wire (``notSureSize``, ``zipCode``) and
are snake_cased in Python. Both spellings are accepted on input.
"""

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


class _FormModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    # Fields that must be present and non-empty before anything is saved
    required_fields: ClassVar[tuple[str, ...]] = ()

    @field_validator("*", mode="before")
    @classmethod
    def _numbers_to_str(cls, value: Any) -> Any:
        # Legacy JSON clients send sizes as numbers
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def missing_fields(cls, data: dict[str, Any]) -> list[str]:
        """Required fields (wire names) that are absent or blank in a raw payload."""
        missing = []
        for name in cls.required_fields:
            value = data.get(to_camel(name), data.get(name))
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(to_camel(name))
        return missing

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire (camelCase) names."""
        return self.model_dump(by_alias=True, mode="json")


class QuoteFormFields(_FormModel):
    """Scalar fields of a quote request (the ``formData`` JSON part)."""

    required_fields: ClassVar[tuple[str, ...]] = ("category", "name", "email")

    # Item
    category: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=5000)

    # Size
    width: str = Field(default="", max_length=20)
    height: str = Field(default="", max_length=20)
    not_sure_size: bool = False
    repairs_needed: bool = False
    repair_notes: str = Field(default="", max_length=2000)

    # Style
    style_preference: str = Field(default="", max_length=50)
    matting: str = Field(default="", max_length=50)
    protection: str = Field(default="", max_length=50)
    budget_range: str = Field(default="", max_length=50)

    # Service
    timeline: str = Field(default="", max_length=50)
    service: str = Field(default="", max_length=50)
    services: list[str] = Field(default_factory=list)
    zip_code: str = Field(default="", max_length=10)

    # Contact
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(default="", max_length=20)
    preferred_contact: str = Field(default="", max_length=20)

    @field_validator(
        "description",
        "width",
        "height",
        "repair_notes",
        "style_preference",
        "matting",
        "protection",
        "budget_range",
        "timeline",
        "service",
        "zip_code",
        "phone",
        "preferred_contact",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("services", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def _sync_service_fields(self) -> "QuoteFormFields":
        # Single-select ``service`` is authoritative; ``services`` mirrors it
        if self.service and not self.services:
            self.services = [self.service]
        elif self.services and not self.service:
            self.service = self.services[0]
        if self.not_sure_size:
            self.width = ""
            self.height = ""
        return self


class ContactFormSubmission(_FormModel):
    """Contact page message."""

    required_fields: ClassVar[tuple[str, ...]] = ("name", "email", "message")

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(default="", max_length=20)
    subject: str = Field(default="", max_length=200)
    message: str = Field(min_length=1, max_length=5000)

    @field_validator("phone", "subject", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class BusinessInquirySubmission(_FormModel):
    """Commercial / volume pricing request."""

    required_fields: ClassVar[tuple[str, ...]] = (
        "business_name",
        "contact_name",
        "email",
    )

    business_name: str = Field(min_length=1, max_length=200)
    contact_name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str = Field(default="", max_length=20)
    project_description: str = Field(default="", max_length=5000)
    sizes_info: str = Field(default="", max_length=2000)
    timeline: str = Field(default="", max_length=200)
    delivery_needs: str = Field(default="", max_length=500)
    invoicing: bool = False
    image_link: str = Field(
        default="",
        max_length=500,
        description="Link to externally hosted photos (Drive, Dropbox, ...)",
    )

    @field_validator(
        "phone",
        "project_description",
        "sizes_info",
        "timeline",
        "delivery_needs",
        "image_link",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("invoicing", mode="before")
    @classmethod
    def _checkbox(cls, value: Any) -> Any:
        # HTML checkboxes post "on"
        if value in ("on", "true", "1"):
            return True
        if value in (None, "", "off", "false", "0"):
            return False
        return value

    @field_validator("image_link")
    @classmethod
    def _http_link(cls, value: str) -> str:
        if value and not value.lower().startswith(("http://", "https://")):
            raise ValueError("Photo link must start with http:// or https://")
        return value
