"""Quote wizard - the five-step quote request flow.

Item -> Size -> Style -> Service -> Contact. Moving forward validates the
current step; moving back never does. A failed check produces exactly one
notification naming the first unmet requirement and leaves the step as is.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, fields

from framing_schemas import ZIP_REQUIRED_SERVICES, QuoteFormFields
from pydantic import EmailStr, TypeAdapter, ValidationError

from framing_client.exceptions import SubmissionError
from framing_client.transport import (
    FormSubmitter,
    SubmissionResult,
    validation_message,
)
from framing_client.uploads import Notifier, UploadFile, UploadGuard

logger = logging.getLogger(__name__)

FIRST_STEP = 1
LAST_STEP = 5

STEP_NAMES = {
    1: "Item",
    2: "Size",
    3: "Style",
    4: "Service",
    5: "Contact",
}

_email_adapter = TypeAdapter(EmailStr)


@dataclass
class QuoteFormState:
    """Everything the customer has entered so far. Starts empty."""

    # Step 1
    category: str = ""
    description: str = ""
    # Step 2
    width: str = ""
    height: str = ""
    not_sure_size: bool = False
    images: list[UploadFile] = field(default_factory=list)
    repairs_needed: bool = False
    repair_notes: str = ""
    # Step 3
    style_preference: str = ""
    matting: str = ""
    protection: str = ""
    budget_range: str = ""
    # Step 4
    timeline: str = ""
    service: str = ""
    zip_code: str = ""
    # Step 5
    name: str = ""
    email: str = ""
    phone: str = ""
    preferred_contact: str = ""

    def to_form_fields(self) -> QuoteFormFields:
        """Build the ``formData`` payload. Images travel separately."""
        return QuoteFormFields(
            category=self.category,
            description=self.description,
            width="" if self.not_sure_size else self.width,
            height="" if self.not_sure_size else self.height,
            not_sure_size=self.not_sure_size,
            repairs_needed=self.repairs_needed,
            repair_notes=self.repair_notes if self.repairs_needed else "",
            style_preference=self.style_preference,
            matting=self.matting,
            protection=self.protection,
            budget_range=self.budget_range,
            timeline=self.timeline,
            service=self.service,
            services=[self.service] if self.service else [],
            zip_code=self.zip_code,
            name=self.name,
            email=self.email,
            phone=self.phone,
            preferred_contact=self.preferred_contact,
        )


def _blank(value: str) -> bool:
    return not value.strip()


def _validate_size(state: QuoteFormState) -> str | None:
    if not state.images:
        return "Please upload at least one photo"
    if state.not_sure_size:
        return None

    has_width = not _blank(state.width)
    has_height = not _blank(state.height)
    if not has_width and not has_height:
        return "Please enter dimensions or check 'Not sure - help me measure'"
    if not has_height:
        return "Please enter the height"
    if not has_width:
        return "Please enter the width"
    return None


def _validate_service(state: QuoteFormState) -> str | None:
    if not state.timeline:
        return "Please select a timeline"
    if not state.service:
        return "Please select how you'd like to receive your item"
    if state.service in ZIP_REQUIRED_SERVICES and _blank(state.zip_code):
        return "Please enter your zip code for delivery/installation"
    return None


def _validate_contact(state: QuoteFormState) -> str | None:
    if _blank(state.name):
        return "Please enter your name"
    if _blank(state.email):
        return "Please enter your email address"
    try:
        _email_adapter.validate_python(state.email.strip())
    except ValidationError:
        return "Please enter a valid email address"
    if _blank(state.phone):
        return "Please enter your phone number"
    if not state.preferred_contact:
        return "Please select a preferred contact method"
    return None


def validate_step(step: int, state: QuoteFormState) -> str | None:
    """Return the message for the first unmet requirement of ``step``, if any."""
    if step == 1:
        if not state.category:
            return "Please select a category"
        return None
    if step == 2:
        return _validate_size(state)
    if step == 3:
        if not state.style_preference:
            return "Please select a frame style"
        if not state.matting:
            return "Please select a matting option"
        if not state.protection:
            return "Please select a glass/protection option"
        return None
    if step == 4:
        return _validate_service(state)
    if step == 5:
        return _validate_contact(state)
    return None


class QuoteWizard:
    """
    Linear five-step flow over a single mutable ``QuoteFormState``.

    Args:
        notify: Receives user-facing messages (validation failures, upload
            rejections, submission outcome). Defaults to collecting them in
            ``messages``.
        submitter: Transport used by ``submit()``.
    """

    def __init__(
        self,
        notify: Notifier | None = None,
        submitter: FormSubmitter | None = None,
    ) -> None:
        self.messages: list[str] = []
        self._notify: Callable[[str], None] = notify or self.messages.append
        self._submitter = submitter
        self.state = QuoteFormState()
        self.uploads = UploadGuard.for_quote(notify=self._notify)
        self.step = FIRST_STEP
        self.is_submitting = False
        self.is_complete = False
        self.result: SubmissionResult | None = None

    @property
    def step_name(self) -> str:
        return STEP_NAMES[self.step]

    @property
    def progress(self) -> float:
        """Completion percentage shown in the progress bar."""
        return self.step / LAST_STEP * 100

    def update(self, **values: object) -> None:
        """Set form fields by name. Images go through ``add_images``."""
        known = {f.name for f in fields(QuoteFormState)} - {"images"}
        for name, value in values.items():
            if name not in known:
                raise AttributeError(f"Unknown quote form field: {name}")
            setattr(self.state, name, value)

    def add_images(self, files: Sequence[UploadFile]) -> bool:
        accepted = self.uploads.add(files)
        self.state.images = self.uploads.files
        return accepted

    def remove_image(self, index: int) -> None:
        self.uploads.remove(index)
        self.state.images = self.uploads.files

    def validate(self) -> bool:
        """Validate the current step, notifying on failure."""
        error = validate_step(self.step, self.state)
        if error:
            self._notify(error)
            return False
        return True

    def next(self) -> bool:
        """Advance one step if the current one is complete."""
        if not self.validate():
            return False
        self.step = min(self.step + 1, LAST_STEP)
        return True

    def prev(self) -> None:
        """Go back one step without re-validating."""
        self.step = max(self.step - 1, FIRST_STEP)

    def submit(self) -> bool:
        """
        Send the completed request once.

        Only allowed from the last step. On failure the wizard stays on the
        last step with every field intact so the customer can retry.
        """
        if self._submitter is None:
            raise RuntimeError("QuoteWizard.submit() needs a submitter")
        if self.step != LAST_STEP or self.is_submitting or self.is_complete:
            return False
        if not self.validate():
            return False

        self.is_submitting = True
        try:
            payload = self.state.to_form_fields()
            self.result = self._submitter.submit_quote(payload, self.state.images)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            self._notify(validation_message(field, error["msg"]))
            return False
        except SubmissionError as e:
            logger.warning("Quote submission failed: %s", e.message)
            self._notify(e.message)
            return False
        finally:
            self.is_submitting = False

        self.is_complete = True
        self._notify("Quote request submitted!")
        return True
