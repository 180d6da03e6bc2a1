"""
Inquiry models - quote requests, contact messages and business inquiries.

Data flow:
1. A form posts to the public API
2. The view validates and saves one of these records (status NEW)
3. Confirmation/notification emails carry the customer's photos
4. Staff move the record through the status workflow in the admin

Photos are never stored here. ``images`` holds one placeholder string per
photo that was attached to the notification email.
"""

from django.db import models

from apps.web.core.models import TimeStampedModel


class SubmissionStatus(models.TextChoices):
    NEW = "NEW", "New"
    IN_PROGRESS = "IN_PROGRESS", "In Progress"
    QUOTED = "QUOTED", "Quoted"
    ACCEPTED = "ACCEPTED", "Accepted"
    CLOSED = "CLOSED", "Closed"


def image_placeholders(count: int) -> list[str]:
    """Placeholder entries recording how many photos went out by email."""
    return [f"[Image {i} of {count} - attached to email]" for i in range(1, count + 1)]


class QuoteRequest(TimeStampedModel):
    """
    A customer's framing project awaiting a price quote.

    Created by the quote wizard; status is changed only by staff.
    """

    # Item
    category = models.CharField(max_length=100)
    description = models.TextField(blank=True)

    # Size
    width = models.CharField(max_length=20, blank=True)
    height = models.CharField(max_length=20, blank=True)
    not_sure_size = models.BooleanField(default=False)
    images = models.JSONField(
        default=list, blank=True, help_text="Placeholders for emailed photos"
    )
    repairs_needed = models.BooleanField(default=False)
    repair_notes = models.TextField(blank=True)

    # Style
    style_preference = models.CharField(max_length=50, blank=True)
    matting = models.CharField(max_length=50, blank=True)
    protection = models.CharField(max_length=50, blank=True)
    budget_range = models.CharField(max_length=50, blank=True)

    # Service
    timeline = models.CharField(max_length=50, blank=True)
    service = models.CharField(max_length=50, blank=True)
    services = models.JSONField(default=list, blank=True)
    zip_code = models.CharField(max_length=10, blank=True)

    # Contact
    name = models.CharField(max_length=200)
    email = models.EmailField()
    phone = models.CharField(max_length=20, blank=True)
    preferred_contact = models.CharField(max_length=20, blank=True)

    status = models.CharField(
        max_length=20,
        choices=SubmissionStatus.choices,
        default=SubmissionStatus.NEW,
        db_index=True,
    )
    internal_notes = models.TextField(blank=True, help_text="Staff-only notes")

    class Meta(TimeStampedModel.Meta):
        verbose_name = "quote request"

    def __str__(self) -> str:
        return f"{self.category} quote from {self.name}"

    @property
    def image_count(self) -> int:
        return len(self.images or [])

    @property
    def size_display(self) -> str:
        if self.width and self.height:
            return f'{self.width}" x {self.height}"'
        if self.not_sure_size:
            return "Not sure - needs measuring"
        return "N/A"


class ContactSubmission(TimeStampedModel):
    """A message from the contact page."""

    name = models.CharField(max_length=200)
    email = models.EmailField()
    phone = models.CharField(max_length=20, blank=True)
    subject = models.CharField(max_length=200, blank=True)
    message = models.TextField()

    status = models.CharField(
        max_length=20,
        choices=SubmissionStatus.choices,
        default=SubmissionStatus.NEW,
        db_index=True,
    )

    class Meta(TimeStampedModel.Meta):
        verbose_name = "contact message"

    def __str__(self) -> str:
        return f"{self.subject or 'Message'} from {self.name}"


class BusinessInquiry(TimeStampedModel):
    """
    A commercial customer asking about volume pricing.

    Photos arrive either as uploads (emailed) or as an external link.
    """

    business_name = models.CharField(max_length=200)
    contact_name = models.CharField(max_length=200)
    email = models.EmailField()
    phone = models.CharField(max_length=20, blank=True)

    project_description = models.TextField(blank=True)
    sizes_info = models.TextField(blank=True, help_text="Sizes / quantities")
    images = models.JSONField(
        default=list, blank=True, help_text="Placeholders for emailed photos"
    )
    image_link = models.URLField(
        max_length=500, blank=True, help_text="Externally hosted photos"
    )
    timeline = models.CharField(max_length=200, blank=True)
    delivery_needs = models.CharField(max_length=500, blank=True)
    invoicing = models.BooleanField(default=False, help_text="Interested in Net-30")

    status = models.CharField(
        max_length=20,
        choices=SubmissionStatus.choices,
        default=SubmissionStatus.NEW,
        db_index=True,
    )

    class Meta(TimeStampedModel.Meta):
        verbose_name = "business inquiry"
        verbose_name_plural = "business inquiries"

    def __str__(self) -> str:
        return f"{self.business_name} ({self.contact_name})"

    @property
    def image_count(self) -> int:
        return len(self.images or [])
