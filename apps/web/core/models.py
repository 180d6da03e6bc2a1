"""
Core models - shared abstract bases.

Every submission model inherits created/updated timestamps from here.
"""

from django.db import models

from .managers import SubmissionQuerySet


class TimeStampedModel(models.Model):
    """
    Abstract base for persisted form submissions.

    Provides:
    - Created/updated timestamps
    - SubmissionQuerySet for status filtering and paging
    """

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SubmissionQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ["-created_at"]
