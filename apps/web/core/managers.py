"""
Custom querysets for submission listings.

SubmissionQuerySet adds status filtering and offset pagination.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from django.db import models

if TYPE_CHECKING:
    from .models import TimeStampedModel

_T = TypeVar("_T", bound="TimeStampedModel")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Page(Generic[_T]):
    """One page of a listing plus the metadata the API reports."""

    items: list[_T]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


class SubmissionQuerySet(models.QuerySet[_T]):
    """
    QuerySet with listing helpers.

    Usage in views:
        page = QuoteRequest.objects.with_status(status).paginate(2, 20)
    """

    def with_status(self, status: str | None) -> "SubmissionQuerySet[_T]":
        """Filter by status; a falsy status leaves the queryset unfiltered."""
        if not status:
            return self
        return self.filter(status=status)

    def paginate(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> Page[_T]:
        """
        Slice out one page, newest first.

        Args:
            page: 1-based page number (values below 1 are treated as 1)
            limit: Page size, clamped to [1, MAX_PAGE_SIZE]
        """
        page = max(page, 1)
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        offset = (page - 1) * limit
        total = self.count()
        items = list(self.order_by("-created_at")[offset : offset + limit])
        return Page(items=items, page=page, limit=limit, total=total)
