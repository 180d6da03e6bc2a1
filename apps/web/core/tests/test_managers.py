"""
Tests for SubmissionQuerySet listing helpers.
"""

import pytest

from apps.web.core.managers import MAX_PAGE_SIZE, Page
from apps.web.inquiries.models import QuoteRequest, SubmissionStatus
from apps.web.inquiries.tests.factories import QuoteRequestFactory


class TestPage:
    def test_total_pages_rounds_up(self) -> None:
        assert Page(items=[], page=1, limit=20, total=41).total_pages == 3

    def test_no_results(self) -> None:
        assert Page(items=[], page=1, limit=20, total=0).total_pages == 0


@pytest.mark.django_db
class TestSubmissionQuerySet:
    def test_with_status(self) -> None:
        QuoteRequestFactory(status=SubmissionStatus.NEW)
        QuoteRequestFactory(status=SubmissionStatus.CLOSED)

        assert QuoteRequest.objects.with_status("CLOSED").count() == 1
        assert QuoteRequest.objects.with_status(None).count() == 2

    def test_paginate_second_page(self) -> None:
        QuoteRequestFactory.create_batch(5)

        page = QuoteRequest.objects.paginate(page=2, limit=2)

        assert len(page.items) == 2
        assert page.total == 5
        assert page.total_pages == 3

    def test_page_past_the_end_is_empty(self) -> None:
        QuoteRequestFactory()

        page = QuoteRequest.objects.paginate(page=9, limit=20)

        assert page.items == []
        assert page.total == 1

    def test_bounds_are_clamped(self) -> None:
        page = QuoteRequest.objects.paginate(page=0, limit=10_000)

        assert page.page == 1
        assert page.limit == MAX_PAGE_SIZE

        assert QuoteRequest.objects.paginate(limit=0).limit == 1
