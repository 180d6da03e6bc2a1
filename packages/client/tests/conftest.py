"""Shared fixtures for client tests."""

import pytest

from framing_client import UploadFile

from .factories import make_upload


@pytest.fixture
def photo() -> UploadFile:
    """A small JPEG upload."""
    return make_upload()
