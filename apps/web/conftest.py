"""
Pytest configuration for Django app tests.
"""

from django.contrib.auth import get_user_model
from django.test import Client as DjangoTestClient

import pytest

User = get_user_model()


@pytest.fixture
def user(db) -> User:
    """A signed-up user without staff rights."""
    return User.objects.create_user(
        username="testuser",
        email="testuser@example.com",
        password="testpass123",
    )


@pytest.fixture
def staff_user(db) -> User:
    """A staff user allowed into the dashboard and the quote listing."""
    return User.objects.create_user(
        username="staff",
        email="staff@example.com",
        password="testpass123",
        is_staff=True,
    )


@pytest.fixture
def staff_client(staff_user: User) -> DjangoTestClient:
    """Test client with a logged-in staff session."""
    http_client = DjangoTestClient()
    http_client.force_login(staff_user)
    return http_client
