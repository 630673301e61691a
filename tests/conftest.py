"""Test configuration and fixtures."""

from uuid import uuid4

import pytest

from forum.domain.value import UserId


@pytest.fixture
def user_id() -> UserId:
    """A fresh user ID."""
    return UserId(uuid4())
