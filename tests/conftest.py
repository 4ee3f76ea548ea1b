"""
Test fixtures and configuration.
"""

from datetime import date

import pytest

from tests.helpers import FakeTokenApi


@pytest.fixture
def fake_token_api() -> FakeTokenApi:
    """Empty in-memory token API."""
    return FakeTokenApi()


@pytest.fixture
def fixed_today() -> date:
    """Reference day for historical series."""
    return date(2024, 5, 10)
