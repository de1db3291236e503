"""
Pytest Configuration and Shared Fixtures.

This module provides shared fixtures for testing recordmeta.
"""

from collections.abc import Generator
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from recordmeta.config.settings import Settings, get_settings
from recordmeta.core.clock import FrozenClock
from recordmeta.lifecycle.entity import Entity


# =============================================================================
# Sample Entities
# =============================================================================


class User(Entity):
    """User entity used across tests."""

    name: str
    email: str
    age: int = 0
    is_active: bool = True


class Product(Entity):
    """Product entity used across tests."""

    name: str
    price: float
    description: str = ""
    category: str = ""


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment patches never leak between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Generator[Settings, None, None]:
    """Provide settings loaded from a controlled environment."""
    with patch.dict(
        "os.environ",
        {
            "LOG_LEVEL": "debug",
            "LIFECYCLE_USE_UTC": "true",
            "LIFECYCLE_ID_FIELD": "_id",
            "OBSERVABILITY_LOG_FORMAT": "console",
        },
    ):
        get_settings.cache_clear()
        yield get_settings()


# =============================================================================
# Clock Fixtures
# =============================================================================


@pytest.fixture
def t0() -> datetime:
    """Fixed reference instant."""
    return datetime(2024, 1, 15, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(t0: datetime) -> FrozenClock:
    """Clock pinned at t0."""
    return FrozenClock(t0)


# =============================================================================
# Entity Fixtures
# =============================================================================


@pytest.fixture
def user() -> User:
    """Fresh, never persisted user."""
    return User(name="John Doe", email="john@example.com", age=30)


@pytest.fixture
def product(frozen_clock: FrozenClock) -> Product:
    """Fresh product driven by the frozen clock."""
    return Product(
        clock=frozen_clock,
        name="Gaming Laptop",
        price=45000.00,
        description="High-performance gaming laptop with RTX 4080",
        category="Electronics",
    )
