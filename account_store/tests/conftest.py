"""
Shared fixtures for account store tests.

Loads .env / .env.test so integration tests can pick up MONGODB_URI.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from account_store.domain.models import User
from account_store.infrastructure.in_memory import InMemoryUserSessionRepository

_project_root = Path(__file__).parent.parent.parent

env_path = _project_root / ".env"
if env_path.exists():
    load_dotenv(env_path)

env_test_path = _project_root / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)


@pytest.fixture
def sample_user() -> User:
    """User with a fixed id and some preferences."""
    return User(
        id="u1",
        email="a@x.com",
        name="Ada Lovelace",
        password="$2b$12$hashedpasswordvalue",
        preferences={"favorite_cast": "Ada", "theme": "dark"},
    )


@pytest.fixture
def in_memory_repository() -> InMemoryUserSessionRepository:
    """Fixture providing clean InMemoryUserSessionRepository."""
    return InMemoryUserSessionRepository()
