"""In-memory adapters for tests and local development."""

from account_store.infrastructure.in_memory.user_session_repository import (
    InMemoryUserSessionRepository,
)

__all__ = ["InMemoryUserSessionRepository"]
