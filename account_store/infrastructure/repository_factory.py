"""User/session repository factory for environment-based selection.

This factory creates the appropriate repository implementation based on
the USER_REPOSITORY environment variable:
- "inmemory": InMemoryUserSessionRepository (for testing)
- "mongodb": MongoUserSessionRepository (for production)

Default: inmemory
"""

from typing import Optional

import structlog

from account_store.config import get_repository_backend, use_transactions
from account_store.domain.errors import ConfigurationError
from account_store.domain.ports import UserSessionRepository
from account_store.infrastructure.in_memory import InMemoryUserSessionRepository
from account_store.infrastructure.mongodb import (
    MongoUserSessionRepository,
    create_client,
    get_database,
)

logger = structlog.get_logger(__name__)


def create_user_session_repository() -> UserSessionRepository:
    """Create user/session repository based on environment configuration.

    Returns:
        UserSessionRepository: The configured repository implementation

    Raises:
        ConfigurationError: On an unknown backend or missing MONGODB_URI

    Environment Variables:
        USER_REPOSITORY: "inmemory" | "mongodb" (default: inmemory)
        MONGODB_URI: MongoDB connection string (required for mongodb)
        MONGODB_DATABASE: Database name (default: accounts)
        MONGODB_USE_TRANSACTIONS: Transactional delete_user (default: false)
    """
    repo_type = get_repository_backend()

    if repo_type == "mongodb":
        client = create_client()
        return MongoUserSessionRepository(
            get_database(client),
            use_transactions=use_transactions(),
            owns_client=True,
        )

    elif repo_type == "inmemory":
        logger.info("Using in-memory user/session repository")
        return InMemoryUserSessionRepository()

    else:
        raise ConfigurationError(
            f"Invalid USER_REPOSITORY value: {repo_type}. "
            "Expected 'inmemory' or 'mongodb'"
        )


# Singleton instance
_repository: Optional[UserSessionRepository] = None


def get_user_session_repository() -> UserSessionRepository:
    """Get singleton user/session repository instance."""
    global _repository

    if _repository is None:
        _repository = create_user_session_repository()

    return _repository


def reset_user_session_repository() -> None:
    """Reset the singleton (for testing purposes)."""
    global _repository
    _repository = None
