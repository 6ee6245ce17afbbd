"""MongoDB (Motor) adapters."""

from account_store.infrastructure.mongodb.client import create_client, get_database
from account_store.infrastructure.mongodb.user_session_repository import (
    MongoUserSessionRepository,
)

__all__ = ["create_client", "get_database", "MongoUserSessionRepository"]
