"""Motor client construction from configuration."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from account_store.config import get_mongodb_database, get_mongodb_uri
from account_store.domain.errors import ConfigurationError

logger = structlog.get_logger(__name__)


def create_client(uri: Optional[str] = None) -> AsyncIOMotorClient[Dict[str, Any]]:
    """
    Create a Motor client.

    Motor pools connections itself; create one client per process and
    share it.

    Args:
        uri: Connection string (if None, read from MONGODB_URI)

    Raises:
        ConfigurationError: If no URI is configured
    """
    uri = uri or get_mongodb_uri()
    if not uri:
        raise ConfigurationError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )
    client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(uri)
    return client


def get_database(
    client: AsyncIOMotorClient[Dict[str, Any]],
    database_name: Optional[str] = None,
) -> AsyncIOMotorDatabase[Dict[str, Any]]:
    """Resolve the account database on a client.

    Args:
        client: Motor client
        database_name: Database name (if None, read from MONGODB_DATABASE)
    """
    name = database_name or get_mongodb_database()
    logger.debug("Using MongoDB database", database=name)
    return client[name]
