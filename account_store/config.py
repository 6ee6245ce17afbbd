"""Configuration utilities."""

import os
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_mongodb_uri() -> Optional[str]:
    """
    Connection string for the account database.

    Database credentials are kept out of the URI
    itself: ``${MONGODB_USER}`` and ``${MONGODB_PASSWORD}`` placeholders are
    filled from their own variables, so the URI can be committed to a
    shared .env while secrets come from the deployment:

        MONGODB_URI=mongodb://${MONGODB_USER}:${MONGODB_PASSWORD}@db:27017/?replicaSet=rs0

    Returns:
        URI with credentials substituted, or None when MONGODB_URI is unset
    """
    template = os.getenv("MONGODB_URI")
    if not template:
        return None

    substitutions = {
        "${MONGODB_USER}": os.getenv("MONGODB_USER", ""),
        "${MONGODB_PASSWORD}": os.getenv("MONGODB_PASSWORD", ""),
    }
    for placeholder, value in substitutions.items():
        template = template.replace(placeholder, value)
    return template


def get_mongodb_database() -> str:
    """
    Get MongoDB database name.

    Returns:
        Database name from MONGODB_DATABASE env var, defaults to "accounts"
    """
    return os.getenv("MONGODB_DATABASE", "accounts")


def get_repository_backend() -> str:
    """Repository backend from USER_REPOSITORY ("inmemory" | "mongodb")."""
    return os.getenv("USER_REPOSITORY", "inmemory").strip().lower()


def use_transactions() -> bool:
    """Whether delete_user runs inside a multi-document transaction."""
    return os.getenv("MONGODB_USE_TRANSACTIONS", "false").strip().lower() in _TRUE_VALUES


def get_log_level() -> str:
    """Log level name, defaults to INFO."""
    return os.getenv("LOG_LEVEL", "INFO").strip().upper()
