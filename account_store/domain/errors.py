"""
Account store exceptions.

Only the ``IncorrectOperationError`` family crosses the repository
boundary. Driver exceptions are translated into failed results.
"""

from __future__ import annotations

from account_store.domain.results import OperationStatus


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class AccountStoreError(Exception):
    """Base exception for all account store errors."""

    pass


class ConfigurationError(AccountStoreError):
    """
    Repository configuration is missing or invalid.

    Example:
        >>> raise ConfigurationError("MONGODB_URI not configured")
    """

    pass


# ═══════════════════════════════════════════════════════════
# INCORRECT OPERATIONS
# ═══════════════════════════════════════════════════════════


class IncorrectOperationError(AccountStoreError):
    """The caller asked for an operation that can never succeed as given."""

    status: OperationStatus = OperationStatus.FAILURE


class UserAlreadyExistsError(IncorrectOperationError):
    """
    A user with this email is already registered.

    Raised on a duplicate-key violation of the unique email index.
    Callers should answer "user already exists" instead of a generic
    failure.
    """

    status = OperationStatus.CONFLICT

    def __init__(self, email: str):
        """Initialize with the conflicting email.

        Args:
            email: Email that already exists
        """
        self.email = email
        super().__init__(f"User already exists: {email}")


class InvalidPreferencesError(IncorrectOperationError, ValueError):
    """Preferences update was requested without a preferences mapping."""

    status = OperationStatus.INVALID_ARGUMENT

    def __init__(self, email: str):
        """Initialize with the target user's email.

        Args:
            email: Email of the user whose preferences were being updated
        """
        self.email = email
        super().__init__(f"Preferences for {email} cannot be None")
