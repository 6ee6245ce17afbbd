"""User/session repository port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from account_store.domain.models import Session, User
from account_store.domain.results import OperationResult


class UserSessionRepository(ABC):
    """Repository interface for user accounts and their login sessions.

    This is the whole public surface offered to the application layer.
    Implementations return records, ``None`` or an ``OperationResult`` and
    only raise ``IncorrectOperationError`` subclasses.

    Examples:
        >>> result = await repository.add_user(User(email="a@x.com"))
        >>> if result:
        ...     await repository.create_user_session("a@x.com", token)
    """

    @abstractmethod
    async def add_user(self, user: User) -> OperationResult:
        """Insert a new user with majority write acknowledgment.

        Args:
            user: User record to insert

        Returns:
            Successful result, or a failed one on any store error

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        pass

    @abstractmethod
    async def create_user_session(self, user_id: str, jwt: str) -> OperationResult:
        """Store the session token for a user, replacing any previous one.

        Args:
            user_id: Session owner reference
            jwt: Opaque token string

        Returns:
            Successful result, or a failed one on store error
        """
        pass

    @abstractmethod
    async def get_user(self, email: str) -> Optional[User]:
        """Find user by email.

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_user_session(self, user_id: str) -> Optional[Session]:
        """Find the session of a user.

        Returns:
            Session if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete_user_sessions(self, user_id: str) -> OperationResult:
        """Delete every session of a user.

        Deleting zero sessions is a success.

        Returns:
            Successful result iff the store acknowledged the delete
        """
        pass

    @abstractmethod
    async def delete_user(self, email: str) -> OperationResult:
        """Delete a user and then their sessions.

        Without a transaction the two deletes are independent: if the
        session cleanup fails the user is already gone.

        Returns:
            Successful result if both steps succeeded
        """
        pass

    @abstractmethod
    async def update_user_preferences(
        self, email: str, preferences: Optional[Mapping[str, Any]]
    ) -> OperationResult:
        """Replace the stored preferences of a user.

        Args:
            email: Email of the user to update
            preferences: New preferences mapping (replaces existing one)

        Returns:
            Successful result, or a failed one on store error

        Raises:
            InvalidPreferencesError: If preferences is None
        """
        pass
