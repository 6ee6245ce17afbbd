"""In-memory User/Session repository for testing."""

from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from account_store.domain.errors import InvalidPreferencesError, UserAlreadyExistsError
from account_store.domain.models import Session, User
from account_store.domain.ports import UserSessionRepository
from account_store.domain.results import OperationResult


class InMemoryUserSessionRepository(UserSessionRepository):
    """In-memory implementation of the User/Session repository.

    Mirrors the MongoDB adapter's observable behavior: unique emails,
    one session per user_id (upsert), and cascading session removal
    on user deletion. Stores are dicts keyed by email and user_id.

    Examples:
        >>> repo = InMemoryUserSessionRepository()
        >>> await repo.add_user(User(email="a@x.com"))
        >>> found = await repo.get_user("a@x.com")
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}
        self._sessions: Dict[str, Session] = {}

    async def add_user(self, user: User) -> OperationResult:
        """Store user, assigning an id when it has none.

        Raises:
            UserAlreadyExistsError: If the email or id is already stored
        """
        if user.email in self._users:
            raise UserAlreadyExistsError(user.email)
        if user.id is not None and any(u.id == user.id for u in self._users.values()):
            raise UserAlreadyExistsError(user.email)

        if user.id is None:
            user = user.model_copy(update={"id": uuid4().hex})
        self._users[user.email] = user
        return OperationResult.ok()

    async def create_user_session(self, user_id: str, jwt: str) -> OperationResult:
        """Store or overwrite the session of user_id."""
        self._sessions[user_id] = Session(user_id=user_id, jwt=jwt)
        return OperationResult.ok()

    async def get_user(self, email: str) -> Optional[User]:
        """Find user by email."""
        return self._users.get(email)

    async def get_user_session(self, user_id: str) -> Optional[Session]:
        """Find session by user_id."""
        return self._sessions.get(user_id)

    async def delete_user_sessions(self, user_id: str) -> OperationResult:
        """Delete the session of user_id, if any."""
        self._sessions.pop(user_id, None)
        return OperationResult.ok()

    async def delete_user(self, email: str) -> OperationResult:
        """Delete user and the sessions keyed by its email or id."""
        user = self._users.pop(email, None)
        keys = user.session_keys if user else [email]
        for key in keys:
            self._sessions.pop(key, None)
        return OperationResult.ok()

    async def update_user_preferences(
        self, email: str, preferences: Optional[Mapping[str, Any]]
    ) -> OperationResult:
        """Replace the preferences of the user.

        Raises:
            InvalidPreferencesError: If preferences is None
        """
        if preferences is None:
            raise InvalidPreferencesError(email)

        user = self._users.get(email)
        if user is not None:
            self._users[email] = user.model_copy(update={"preferences": dict(preferences)})
        return OperationResult.ok()

    def clear(self) -> None:
        """Clear all users and sessions.

        Useful for test cleanup.
        """
        self._users.clear()
        self._sessions.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
