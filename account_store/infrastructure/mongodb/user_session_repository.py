"""MongoDB User/Session repository implementation."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import WriteConcern
from pymongo.errors import DuplicateKeyError, PyMongoError

from account_store.domain.errors import InvalidPreferencesError, UserAlreadyExistsError
from account_store.domain.models import Session, User
from account_store.domain.ports import UserSessionRepository
from account_store.domain.results import OperationResult
from account_store.infrastructure.mongodb.mappers import (
    session_from_document,
    user_from_document,
    user_to_document,
)

logger = structlog.get_logger(__name__)


class MongoUserSessionRepository(UserSessionRepository):
    """
    MongoDB implementation of the User/Session repository.

    Storage design:
    - Collection: users (unique index on email)
    - Collection: sessions (unique index on user_id, one session per user)

    Every operation is a single request to the store, except delete_user
    which deletes the user and then its sessions. Driver errors never leave
    this class: they become failed results (or None for lookups).

    Example:
        >>> from motor.motor_asyncio import AsyncIOMotorClient
        >>> client = AsyncIOMotorClient("mongodb://localhost:27017")
        >>> repository = MongoUserSessionRepository(client.accounts)
        >>> await repository.ensure_indexes()
        >>> await repository.add_user(User(email="a@x.com", name="Ada"))
    """

    USERS_COLLECTION = "users"
    SESSIONS_COLLECTION = "sessions"

    def __init__(
        self,
        db: AsyncIOMotorDatabase[Dict[str, Any]],
        use_transactions: bool = False,
        owns_client: bool = False,
    ):
        """
        Initialize repository with MongoDB database.

        Args:
            db: Motor AsyncIOMotorDatabase instance
            use_transactions: Run delete_user in a multi-document transaction
                (requires a replica set or sharded cluster)
            owns_client: Close the database client on close()
        """
        self.db = db
        self.users = db[self.USERS_COLLECTION]
        self.sessions = db[self.SESSIONS_COLLECTION]
        self.use_transactions = use_transactions
        self._owns_client = owns_client

        logger.info(
            "Initialized MongoUserSessionRepository",
            use_transactions=use_transactions,
        )

    async def ensure_indexes(self) -> None:
        """
        Create the uniqueness indexes the repository relies on.

        Indexes:
        - users.email (unique): duplicate registrations raise conflicts
        - sessions.user_id (unique): at most one session per user
        """
        await self.users.create_index("email", unique=True, name="idx_email_unique")
        await self.sessions.create_index("user_id", unique=True, name="idx_user_id_unique")
        logger.info("Ensured account indexes")

    async def add_user(self, user: User) -> OperationResult:
        """Insert the user, acknowledged by a majority of replicas.

        Raises:
            UserAlreadyExistsError: If the email is already registered
        """
        durable_users = self.users.with_options(write_concern=WriteConcern("majority"))
        try:
            await durable_users.insert_one(user_to_document(user))
        except DuplicateKeyError as e:
            logger.warning("User already exists", email=user.email)
            raise UserAlreadyExistsError(user.email) from e
        except PyMongoError as e:
            logger.error("Failed to add user", email=user.email, error=str(e))
            return OperationResult.failure(str(e))

        logger.info("User created", email=user.email)
        return OperationResult.ok()

    async def create_user_session(self, user_id: str, jwt: str) -> OperationResult:
        """Upsert the session of user_id, overwriting any previous token."""
        try:
            await self.sessions.update_one(
                {"user_id": user_id},
                {"$set": {"jwt": jwt}},
                upsert=True,
            )
        except PyMongoError as e:
            logger.error("Failed to create session", user_id=user_id, error=str(e))
            return OperationResult.failure(str(e))

        logger.debug("Session stored", user_id=user_id)
        return OperationResult.ok()

    async def get_user(self, email: str) -> Optional[User]:
        """Find user by email, None if missing, unreadable or the lookup failed."""
        try:
            document = await self.users.find_one({"email": email})
        except PyMongoError as e:
            logger.error("Failed to get user", email=email, error=str(e))
            return None

        if not document:
            return None

        try:
            return user_from_document(document)
        except ValueError as e:
            logger.error("Malformed user document", email=email, error=str(e))
            return None

    async def get_user_session(self, user_id: str) -> Optional[Session]:
        """Find session by user_id, None if missing, unreadable or the lookup failed."""
        try:
            document = await self.sessions.find_one({"user_id": user_id})
        except PyMongoError as e:
            logger.error("Failed to get session", user_id=user_id, error=str(e))
            return None

        if not document:
            return None

        try:
            return session_from_document(document)
        except ValueError as e:
            logger.error("Malformed session document", user_id=user_id, error=str(e))
            return None

    async def delete_user_sessions(self, user_id: str) -> OperationResult:
        """Delete all sessions of user_id."""
        try:
            result = await self.sessions.delete_many({"user_id": user_id})
        except PyMongoError as e:
            logger.error("Failed to delete sessions", user_id=user_id, error=str(e))
            return OperationResult.failure(str(e))

        if not result.acknowledged:
            return OperationResult.failure("delete not acknowledged")

        logger.debug("Sessions deleted", user_id=user_id, deleted=result.deleted_count)
        return OperationResult.ok()

    async def delete_user(self, email: str) -> OperationResult:
        """Delete the user, then every session referencing its email or id.

        Without transactions a failure in the second step leaves the user
        deleted and its sessions in place.
        """
        try:
            if self.use_transactions:
                await self._delete_user_in_transaction(email)
            else:
                document = await self.users.find_one_and_delete(
                    {"email": email}, projection={"_id": 1}
                )
                await self.sessions.delete_many(
                    {"user_id": {"$in": self._session_keys(email, document)}}
                )
        except PyMongoError as e:
            logger.error("Failed to delete user", email=email, error=str(e))
            return OperationResult.failure(str(e))

        logger.info("User deleted", email=email)
        return OperationResult.ok()

    async def update_user_preferences(
        self, email: str, preferences: Optional[Mapping[str, Any]]
    ) -> OperationResult:
        """Replace the preferences mapping of the user.

        Raises:
            InvalidPreferencesError: If preferences is None
        """
        if preferences is None:
            raise InvalidPreferencesError(email)

        try:
            result = await self.users.update_one(
                {"email": email},
                {"$set": {"preferences": dict(preferences)}},
            )
        except PyMongoError as e:
            logger.error("Failed to update preferences", email=email, error=str(e))
            return OperationResult.failure(str(e))

        if result.matched_count == 0:
            logger.debug("Preferences update matched no user", email=email)
        return OperationResult.ok()

    async def close(self) -> None:
        """Close the MongoDB client if this repository created it."""
        if self._owns_client:
            self.db.client.close()
            logger.info("Closed MongoDB connection")

    async def _delete_user_in_transaction(self, email: str) -> None:
        async with await self.db.client.start_session() as session:
            async with session.start_transaction():
                document = await self.users.find_one_and_delete(
                    {"email": email}, projection={"_id": 1}, session=session
                )
                await self.sessions.delete_many(
                    {"user_id": {"$in": self._session_keys(email, document)}},
                    session=session,
                )

    @staticmethod
    def _session_keys(email: str, document: Optional[Dict[str, Any]]) -> List[str]:
        """Session user_id values that belong to the deleted user."""
        keys = [email]
        if document and document.get("_id") is not None:
            user_id = str(document["_id"])
            if user_id != email:
                keys.append(user_id)
        return keys
