"""Domain layer: records, results, errors and the repository port."""

from account_store.domain.errors import (
    AccountStoreError,
    ConfigurationError,
    IncorrectOperationError,
    InvalidPreferencesError,
    UserAlreadyExistsError,
)
from account_store.domain.models import Session, User
from account_store.domain.ports import UserSessionRepository
from account_store.domain.results import OperationResult, OperationStatus

__all__ = [
    "AccountStoreError",
    "ConfigurationError",
    "IncorrectOperationError",
    "InvalidPreferencesError",
    "UserAlreadyExistsError",
    "Session",
    "User",
    "UserSessionRepository",
    "OperationResult",
    "OperationStatus",
]
