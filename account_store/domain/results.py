"""
Operation results.

Write operations report a tagged outcome instead of a bare boolean so the
reason for a failure is not lost. Results are truthy only on success.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class OperationStatus(str, Enum):
    """Outcome kinds of a repository write."""

    SUCCESS = "SUCCESS"
    CONFLICT = "CONFLICT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    FAILURE = "FAILURE"


class OperationResult(BaseModel):
    """
    Tagged result of a repository write.

    Example:
        >>> bool(OperationResult.ok())
        True
        >>> result = OperationResult.failure("connection refused")
        >>> bool(result), result.status
        (False, <OperationStatus.FAILURE: 'FAILURE'>)
    """

    model_config = ConfigDict(frozen=True)

    status: OperationStatus
    message: Optional[str] = None

    @classmethod
    def ok(cls) -> OperationResult:
        """Successful result."""
        return cls(status=OperationStatus.SUCCESS)

    @classmethod
    def failure(cls, message: Optional[str] = None) -> OperationResult:
        """Store-level failure (transient or permanent, not distinguished)."""
        return cls(status=OperationStatus.FAILURE, message=message)

    @property
    def succeeded(self) -> bool:
        """True when the operation succeeded."""
        return self.status is OperationStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.succeeded
