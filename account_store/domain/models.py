"""
Account records.

Plain pydantic models for the two stored record shapes. They know nothing
about MongoDB: conversion to and from documents lives in
``account_store.infrastructure.mongodb.mappers``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class User(BaseModel):
    """
    User account record.

    Identified by ``email`` (natural key, unique in the store). The
    password is opaque to this layer: it is stored and returned as given.
    Preferences are an open mapping with no fixed schema.

    Attributes:
        email: Unique account email
        name: Display name
        password: Hashed/opaque password value
        preferences: Free-form preference key/value pairs
        id: Document ``_id`` (assigned by the store when omitted)

    Example:
        >>> user = User(email="a@x.com", name="Ada", password="hashed")
        >>> user.preferences
        {}
    """

    model_config = ConfigDict(frozen=True)

    email: str = Field(..., min_length=1, description="Unique account email")
    name: str = Field(default="", description="Display name")
    password: str = Field(default="", repr=False, description="Opaque password")
    preferences: Dict[str, Any] = Field(default_factory=dict)
    id: Optional[str] = Field(default=None, description="Document identifier")

    @field_validator("email")
    @classmethod
    def email_not_blank(cls, v: str) -> str:
        """Reject whitespace-only emails; the value is stored as given."""
        if not v.strip():
            raise ValueError("email cannot be empty or whitespace")
        return v

    @property
    def session_keys(self) -> list[str]:
        """Values a session ``user_id`` may hold for this user."""
        keys = [self.email]
        if self.id is not None and self.id != self.email:
            keys.append(self.id)
        return keys


class Session(BaseModel):
    """
    Login session record.

    One live session per user: ``user_id`` references the user (email or
    document id) and ``jwt`` is the opaque token issued at login.

    Example:
        >>> Session(user_id="u1", jwt="tok1")
        Session(user_id='u1', jwt='tok1')
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)
    jwt: str

    def __repr__(self) -> str:
        """Debug representation."""
        return f"Session(user_id={self.user_id!r}, jwt={self.jwt!r})"
