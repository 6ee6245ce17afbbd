"""
Explicit document mapping for account records.

``users`` documents:   {_id, email, name, password, preferences}
``sessions`` documents: {_id, user_id, jwt}
"""

from __future__ import annotations

from typing import Any, Dict

from account_store.domain.models import Session, User


def user_to_document(user: User) -> Dict[str, Any]:
    """Convert User to a ``users`` document.

    ``_id`` is only written when the user carries one, otherwise the
    store assigns it.
    """
    document: Dict[str, Any] = {
        "email": user.email,
        "name": user.name,
        "password": user.password,
        "preferences": dict(user.preferences),
    }
    if user.id is not None:
        document["_id"] = user.id
    return document


def user_from_document(document: Dict[str, Any]) -> User:
    """Convert a ``users`` document to User.

    Raises:
        ValueError: If the document has no email or fails validation
    """
    if "email" not in document:
        raise ValueError("User document missing 'email'")

    raw_id = document.get("_id")
    return User(
        id=str(raw_id) if raw_id is not None else None,
        email=document["email"],
        name=document.get("name") or "",
        password=document.get("password") or "",
        preferences=document.get("preferences") or {},
    )


def session_from_document(document: Dict[str, Any]) -> Session:
    """Convert a ``sessions`` document to Session.

    Raises:
        ValueError: If user_id is missing or empty
    """
    return Session(user_id=document.get("user_id") or "", jwt=document.get("jwt") or "")
