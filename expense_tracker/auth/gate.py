"""
Authentication gate for protected routes.

``auth_required`` reads the bearer token from the Authorization header,
verifies it, loads the user and hands the view an immutable
``AuthenticatedUser`` as its first argument. Nothing is stored on the
request object.
"""

from dataclasses import dataclass
from datetime import datetime
from functools import wraps
from typing import Optional

from flask import request

from expense_tracker.errors import Unauthorized
from expense_tracker.models import db
from .services import CredentialStore
from .tokens import verify_token


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    name: str
    email: str
    phone: str
    profession: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_user(cls, user):
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            profession=user.profession,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def bearer_token(header: Optional[str]) -> Optional[str]:
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def authenticate() -> AuthenticatedUser:
    token = bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise Unauthorized("Authentication required")

    user_id = verify_token(token)

    user = CredentialStore(db.session).get_by_id(user_id)
    if user is None:
        raise Unauthorized("User not found")

    return AuthenticatedUser.from_user(user)


def auth_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        identity = authenticate()
        return view(identity, *args, **kwargs)

    return wrapper
