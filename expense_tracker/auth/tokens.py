"""
Session tokens.

Tokens are signed JWTs carrying the user id as identity, valid for a fixed
30 days. There is no refresh or revocation: a token that verifies is
trusted until it expires.
"""

from datetime import timedelta

from flask_jwt_extended import (
    create_access_token,
    decode_token,
    set_access_cookies,
    unset_access_cookies,
)
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from expense_tracker.errors import InvalidToken

TOKEN_LIFETIME = timedelta(days=30)


def issue_token(user_id: str) -> str:
    return create_access_token(identity=str(user_id), expires_delta=TOKEN_LIFETIME)


def verify_token(token: str) -> str:
    """Return the user id embedded in ``token`` or raise ``InvalidToken``."""
    try:
        claims = decode_token(token)
    except (PyJWTError, JWTExtendedException):
        raise InvalidToken() from None
    user_id = claims.get("sub")
    if not user_id:
        raise InvalidToken()
    return user_id


def set_session_cookie(response, token: str):
    """http-only, SameSite=Strict, secure in production (see Config)."""
    set_access_cookies(response, token, max_age=int(TOKEN_LIFETIME.total_seconds()))
    return response


def clear_session_cookie(response):
    unset_access_cookies(response)
    return response
