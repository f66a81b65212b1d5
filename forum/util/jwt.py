"""Encoding and decoding of the auth_token cookie.

The token's user_id claim is the identity provider's user ID.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by the auth_token cookie."""

    user_id: str
    exp: datetime
    iat: datetime | None = None


class JWTError(Exception):
    """The token is missing a valid signature, malformed or expired."""

    pass


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token for user_id, valid for settings.jwt_expiry_days.

    Args:
        user_id: Identity provider user ID
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry, then return the claims.

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    return TokenPayload(**claims)
