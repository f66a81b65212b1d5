"""Caller identity from the auth_token cookie."""

import logfire

from forum.config import AuthSettings
from forum.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Reads (and, for tooling and tests, mints) auth tokens.

    Reads never fail: a caller without a usable token is anonymous, and the
    use cases decide whether anonymous is allowed.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Sign a token naming user_id."""
        token = create_token(user_id, self.auth_settings)
        logfire.info("Auth token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token, failing loudly.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """User ID carried by token, or None for anonymous callers."""
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.info("Ignoring unusable auth token", reason=str(e))
            return None
