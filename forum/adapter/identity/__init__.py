"""Identity provider adapter."""

from .client import (
    IdentityClientError,
    MockIdentityClient,
    RealIdentityClient,
)

__all__ = ["IdentityClientError", "MockIdentityClient", "RealIdentityClient"]
