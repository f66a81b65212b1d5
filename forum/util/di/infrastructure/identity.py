"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.identity import RealIdentityClient
from forum.config import IdentitySettings
from forum.domain.service import IdentityClient
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_httpx


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: IdentitySettings) -> IdentityClient:
        """Provide identity provider client.

        Raises:
            ValueError: If the identity provider is not configured
        """
        if not settings.base_url:
            raise ValueError("Identity provider base URL must be configured")

        instrument_httpx()
        return RealIdentityClient(
            base_url=settings.base_url,
            secret_key=settings.secret_key,
            timeout=settings.timeout,
        )
