"""Configuration providers.

Settings are read once per process; sections are exposed separately so
services depend only on the part of the configuration they use.
"""

from dishka import Scope, provide

from forum.config import (
    AuthSettings,
    DatabaseSettings,
    IdentitySettings,
    ListingSettings,
    Settings,
)
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings from environment variables and .env (not mockable)."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_identity_settings(self, settings: Settings) -> IdentitySettings:
        return settings.identity

    @provide
    def provide_listing_settings(self, settings: Settings) -> ListingSettings:
        return settings.listing
