"""Dependency injection for the forum API."""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    IdentityProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdPersistenceProvider,
)

# Concrete providers are used as-is; component bases resolve to a subclass
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    IdentityProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider.

    A base without subclasses is concrete and returned unchanged. A component
    base returns its subclass whose __is_mock__ equals use_mock.

    Raises:
        ValueError: If the component has no such implementation
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "fake" if use_mock else "production"
    raise ValueError(f"No {kind} implementation of {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "IdentityProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdPersistenceProvider",
]
