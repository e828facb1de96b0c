"""Dependency injection module."""

from typing import Type

from realty.util.di.application import ProdApplicationProvider
from realty.util.di.base import Component, ProviderBase
from realty.util.di.core import ProdConfigProvider
from realty.util.di.domain import ProdDomainProvider
from realty.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

# Container assembly order; mockable components come last
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for a PROVIDERS entry."""
    return base.implementation(use_mock=use_mock)


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
