"""Dependency injection module.

``PROVIDERS`` lists one entry per concern. Entries with subclasses are
swappable components (``persistence``, ``fetcher``, ``storage``) whose
production or mock implementation is picked by ``get_provider``; the rest
are used as they are.
"""

from typing import Type

from pinbook.util.di.application import ProdApplicationProvider
from pinbook.util.di.base import Component, ProviderBase
from pinbook.util.di.core import ProdConfigProvider
from pinbook.util.di.domain import ProdDomainProvider
from pinbook.util.di.infrastructure import (
    FetcherProvider,
    PersistenceProvider,
    ProdFetcherProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)
from pinbook.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    FetcherProvider,
    StorageProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of ``base`` to instantiate.

    Mock implementations live in the test suite and only register once it
    has imported them, so asking for a mock outside tests fails loudly.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Whether a swappable component should use its mock

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If no implementation of the requested kind
            is registered
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "FetcherProvider",
    "PersistenceProvider",
    "StorageProvider",
    "ProdFetcherProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
