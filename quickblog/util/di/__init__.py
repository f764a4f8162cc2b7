"""Dependency injection module."""

from typing import Type

from quickblog.util.di.application import ProdApplicationProvider
from quickblog.util.di.base import Component, ProviderBase
from quickblog.util.di.client import ClientProvider
from quickblog.util.di.core import ProdConfigProvider
from quickblog.util.di.domain import ProdDomainProvider
from quickblog.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Server (Post Store API) providers
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
]

# Client (post repository) providers
CLIENT_PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ClientProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Automatically determines if provider is mockable by checking for subclasses.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Mockable component, select by __is_mock__ flag

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "CLIENT_PROVIDERS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ClientProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
