"""Dependency injection for the Tavern API.

Providers are listed once in ``PROVIDERS``. Core providers are used as they
are; for each swappable component the production or mock subclass is picked
when the container is built.
"""

from typing import AbstractSet, Type

from tavern.util.di.application import ProdApplicationProvider
from tavern.util.di.base import COMPONENTS, Component, ProviderBase, check_components
from tavern.util.di.core import ProdConfigProvider
from tavern.util.di.domain import ProdDomainProvider
from tavern.util.di.infrastructure import EmailProvider, PersistenceProvider
from tavern.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EmailProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Return the provider class to instantiate for ``base``.

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind (mocks live in the test suite and are only
            registered once imported)
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__}"
    )


def select_providers(
    mocked: AbstractSet[Component] = frozenset(),
) -> list[ProviderBase]:
    """Instantiate one provider per entry of ``PROVIDERS``.

    Args:
        mocked: Components to replace with their mock implementation
    """
    check_components(mocked)
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "check_components",
    "get_provider",
    "select_providers",
]
