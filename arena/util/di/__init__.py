"""Dependency injection wiring.

Every provider is listed once in ``PROVIDERS``. Concrete providers are used
as they are; a component base (one declaring ``__mock_component__``) is
replaced by its production or mock subclass when the container is built.
"""

from collections.abc import Collection

from arena.util.di.application import ProdApplicationProvider
from arena.util.di.base import Component, ProviderBase
from arena.util.di.core import ProdConfigProvider
from arena.util.di.domain import ProdDomainProvider
from arena.util.di.infrastructure import (
    EventsProvider,
    PersistenceProvider,
    ProdEventsProvider,
    ProdPersistenceProvider,
)
from arena.util.error import DependencyInjectionError

PROVIDERS: tuple[type[ProviderBase], ...] = (
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EventsProvider,
    PersistenceProvider,
)


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation slot."""
    return {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}


def select_provider(base: type[ProviderBase], mock: bool) -> type[ProviderBase]:
    """Pick the implementation of a provider.

    Mock subclasses live in the test suite, so they are only found once the
    module defining them has been imported.

    Raises:
        DependencyInjectionError: If the component has no matching subclass
    """
    component = base.__mock_component__
    if component is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == mock:
            return impl

    raise DependencyInjectionError(component, "mock" if mock else "production")


def instantiate_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, mocking the named components."""
    return [
        select_provider(base, mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "instantiate_providers",
    "mockable_components",
    "select_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "EventsProvider",
    "PersistenceProvider",
    "ProdEventsProvider",
    "ProdPersistenceProvider",
]
