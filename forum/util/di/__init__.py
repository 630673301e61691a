"""Dependency injection module.

Concrete providers (config, domain, application) are used as they are.
A mockable component is a provider base tagged with ``__mock_component__``
that has one production and one mock subclass, told apart by ``__is_mock__``.
"""

from typing import Iterable, Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from forum.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether the provider is a component base with swappable implementations."""
    return bool(base.__subclasses__())


def mockable_components() -> set[Component]:
    """Names of the registered components that can be mocked."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if is_mockable(base) and base.__mock_component__
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a PROVIDERS entry.

    Args:
        base: Entry from PROVIDERS
        use_mock: Select the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If the component has no implementation of
            the requested kind
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


def build_providers(mocked: Iterable[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per PROVIDERS entry.

    Args:
        mocked: Components to replace with their mock implementation

    Returns:
        Provider instances ready for make_async_container
    """
    mocked = set(mocked)
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "build_providers",
    "get_provider",
    "is_mockable",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
