"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import PersistenceProvider
from blog.util.error import DependencyInjectionError

# Swappable components are listed by their base class
PROVIDERS: tuple[type[ProviderBase], ...] = (
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
)


def _implementation(base: type[ProviderBase], use_mock: bool) -> type[ProviderBase]:
    if base.__mock_component__ is None:
        return base
    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl
    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__}"
    )


def build_providers(mocked: set[str] | None = None) -> list:
    """Instantiate every provider, with mocks for the named components.

    Args:
        mocked: Components to replace with their mock implementation

    Raises:
        DependencyInjectionError: If a component lacks the implementation
    """
    mocked = mocked or set()
    providers = [
        _implementation(base, base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    # Exposes the Request object to REQUEST-scoped factories
    providers.append(FastapiProvider())
    return providers


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from the environment when first requested.
    """
    return make_async_container(*build_providers())
