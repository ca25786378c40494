"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from blog.util.di import PROVIDERS, build_providers


def build_test_container(unmock: set[str] | None = None) -> AsyncContainer:
    """Build a container that mocks every swappable component by default.

    The mocks are registered by importing tests.di, which defines them as
    subclasses of the production provider bases. Settings come from the
    environment (tests/conftest.py sets the required ones).

    Args:
        unmock: Components to run with their production implementation,
            e.g. {"persistence"} for tests against a real database

    Raises:
        ValueError: If an unknown component is requested
    """
    unmock = unmock or set()
    components = {
        base.__mock_component__ for base in PROVIDERS if base.__mock_component__
    }
    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return make_async_container(*build_providers(mocked=components - unmock))
