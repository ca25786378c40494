"""Unit tests for provider selection."""

import pytest

from blog.util.di import build_providers
from blog.util.di.infrastructure import ProdPersistenceProvider
from tests.di import MockPersistenceProvider, build_test_container


def provider_types(providers) -> set[type]:
    return {type(provider) for provider in providers}


class TestBuildProviders:
    """Tests for build_providers."""

    def test_production_by_default(self):
        types = provider_types(build_providers())

        assert ProdPersistenceProvider in types
        assert MockPersistenceProvider not in types

    def test_mocked_component(self):
        types = provider_types(build_providers(mocked={"persistence"}))

        assert MockPersistenceProvider in types
        assert ProdPersistenceProvider not in types


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"search"})
