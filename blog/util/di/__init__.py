"""Dependency injection wiring with dishka."""

from blog.util.di.container import PROVIDERS, build_providers, create_container

__all__ = [
    "PROVIDERS",
    "build_providers",
    "create_container",
]
