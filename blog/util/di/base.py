"""Base class for dependency injection providers."""

from typing import ClassVar

from dishka import Provider


class ProviderBase(Provider):
    """Provider that can stand for a swappable component.

    A component base sets ``__mock_component__``; its production and mock
    implementations subclass it and set ``__is_mock__``.
    """

    __mock_component__: ClassVar[str | None] = None
    __is_mock__: ClassVar[bool] = False
