"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for in-memory versions
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A mockable component is declared by a base class that sets
    ``__mock_component__``; its production and mock implementations subclass
    it and set ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this provider stands for a swappable component."""
        return cls.__mock_component__ is not None
