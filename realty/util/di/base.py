"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class without subclasses is concrete and used as-is. A provider
    class with subclasses is a mockable component: its subclasses are the
    production and mock implementations, told apart by ``__is_mock__``.

    Attributes:
        __mock_component__: Component name (None for concrete providers)
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether implementations of this provider are registered."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> Type["ProviderBase"]:
        """Select the implementation to instantiate.

        Args:
            use_mock: Pick the mock implementation of a mockable component

        Returns:
            Provider class (not instantiated)

        Raises:
            ValueError: If the requested implementation is not registered
        """
        if not cls.is_mockable():
            return cls

        impl = next(
            (
                c
                for c in cls.__subclasses__()
                if getattr(c, "__is_mock__", False) == use_mock
            ),
            None,
        )
        if impl is None:
            kind = "mock" if use_mock else "production"
            raise ValueError(
                f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
            )
        return impl
