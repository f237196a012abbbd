"""Provider base class and component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components with swappable implementations
Component = Literal["events", "persistence"]


class ProviderBase(Provider):
    """Base for all registry providers.

    A component base sets ``__mock_component__``; its subclasses set
    ``__is_mock__`` to mark the test double. Concrete providers leave both
    at their defaults.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
