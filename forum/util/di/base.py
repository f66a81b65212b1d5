"""Provider base for the forum container."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests replace with in-memory fakes
Component = Literal["identity", "persistence"]


class ProviderBase(Provider):
    """Dishka provider with mock-selection metadata.

    A component base sets __mock_component__; its production and fake
    subclasses set __is_mock__. Concrete providers leave both unset.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
