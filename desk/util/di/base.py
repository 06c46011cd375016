"""Provider base class carrying the mock/production metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests can swap for an in-process fake
Component = Literal["persistence", "openim", "mail"]


class ProviderBase(Provider):
    """Base for every desk provider.

    A provider class with subclasses is a mockable component: its subclasses
    are the production and mock variants, told apart by ``__is_mock__``.

    Attributes:
        __mock_component__: Component the provider belongs to, None for core providers
        __is_mock__: Whether this variant is the in-process fake
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
