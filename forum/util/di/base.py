"""Provider base with mock selection metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests can swap for an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in ``PROVIDERS``.

    A provider class that has subclasses is a swappable component: its
    subclasses set ``__is_mock__`` and ``get_provider`` picks one. A
    provider without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
