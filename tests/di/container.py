"""Containers for tests: in-memory by default, real components on request."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from forum.util.di import PROVIDERS, Component, get_provider


def swappable_components() -> set[str]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and base.__mock_component__
    }


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container that uses mocks for every swappable component.

    ``build_test_container()`` keeps all data in memory;
    ``build_test_container(unmock={"persistence"})`` talks to the
    PostgreSQL database named by ``DATABASE__URL``.

    Raises:
        ValueError: If ``unmock`` names a component that cannot be swapped
    """
    unmock = set(unmock or ())
    unknown = unmock - swappable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = []
    for base in PROVIDERS:
        use_mock = bool(base.__subclasses__()) and base.__mock_component__ not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())
