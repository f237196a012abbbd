"""Test container builder."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from arena.util.di import Component, instantiate_providers, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container with every component mocked except ``unmock``.

    Examples:
        # Unit tests: in-memory repositories and event log
        container = build_test_container()

        # Integration tests: real PostgreSQL persistence
        container = build_test_container(unmock={"persistence"})

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    components = mockable_components()

    unknown = unmock - components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    mocked = components - unmock
    return make_async_container(*instantiate_providers(mocked), FastapiProvider())
