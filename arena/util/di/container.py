"""Production container assembly."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from arena.util.di import instantiate_providers


def create_container() -> AsyncContainer:
    """Build the container with every component on its production provider.

    Settings are read from the environment when first requested.
    """
    return make_async_container(*instantiate_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app so routes can use ``FromDishka``."""
    setup_dishka(container, app)
