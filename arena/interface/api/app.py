"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from arena.config import Settings
from arena.interface.api.routes import competitions, health, stats, votes
from arena.interface.error import register_error_handlers
from arena.util.di.container import create_container, setup_di
from arena.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the registry API.

    Logfire must already be configured (``scripts/start_app.py`` does this,
    as does the test conftest). Tests pass their own container; otherwise the
    production container is built from the environment.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Arena Registry API",
        description="Competitions, one vote per voter, organizer-controlled status",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_error_handlers(app_instance)

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    for module in (health, competitions, votes, stats):
        app_instance.include_router(module.router)

    return app_instance
