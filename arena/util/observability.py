"""Logfire setup for the registry service.

Domain services open a span per registry operation and emit ``info`` or
``warn`` records for accepted and rejected calls; this module wires the
exporter and the framework instrumentation around them.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from arena.config import Settings

# Liveness checks would otherwise dominate the request traces
UNTRACED_URLS = "/health"


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent only when a token is configured.
    """
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the Logfire SDK. Call once, before the app is created."""
    send = should_send_to_logfire(settings)

    logfire.configure(
        service_name="arena-registry",
        service_version="0.1.0",
        environment=settings.environment,
        token=settings.observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="indented",
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests, skipping health checks."""
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued by the registry repositories."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
