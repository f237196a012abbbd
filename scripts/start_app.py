#!/usr/bin/env python3
"""Run the registry API under uvicorn.

Usage:
    python scripts/start_app.py
    python scripts/start_app.py --reload   # development only
"""

import argparse
import sys

import logfire
import uvicorn

from arena.config import Settings
from arena.util.logging import setup_logging
from arena.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the arena registry API")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    if args.reload and settings.environment == "production":
        logfire.warn("Ignoring --reload in production")
        args.reload = False

    with logfire.span("start_app", host=settings.host, port=settings.port):
        try:
            uvicorn.run(
                "arena.interface.api.app:create_app",
                factory=True,
                host=settings.host,
                port=settings.port,
                reload=args.reload,
                log_level="debug" if settings.debug else "info",
            )
        except Exception:
            logfire.exception("Registry API failed to start")
            raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
