#!/usr/bin/env python3
"""Apply the registry schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from arena.config import Settings
from arena.util.logging import setup_logging
from arena.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database schema to the requested revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    with logfire.span("run_migrations", target=target):
        try:
            command.upgrade(Config("alembic.ini"), target)
        except Exception as e:
            logfire.error(
                "Registry migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deploy fails instead of serving a broken schema
            raise

    logfire.info("Registry schema up to date", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
