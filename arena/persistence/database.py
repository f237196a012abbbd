"""PostgreSQL engine and session factory for the registry."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from arena.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine sized from DATABASE__* settings."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions are flushed explicitly by the repositories.

    Each request gets one session and therefore one transaction, so a
    registry mutation commits or rolls back as a unit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
