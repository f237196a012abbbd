"""Registry write lock."""

import asyncio


class RegistryLock:
    """Exclusive lock serializing every registry mutation within a process.

    Duplicate-vote and self-vote checks run under this lock together with the
    writes they guard. Across processes the database row lock and unique
    constraints take over.
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    def locked(self) -> bool:
        """Return True if a mutation currently holds the lock."""
        return self._lock.locked()

    async def __aenter__(self) -> "RegistryLock":
        await self._lock.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._lock.release()
