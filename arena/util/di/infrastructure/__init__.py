"""Swappable infrastructure components.

Production subclasses are imported here so that ``__subclasses__()`` finds
them; mock subclasses are registered by the test suite.
"""

from .events import EventsProvider, ProdEventsProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "EventsProvider",
    "PersistenceProvider",
    "ProdEventsProvider",
    "ProdPersistenceProvider",
]
