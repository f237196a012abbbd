"""Domain services."""

from .base import Service
from .competition_service import CompetitionService
from .event_publisher import EventPublisher
from .jwt_service import JWTService
from .lock import RegistryLock
from .vote_service import VoteService

__all__ = [
    "CompetitionService",
    "EventPublisher",
    "JWTService",
    "RegistryLock",
    "Service",
    "VoteService",
]
