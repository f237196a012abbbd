"""Competition domain service."""

from datetime import datetime

import logfire

from arena.config import RegistrySettings
from arena.domain.error import ForbiddenError, InvalidInputError, NotFoundError
from arena.domain.model.competition import Competition
from arena.domain.model.event import CompetitionCreated, CompetitionStatusChanged
from arena.domain.repository import CompetitionRepository, RegistryRepository
from arena.domain.value import (
    CompetitionId,
    CompetitionStatusChange,
    RegistryCounts,
    UserId,
)

from .base import Service
from .event_publisher import EventPublisher
from .lock import RegistryLock


class CompetitionService(Service):
    """Domain service for competition lifecycle and queries."""

    def __init__(
        self,
        competition_repository: CompetitionRepository,
        registry_repository: RegistryRepository,
        event_publisher: EventPublisher,
        registry_lock: RegistryLock,
        registry_settings: RegistrySettings,
    ) -> None:
        """Initialize competition service.

        Args:
            competition_repository: Competition repository
            registry_repository: Cross-table reads (listings, counts)
            event_publisher: Publisher for registry events
            registry_lock: Process-wide registry write lock
            registry_settings: Registry configuration (owner identities)
        """
        self.competition_repository = competition_repository
        self.registry_repository = registry_repository
        self.event_publisher = event_publisher
        self.registry_lock = registry_lock
        self.registry_settings = registry_settings

    def is_registry_owner(self, user_id: UserId) -> bool:
        """Check whether an identity holds the registry-owner privilege."""
        return user_id in self.registry_settings.owners

    async def create_competition(
        self,
        organizer: UserId,
        title: str,
        description: str,
        game_type: str,
    ) -> Competition:
        """Create a new active competition.

        Text fields are validated before an ID is allocated, so a rejected
        call leaves the ID counter untouched.

        Args:
            organizer: Identity of the creator
            title: Competition title
            description: Competition description
            game_type: Kind of game being competed in

        Returns:
            Created competition

        Raises:
            InvalidInputError: If any text field is empty after trimming
        """
        with logfire.span("competition_service.create_competition", organizer=organizer):
            fields = {
                "title": title.strip(),
                "description": description.strip(),
                "game_type": game_type.strip(),
            }
            for field, value in fields.items():
                if not value:
                    logfire.warn(
                        "Competition rejected: empty field",
                        field=field,
                        organizer=organizer,
                    )
                    raise InvalidInputError(f"{field} must not be empty")

            async with self.registry_lock:
                competition = Competition(
                    id=await self.competition_repository.next_id(),
                    organizer=organizer,
                    created_at=datetime.now(),
                    vote_count=0,
                    is_active=True,
                    **fields,
                )
                saved = await self.competition_repository.save(competition)

                await self.event_publisher.publish(
                    CompetitionCreated(
                        competition_id=saved.id,
                        title=saved.title,
                        game_type=saved.game_type,
                        organizer=saved.organizer,
                    )
                )

            logfire.info(
                "Competition created", competition_id=saved.id, organizer=organizer
            )
            return saved

    async def get_competition(self, competition_id: CompetitionId) -> Competition:
        """Get a competition by ID.

        Args:
            competition_id: Competition ID

        Returns:
            The competition

        Raises:
            NotFoundError: If no competition has this ID
        """
        competition = await self.competition_repository.find_by_id(competition_id)
        if competition is None:
            logfire.warn("Competition not found", competition_id=competition_id)
            raise NotFoundError("Competition", str(competition_id))
        return competition

    async def toggle_status(
        self, caller: UserId, competition_id: CompetitionId
    ) -> Competition:
        """Flip a competition's active flag.

        Args:
            caller: Identity requesting the change
            competition_id: Competition ID

        Returns:
            Updated competition

        Raises:
            NotFoundError: If the competition doesn't exist
            ForbiddenError: If caller is not the organizer
        """
        with logfire.span(
            "competition_service.toggle_status",
            competition_id=competition_id,
            caller=caller,
        ):
            async with self.registry_lock:
                competition = await self._get_for_update(competition_id)

                if not competition.is_organized_by(caller):
                    logfire.warn(
                        "Status toggle by non-organizer",
                        competition_id=competition_id,
                        caller=caller,
                    )
                    raise ForbiddenError(
                        "Only the organizer can change the competition status",
                        user_id=caller,
                    )

                return await self._set_active(
                    competition,
                    not competition.is_active,
                    caller,
                    CompetitionStatusChange.TOGGLED,
                )

    async def deactivate(
        self, caller: UserId, competition_id: CompetitionId
    ) -> Competition:
        """Force a competition inactive (registry owners only).

        Unlike toggling, this never reactivates a competition.

        Args:
            caller: Identity requesting the change
            competition_id: Competition ID

        Returns:
            Updated competition

        Raises:
            NotFoundError: If the competition doesn't exist
            ForbiddenError: If caller is not a registry owner
        """
        with logfire.span(
            "competition_service.deactivate",
            competition_id=competition_id,
            caller=caller,
        ):
            async with self.registry_lock:
                competition = await self._get_for_update(competition_id)

                if not self.is_registry_owner(caller):
                    logfire.warn(
                        "Deactivation by non-owner",
                        competition_id=competition_id,
                        caller=caller,
                    )
                    raise ForbiddenError(
                        "Only a registry owner can deactivate competitions",
                        user_id=caller,
                    )

                return await self._set_active(
                    competition, False, caller, CompetitionStatusChange.DEACTIVATED
                )

    async def list_for_voting(self, caller: UserId) -> list[Competition]:
        """List competitions the caller may still vote on.

        Active, not organized by the caller and not yet voted on by the
        caller, in ascending ID order.

        Args:
            caller: Prospective voter

        Returns:
            List of open competitions
        """
        return await self.registry_repository.find_open_for_voter(caller)

    async def list_organized(self, organizer: UserId) -> list[Competition]:
        """List competitions created by an organizer, in creation order."""
        return await self.competition_repository.find_by_organizer(organizer)

    async def get_counts(self) -> RegistryCounts:
        """Read the total number of competitions and votes at one point in time."""
        return await self.registry_repository.counts()

    async def _get_for_update(self, competition_id: CompetitionId) -> Competition:
        competition = await self.competition_repository.find_by_id_for_update(
            competition_id
        )
        if competition is None:
            logfire.warn("Competition not found", competition_id=competition_id)
            raise NotFoundError("Competition", str(competition_id))
        return competition

    async def _set_active(
        self,
        competition: Competition,
        is_active: bool,
        caller: UserId,
        change: CompetitionStatusChange,
    ) -> Competition:
        updated = await self.competition_repository.set_active(
            competition.id, is_active
        )
        if updated is None:
            raise NotFoundError("Competition", str(competition.id))

        await self.event_publisher.publish(
            CompetitionStatusChanged(
                competition_id=updated.id,
                is_active=updated.is_active,
                changed_by=caller,
                change=change,
            )
        )
        logfire.info(
            "Competition status changed",
            competition_id=updated.id,
            is_active=updated.is_active,
            change=change.value,
        )
        return updated
