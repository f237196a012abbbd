"""Vote domain service."""

from datetime import datetime

import logfire
from sqlalchemy.exc import IntegrityError

from arena.config import RegistrySettings
from arena.domain.error import (
    ConflictError,
    ForbiddenError,
    InactiveResourceError,
    InvalidInputError,
    NotFoundError,
)
from arena.domain.model.competition import Competition
from arena.domain.model.event import VoteSubmitted
from arena.domain.model.vote import Vote
from arena.domain.repository import CompetitionRepository, VoteRepository
from arena.domain.value import (
    MAX_RATING,
    MIN_RATING,
    CompetitionId,
    UserId,
    VoteId,
    VoteVisibility,
    is_valid_rating,
)

from .base import Service
from .event_publisher import EventPublisher
from .lock import RegistryLock


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        competition_repository: CompetitionRepository,
        event_publisher: EventPublisher,
        registry_lock: RegistryLock,
        registry_settings: RegistrySettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            competition_repository: Competition repository
            event_publisher: Publisher for registry events
            registry_lock: Process-wide registry write lock
            registry_settings: Registry configuration (owners, vote visibility)
        """
        self.vote_repository = vote_repository
        self.competition_repository = competition_repository
        self.event_publisher = event_publisher
        self.registry_lock = registry_lock
        self.registry_settings = registry_settings

    async def submit_vote(
        self,
        competition_id: CompetitionId,
        voter: UserId,
        choice: bool,
        rating: int,
        comment: str | None = None,
    ) -> Vote:
        """Cast a vote on a competition.

        Checks run in a fixed order and the first failure wins:
        existence, active flag, self-vote, duplicate vote, rating range.
        Storing the vote and incrementing the competition's vote_count
        happen together under the registry lock.

        Args:
            competition_id: Competition ID
            voter: Identity casting the vote
            choice: Support (True) or oppose (False)
            rating: Rating from 1 to 5
            comment: Optional free-text comment

        Returns:
            Created vote

        Raises:
            NotFoundError: If the competition doesn't exist
            InactiveResourceError: If the competition is inactive
            ForbiddenError: If the voter organizes the competition
            ConflictError: If the voter already voted on it
            InvalidInputError: If rating is outside 1-5
        """
        with logfire.span(
            "vote_service.submit_vote", competition_id=competition_id, voter=voter
        ):
            async with self.registry_lock:
                competition = await self.competition_repository.find_by_id_for_update(
                    competition_id
                )
                if competition is None:
                    logfire.warn(
                        "Vote on non-existent competition",
                        competition_id=competition_id,
                    )
                    raise NotFoundError("Competition", str(competition_id))

                if not competition.is_active:
                    logfire.warn(
                        "Vote on inactive competition", competition_id=competition_id
                    )
                    raise InactiveResourceError("Competition", str(competition_id))

                if competition.is_organized_by(voter):
                    logfire.warn(
                        "Organizer attempted to vote on own competition",
                        competition_id=competition_id,
                        voter=voter,
                    )
                    raise ForbiddenError(
                        "Organizers cannot vote on their own competition",
                        user_id=voter,
                    )

                existing = await self.vote_repository.find_by_voter_and_competition(
                    voter, competition_id
                )
                if existing is not None:
                    logfire.warn(
                        "Duplicate vote attempt",
                        competition_id=competition_id,
                        voter=voter,
                    )
                    raise ConflictError("Already voted on this competition")

                if not is_valid_rating(rating):
                    raise InvalidInputError(
                        f"Rating must be between {MIN_RATING} and {MAX_RATING}"
                    )

                vote = Vote(
                    id=await self.vote_repository.next_id(),
                    competition_id=competition_id,
                    voter=voter,
                    choice=choice,
                    rating=rating,
                    comment=(comment or "").strip() or None,
                    cast_at=datetime.now(),
                )

                try:
                    saved_vote = await self.vote_repository.save(vote)
                except IntegrityError:
                    # Concurrent vote from another process won the unique key
                    logfire.warn(
                        "Duplicate vote attempt",
                        competition_id=competition_id,
                        voter=voter,
                    )
                    raise ConflictError("Already voted on this competition")

                await self.competition_repository.increment_vote_count(competition_id)

                await self.event_publisher.publish(
                    VoteSubmitted(
                        vote_id=saved_vote.id,
                        competition_id=competition_id,
                        voter=voter,
                        choice=choice,
                        rating=rating,
                    )
                )

            logfire.info(
                "Vote submitted",
                vote_id=saved_vote.id,
                competition_id=competition_id,
                voter=voter,
            )
            return saved_vote

    async def has_voted(self, voter: UserId, competition_id: CompetitionId) -> bool:
        """Check whether a voter already cast a vote on a competition."""
        vote = await self.vote_repository.find_by_voter_and_competition(
            voter, competition_id
        )
        return vote is not None

    async def get_vote(self, vote_id: VoteId, caller: UserId | None) -> Vote:
        """Get a single vote by ID.

        Under restricted visibility the voter, the competition's organizer
        and registry owners may read it.

        Raises:
            NotFoundError: If no vote has this ID
            ForbiddenError: If visibility is restricted and caller may not read
        """
        vote = await self.vote_repository.find_by_id(vote_id)
        if vote is None:
            logfire.warn("Vote not found", vote_id=vote_id)
            raise NotFoundError("Vote", str(vote_id))

        if caller is not None and vote.voter == caller:
            return vote

        competition = await self.competition_repository.find_by_id(
            vote.competition_id
        )
        if competition is None:
            raise NotFoundError("Competition", str(vote.competition_id))

        self._check_visibility(competition, caller)
        return vote

    async def list_votes(
        self, competition_id: CompetitionId, caller: UserId | None
    ) -> list[Vote]:
        """List the votes cast on a competition in submission order.

        Under restricted visibility only the organizer and registry owners
        may read them.

        Args:
            competition_id: Competition ID
            caller: Identity making the request (None if anonymous)

        Returns:
            List of votes

        Raises:
            NotFoundError: If the competition doesn't exist
            ForbiddenError: If visibility is restricted and caller may not read
        """
        competition = await self.competition_repository.find_by_id(competition_id)
        if competition is None:
            raise NotFoundError("Competition", str(competition_id))

        self._check_visibility(competition, caller)
        return await self.vote_repository.find_by_competition(competition_id)

    def _check_visibility(
        self, competition: Competition, caller: UserId | None
    ) -> None:
        visibility = VoteVisibility(self.registry_settings.vote_visibility)
        if visibility == VoteVisibility.PUBLIC:
            return

        allowed = caller is not None and (
            competition.is_organized_by(caller)
            or caller in self.registry_settings.owners
        )
        if not allowed:
            logfire.warn(
                "Vote read denied",
                competition_id=competition.id,
                caller=caller,
            )
            raise ForbiddenError(
                "Only the organizer or a registry owner can read votes",
                user_id=caller,
            )
