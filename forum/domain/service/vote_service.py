"""Vote domain service."""

import logfire

from forum.domain.model.vote import Vote
from forum.domain.repository import VoteRepository

from .base import Service
from .mutation import CreateOutcome, CreateResult, OptimisticMutation


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self, vote_repository: VoteRepository, mutation: OptimisticMutation
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            mutation: Optimistic create protocol
        """
        self.vote_repository = vote_repository
        self.mutation = mutation

    async def vote(self, vote: Vote) -> CreateResult[Vote]:
        """Cast or change a user's vote on a thread.

        The first vote inserts a row; voting again updates that row's
        voice. Either way the thread's tally is recomputed from all votes.

        Args:
            vote: The voice to record

        Returns:
            The stored vote, ``created`` or ``updated``

        Raises:
            MissingReferenceError: If the user or thread does not exist
        """
        with logfire.span(
            "vote_service.vote",
            thread_id=vote.thread,
            nickname=vote.nickname,
            voice=vote.voice,
        ):
            return await self.mutation.create(
                lambda: self.vote_repository.save(vote),
                lambda: self.vote_repository.update(vote),
                resource="Vote",
                conflict_outcome=CreateOutcome.UPDATED,
            )
