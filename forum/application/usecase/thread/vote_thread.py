"""Vote on thread use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.items import ThreadItem
from forum.domain.model import Vote
from forum.domain.service import ThreadService, VoteService
from forum.domain.value import Nickname, ThreadKey


class VoteThreadRequest(BaseModel):
    """Vote request."""

    slug_or_id: str
    nickname: str
    voice: int


class VoteThreadUseCase:
    """Use case for casting or changing a vote on a thread."""

    def __init__(self, thread_service: ThreadService, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            thread_service: Thread domain service
            vote_service: Vote domain service
        """
        self.thread_service = thread_service
        self.vote_service = vote_service

    async def execute(self, request: VoteThreadRequest) -> ThreadItem:
        """Execute vote flow.

        Steps:
        1. Resolve the thread by id or slug
        2. Insert the vote, or update the user's earlier vote
        3. Read the thread back with its recomputed tally

        Returns:
            The thread with its new vote tally

        Raises:
            NotFoundError: If thread not found
            MissingReferenceError: If the user does not exist
        """
        key = ThreadKey.parse(request.slug_or_id)
        with logfire.span("vote_thread.execute", thread=str(key)):
            thread = await self.thread_service.get_by_key(key)
            result = await self.vote_service.vote(
                Vote(
                    thread=thread.id,
                    nickname=Nickname(request.nickname),
                    voice=request.voice,
                )
            )
            logfire.info(
                "Vote recorded",
                thread_id=thread.id,
                nickname=request.nickname,
                outcome=result.outcome.value,
            )

            thread = await self.thread_service.get_by_key(ThreadKey(id=thread.id))
            return ThreadItem.from_domain(thread)
