"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.domain.repository import (
    ForumRepository,
    PostRepository,
    StatusRepository,
    ThreadRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import (
    ForumService,
    OptimisticMutation,
    PostService,
    StatusService,
    ThreadService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_optimistic_mutation(
        self, transactions: TransactionManager
    ) -> OptimisticMutation:
        """Provide the optimistic create protocol bound to the request's transactions."""
        return OptimisticMutation(transactions=transactions)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, mutation: OptimisticMutation
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, mutation=mutation)

    @provide
    def get_forum_service(
        self, forum_repository: ForumRepository, mutation: OptimisticMutation
    ) -> ForumService:
        """Provide forum domain service."""
        return ForumService(forum_repository=forum_repository, mutation=mutation)

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, mutation: OptimisticMutation
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(thread_repository=thread_repository, mutation=mutation)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, transactions: TransactionManager
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, transactions=transactions)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, mutation: OptimisticMutation
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, mutation=mutation)

    @provide
    def get_status_service(
        self, status_repository: StatusRepository, transactions: TransactionManager
    ) -> StatusService:
        """Provide status domain service."""
        return StatusService(
            status_repository=status_repository, transactions=transactions
        )
