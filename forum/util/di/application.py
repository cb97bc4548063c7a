"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.forum import (
    CreateForumUseCase,
    GetForumUseCase,
    ListForumThreadsUseCase,
    ListForumUsersUseCase,
)
from forum.application.usecase.post import (
    CreatePostsUseCase,
    GetPostDetailsUseCase,
    ListThreadPostsUseCase,
    UpdatePostUseCase,
)
from forum.application.usecase.service import ClearServiceUseCase, GetStatusUseCase
from forum.application.usecase.thread import (
    CreateThreadUseCase,
    GetThreadUseCase,
    UpdateThreadUseCase,
    VoteThreadUseCase,
)
from forum.application.usecase.user import (
    CreateUserUseCase,
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from forum.domain.service import (
    ForumService,
    PostService,
    StatusService,
    ThreadService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    # Forum use cases
    @provide(scope=Scope.REQUEST)
    def get_create_forum_use_case(
        self, forum_service: ForumService
    ) -> CreateForumUseCase:
        """Provide create forum use case."""
        return CreateForumUseCase(forum_service=forum_service)

    @provide(scope=Scope.REQUEST)
    def get_get_forum_use_case(self, forum_service: ForumService) -> GetForumUseCase:
        """Provide get forum use case."""
        return GetForumUseCase(forum_service=forum_service)

    @provide(scope=Scope.REQUEST)
    def get_list_forum_threads_use_case(
        self, forum_service: ForumService, thread_service: ThreadService
    ) -> ListForumThreadsUseCase:
        """Provide list forum threads use case."""
        return ListForumThreadsUseCase(
            forum_service=forum_service, thread_service=thread_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_forum_users_use_case(
        self, forum_service: ForumService, user_service: UserService
    ) -> ListForumUsersUseCase:
        """Provide list forum users use case."""
        return ListForumUsersUseCase(
            forum_service=forum_service, user_service=user_service
        )

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_update_thread_use_case(
        self, thread_service: ThreadService
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_thread_use_case(
        self, thread_service: ThreadService, vote_service: VoteService
    ) -> VoteThreadUseCase:
        """Provide vote use case."""
        return VoteThreadUseCase(
            thread_service=thread_service, vote_service=vote_service
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_posts_use_case(
        self, thread_service: ThreadService, post_service: PostService
    ) -> CreatePostsUseCase:
        """Provide create posts use case."""
        return CreatePostsUseCase(
            thread_service=thread_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_thread_posts_use_case(
        self, thread_service: ThreadService, post_service: PostService
    ) -> ListThreadPostsUseCase:
        """Provide list thread posts use case."""
        return ListThreadPostsUseCase(
            thread_service=thread_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_details_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        forum_service: ForumService,
        thread_service: ThreadService,
    ) -> GetPostDetailsUseCase:
        """Provide get post details use case."""
        return GetPostDetailsUseCase(
            post_service=post_service,
            user_service=user_service,
            forum_service=forum_service,
            thread_service=thread_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    # Service use cases
    @provide(scope=Scope.REQUEST)
    def get_get_status_use_case(self, status_service: StatusService) -> GetStatusUseCase:
        """Provide status use case."""
        return GetStatusUseCase(status_service=status_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_service_use_case(
        self, status_service: StatusService
    ) -> ClearServiceUseCase:
        """Provide clear use case."""
        return ClearServiceUseCase(status_service=status_service)
