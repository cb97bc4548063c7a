"""Thread routes.

Threads are addressed by numeric id or by slug in every path.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel

from forum.application.usecase.items import PostItem, ThreadItem
from forum.application.usecase.post import (
    CreatePostsRequest,
    CreatePostsUseCase,
    ListThreadPostsRequest,
    ListThreadPostsUseCase,
    NewPost,
)
from forum.application.usecase.thread import (
    GetThreadRequest,
    GetThreadUseCase,
    UpdateThreadRequest,
    UpdateThreadUseCase,
    VoteThreadRequest,
    VoteThreadUseCase,
)
from forum.domain.error import DomainError
from forum.domain.value import PostSortMode
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/api/thread", tags=["threads"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Body of a vote request."""

    nickname: str
    voice: int


class ThreadUpdateBody(BaseModel):
    """Body of a thread update request."""

    title: Optional[str] = None
    message: Optional[str] = None


@router.post(
    "/{slug_or_id}/create",
    response_model=list[PostItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_posts(
    slug_or_id: str,
    posts: list[NewPost],
    create_posts_use_case: FromDishka[CreatePostsUseCase],
) -> list[PostItem]:
    """Add a batch of posts to a thread, all or nothing.

    Raises:
        HTTPException: 404 if the thread or an author does not exist,
            409 if a parent is not a post of this thread
    """
    try:
        result = await create_posts_use_case.execute(
            CreatePostsRequest(slug_or_id=slug_or_id, posts=posts)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return result.posts


@router.post("/{slug_or_id}/vote", response_model=ThreadItem)
async def vote(
    slug_or_id: str,
    body: VoteBody,
    vote_thread_use_case: FromDishka[VoteThreadUseCase],
) -> ThreadItem:
    """Cast or change a vote; returns the thread with its new tally."""
    try:
        return await vote_thread_use_case.execute(
            VoteThreadRequest(
                slug_or_id=slug_or_id, nickname=body.nickname, voice=body.voice
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{slug_or_id}/details", response_model=ThreadItem)
async def get_thread(
    slug_or_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> ThreadItem:
    """Get a thread by id or slug."""
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(slug_or_id=slug_or_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{slug_or_id}/details", response_model=ThreadItem)
async def update_thread(
    slug_or_id: str,
    body: ThreadUpdateBody,
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
) -> ThreadItem:
    """Edit a thread's title and message."""
    try:
        return await update_thread_use_case.execute(
            UpdateThreadRequest(slug_or_id=slug_or_id, **body.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{slug_or_id}/posts", response_model=list[PostItem])
async def list_thread_posts(
    slug_or_id: str,
    list_thread_posts_use_case: FromDishka[ListThreadPostsUseCase],
    limit: int = Query(default=0, ge=0),
    since: Optional[int] = Query(default=None, ge=0),
    sort: PostSortMode = Query(default=PostSortMode.FLAT),
    desc: bool = Query(default=False),
) -> list[PostItem]:
    """List a thread's posts.

    Args:
        slug_or_id: Thread id or slug
        limit: Page size, 0 for everything (root posts in ``parent_tree``)
        since: Id of the last post already seen, 0 for none
        sort: ``flat``, ``tree`` or ``parent_tree``
        desc: Walk the order backwards

    Raises:
        HTTPException: 404 if the thread or the ``since`` post does not exist
    """
    try:
        result = await list_thread_posts_use_case.execute(
            ListThreadPostsRequest(
                slug_or_id=slug_or_id, sort=sort, limit=limit, since=since, desc=desc
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    return result.posts
