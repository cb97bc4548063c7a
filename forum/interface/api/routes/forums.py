"""Forum routes."""

from datetime import datetime
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, field_validator

from forum.application.usecase.forum import (
    CreateForumRequest,
    CreateForumUseCase,
    GetForumRequest,
    GetForumUseCase,
    ListForumThreadsRequest,
    ListForumThreadsUseCase,
    ListForumUsersRequest,
    ListForumUsersUseCase,
)
from forum.application.usecase.items import ForumItem, ThreadItem, UserItem
from forum.application.usecase.thread import CreateThreadRequest, CreateThreadUseCase
from forum.domain.error import DomainError
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/api/forum", tags=["forums"], route_class=DishkaRoute)


class NewThreadBody(BaseModel):
    """Body of a create thread request."""

    author: str
    title: str
    message: str
    slug: Optional[str] = None
    created: Optional[datetime] = None

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: Optional[str]) -> Optional[str]:
        """Digits-only slugs would be read back as thread ids."""
        if v is not None and v.isdigit():
            raise ValueError("Thread slug must not be a number")
        return v


@router.post(
    "/create", response_model=ForumItem, status_code=status.HTTP_201_CREATED
)
async def create_forum(
    body: CreateForumRequest,
    response: Response,
    create_forum_use_case: FromDishka[CreateForumUseCase],
) -> ForumItem:
    """Create a forum.

    Returns:
        The new forum (201), or the forum already holding the slug (409)

    Raises:
        HTTPException: 404 if the owning user does not exist
    """
    try:
        result = await create_forum_use_case.execute(body)
    except DomainError as e:
        raise to_http_exception(e)

    if not result.created:
        response.status_code = status.HTTP_409_CONFLICT
    return result.forum


@router.get("/{slug}/details", response_model=ForumItem)
async def get_forum(
    slug: str,
    get_forum_use_case: FromDishka[GetForumUseCase],
) -> ForumItem:
    """Get a forum with its thread and post counters."""
    try:
        return await get_forum_use_case.execute(GetForumRequest(slug=slug))
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{slug}/create", response_model=ThreadItem, status_code=status.HTTP_201_CREATED
)
async def create_thread(
    slug: str,
    body: NewThreadBody,
    response: Response,
    create_thread_use_case: FromDishka[CreateThreadUseCase],
) -> ThreadItem:
    """Start a thread in a forum.

    Returns:
        The new thread (201), or the thread already holding the slug (409)

    Raises:
        HTTPException: 404 if the forum or author does not exist
    """
    try:
        result = await create_thread_use_case.execute(
            CreateThreadRequest(forum=slug, **body.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e)

    if not result.created:
        response.status_code = status.HTTP_409_CONFLICT
    return result.thread


@router.get("/{slug}/threads", response_model=list[ThreadItem])
async def list_forum_threads(
    slug: str,
    list_forum_threads_use_case: FromDishka[ListForumThreadsUseCase],
    limit: int = Query(default=0, ge=0),
    since: Optional[datetime] = Query(default=None),
    desc: bool = Query(default=False),
) -> list[ThreadItem]:
    """List a forum's threads by creation time."""
    try:
        result = await list_forum_threads_use_case.execute(
            ListForumThreadsRequest(slug=slug, limit=limit, since=since, desc=desc)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return result.threads


@router.get("/{slug}/users", response_model=list[UserItem])
async def list_forum_users(
    slug: str,
    list_forum_users_use_case: FromDishka[ListForumUsersUseCase],
    limit: int = Query(default=0, ge=0),
    since: Optional[str] = Query(default=None),
    desc: bool = Query(default=False),
) -> list[UserItem]:
    """List users who started a thread or wrote a post in a forum."""
    try:
        result = await list_forum_users_use_case.execute(
            ListForumUsersRequest(slug=slug, limit=limit, since=since, desc=desc)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return result.users
