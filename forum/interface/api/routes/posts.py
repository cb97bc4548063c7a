"""Post routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, ValidationError

from forum.application.usecase.items import PostItem
from forum.application.usecase.post import (
    GetPostDetailsRequest,
    GetPostDetailsResponse,
    GetPostDetailsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.domain.error import DomainError
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/api/post", tags=["posts"], route_class=DishkaRoute)


class PostUpdateBody(BaseModel):
    """Body of a post update request."""

    message: Optional[str] = None


@router.get(
    "/{post_id}/details",
    response_model=GetPostDetailsResponse,
    response_model_exclude_unset=True,
)
async def get_post_details(
    post_id: int,
    get_post_details_use_case: FromDishka[GetPostDetailsUseCase],
    related: Optional[str] = Query(
        default=None, description="Comma separated: user, forum, thread"
    ),
) -> GetPostDetailsResponse:
    """Get a post, optionally with its author, forum and thread."""
    names = [name for name in (related or "").split(",") if name]
    try:
        request = GetPostDetailsRequest(post_id=post_id, related=names)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown related entity in {related!r}",
        )

    try:
        return await get_post_details_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{post_id}/details", response_model=PostItem)
async def update_post(
    post_id: int,
    body: PostUpdateBody,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> PostItem:
    """Edit a post's message."""
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(post_id=post_id, message=body.message)
        )
    except DomainError as e:
        raise to_http_exception(e)
