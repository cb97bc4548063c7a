"""Service maintenance routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from forum.application.usecase.service import (
    ClearServiceUseCase,
    GetStatusResponse,
    GetStatusUseCase,
)

router = APIRouter(prefix="/api/service", tags=["service"], route_class=DishkaRoute)


@router.get("/status", response_model=GetStatusResponse)
async def get_status(
    get_status_use_case: FromDishka[GetStatusUseCase],
) -> GetStatusResponse:
    """Count users, forums, threads and posts."""
    return await get_status_use_case.execute()


@router.post("/clear")
async def clear(clear_service_use_case: FromDishka[ClearServiceUseCase]) -> dict:
    """Delete all data."""
    await clear_service_use_case.execute()
    return {"status": "cleared"}
