"""Registry statistics routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from arena.application.usecase.registry import (
    GetTotalCountsResponse,
    GetTotalCountsUseCase,
)

router = APIRouter(tags=["stats"], route_class=DishkaRoute)


@router.get("/stats", response_model=GetTotalCountsResponse)
async def get_total_counts(
    get_total_counts_use_case: FromDishka[GetTotalCountsUseCase],
) -> GetTotalCountsResponse:
    """Total number of competitions and votes in the registry."""
    return await get_total_counts_use_case.execute()
