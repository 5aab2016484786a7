"""
FastAPI Routes для статистики.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_statistics_service
from src.api.schemas.common_schemas import StatisticsResponse
from src.application.services.statistics_service import StatisticsService

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("", response_model=StatisticsResponse)
async def get_statistics(
    service: StatisticsService = Depends(get_statistics_service)
):
    """Снимок агрегатов; при первом обращении пересчитывается."""
    return StatisticsResponse.from_entity(await service.get())
