"""
FastAPI Routes для инноваций (идей).
"""

from fastapi import Depends

from src.api.dependencies import get_content_service
from src.api.routes.content import build_content_router
from src.api.schemas.content_schemas import InnovationResponse
from src.application.services.content_service import ContentService
from src.domain.value_objects.content_kind import ContentKind

router = build_content_router(ContentKind.INNOVATION, "/innovations")


@router.post("/{item_id}/like", response_model=InnovationResponse)
async def like_innovation(
    item_id: str,
    service: ContentService = Depends(get_content_service)
):
    """+1 лайк, атомарно на стороне БД."""
    item = await service.like_innovation(item_id)
    return InnovationResponse.from_entity(item)
