"""
Фабрика роутеров для статей, новостей и инноваций.

Три вида контента разделяют одинаковый набор маршрутов;
отличаются только схема ответа и префикс.
"""

from typing import List, Optional, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.dependencies import get_content_service, get_current_principal
from src.api.schemas.common_schemas import SuccessResponse
from src.api.schemas.content_schemas import (
    ArticleResponse,
    CreateContentRequest,
    InnovationResponse,
    NewsResponse,
    UpdateContentRequest,
)
from src.application.commands.create_content_command import CreateContentCommand
from src.application.queries.list_content_query import ListContentQuery
from src.application.services.content_service import ContentService
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import EntityNotFoundError

RESPONSE_MODELS = {
    ContentKind.ARTICLE: ArticleResponse,
    ContentKind.NEWS: NewsResponse,
    ContentKind.INNOVATION: InnovationResponse,
}


def build_content_router(kind: ContentKind, prefix: str) -> APIRouter:
    """Собрать CRUD-роутер для вида контента."""
    response_model: Type[BaseModel] = RESPONSE_MODELS[kind]
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.get("", response_model=List[response_model])
    async def list_items(
        published: Optional[bool] = None,
        author_id: Optional[str] = None,
        category_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        service: ContentService = Depends(get_content_service)
    ):
        """Список, новые первыми."""
        query = ListContentQuery(
            kind=kind,
            published=published,
            author_id=author_id,
            category_id=category_id,
            limit=limit,
            offset=offset,
        )
        items = await service.list_content(query)
        return [response_model.from_entity(item) for item in items]

    @router.get("/pending", response_model=List[response_model])
    async def list_pending(
        principal: Principal = Depends(get_current_principal),
        service: ContentService = Depends(get_content_service)
    ):
        """Черновики, ожидающие публикации (только администратор)."""
        items = await service.list_pending(kind, principal)
        return [response_model.from_entity(item) for item in items]

    @router.get("/slug/{slug}", response_model=response_model)
    async def get_by_slug(
        slug: str,
        service: ContentService = Depends(get_content_service)
    ):
        item = await service.get_content_by_slug(kind, slug)
        return response_model.from_entity(item)

    @router.get("/{item_id}", response_model=response_model)
    async def get_item(
        item_id: str,
        service: ContentService = Depends(get_content_service)
    ):
        item = await service.get_content(kind, item_id)
        return response_model.from_entity(item)

    @router.post("", response_model=response_model, status_code=201)
    async def create_item(
        request: CreateContentRequest,
        principal: Principal = Depends(get_current_principal),
        service: ContentService = Depends(get_content_service)
    ):
        """Создать запись. Не-администратор всегда получает черновик."""
        command = CreateContentCommand(kind=kind, **request.model_dump())
        item = await service.create_content(command, principal)
        return response_model.from_entity(item)

    @router.patch("/{item_id}", response_model=response_model)
    async def update_item(
        item_id: str,
        request: UpdateContentRequest,
        principal: Principal = Depends(get_current_principal),
        service: ContentService = Depends(get_content_service)
    ):
        """Частичное обновление; published=true только для администратора."""
        changes = request.model_dump(exclude_unset=True)
        item = await service.update_content(kind, item_id, changes, principal)
        return response_model.from_entity(item)

    @router.post("/{item_id}/publish", response_model=response_model)
    async def publish_item(
        item_id: str,
        principal: Principal = Depends(get_current_principal),
        service: ContentService = Depends(get_content_service)
    ):
        item = await service.publish(kind, item_id, principal)
        return response_model.from_entity(item)

    @router.delete("/{item_id}", response_model=SuccessResponse)
    async def delete_item(
        item_id: str,
        principal: Principal = Depends(get_current_principal),
        service: ContentService = Depends(get_content_service)
    ):
        if not await service.delete_content(kind, item_id, principal):
            raise EntityNotFoundError(f"{kind.display_name} not found")
        return SuccessResponse()

    return router
