"""
FastAPI Routes для категорий.
"""

from typing import List

from fastapi import APIRouter, Depends

from src.api.dependencies import get_category_service, get_current_principal
from src.api.schemas.common_schemas import CategoryResponse, CreateCategoryRequest
from src.application.services.category_service import CategoryService
from src.domain.value_objects.principal import Principal

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service)
):
    categories = await service.list_categories()
    return [CategoryResponse.from_entity(c) for c in categories]


@router.get("/{slug}", response_model=CategoryResponse)
async def get_category(
    slug: str,
    service: CategoryService = Depends(get_category_service)
):
    return CategoryResponse.from_entity(await service.get_by_slug(slug))


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    request: CreateCategoryRequest,
    principal: Principal = Depends(get_current_principal),
    service: CategoryService = Depends(get_category_service)
):
    category = await service.create_category(request.name, request.slug, principal)
    return CategoryResponse.from_entity(category)
