"""
FastAPI Routes для комментариев и общего обсуждения.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends

from src.api.dependencies import get_comment_service, get_current_principal, get_optional_principal
from src.api.schemas.comment_schemas import CommentResponse, CreateCommentRequest
from src.api.schemas.common_schemas import SuccessResponse
from src.application.commands.post_comment_command import PostCommentCommand
from src.application.queries.list_comments_query import ListThreadQuery
from src.application.services.comment_service import CommentService
from src.domain.value_objects.comment_target import CommentTarget
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import EntityNotFoundError

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("", response_model=List[CommentResponse])
async def list_comments(
    approved: Optional[bool] = None,
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: CommentService = Depends(get_comment_service)
):
    """Все комментарии; ?approved=false: очередь модерации (администратор)."""
    comments = await service.list_comments(approved=approved, actor=principal)
    return [CommentResponse.from_entity(c) for c in comments]


@router.get("/discussion", response_model=List[CommentResponse])
async def list_general_discussion(
    service: CommentService = Depends(get_comment_service)
):
    """Общая доска обсуждений, посты с прямыми ответами."""
    posts = await service.list_general_discussion()
    return [CommentResponse.from_entity(p) for p in posts]


@router.get("/{comment_id}/replies", response_model=List[CommentResponse])
async def list_replies(
    comment_id: str,
    approved: Optional[bool] = True,
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: CommentService = Depends(get_comment_service)
):
    """Прямые ответы; ?approved=false: только администратор."""
    replies = await service.list_replies(comment_id, approved=approved, actor=principal)
    return [CommentResponse.from_entity(r) for r in replies]


@router.get("/{kind}/{content_id}", response_model=List[CommentResponse])
async def list_thread(
    kind: ContentKind,
    content_id: str,
    approved: Optional[bool] = True,
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: CommentService = Depends(get_comment_service)
):
    """Ветка статьи/новости/инновации, новые первыми."""
    query = ListThreadQuery(target=CommentTarget.for_content(kind, content_id), approved=approved)
    comments = await service.list_thread(query, actor=principal)
    return [CommentResponse.from_entity(c) for c in comments]


@router.post("", response_model=CommentResponse, status_code=201)
async def post_comment(
    request: CreateCommentRequest,
    principal: Principal = Depends(get_current_principal),
    service: CommentService = Depends(get_comment_service)
):
    """
    Комментарий, ответ или пост общего обсуждения.

    Без привязки к контенту: одобрен сразу, иначе ждёт модерации.
    """
    target = CommentTarget(
        article_id=request.article_id,
        news_id=request.news_id,
        innovation_id=request.innovation_id,
        parent_id=request.parent_id,
    )
    command = PostCommentCommand(
        content=request.content or "",
        author_id=principal.user_id,
        target=target,
    )
    comment = await service.post_comment(command)
    return CommentResponse.from_entity(comment)


@router.patch("/{comment_id}/approve", response_model=CommentResponse)
async def approve_comment(
    comment_id: str,
    principal: Principal = Depends(get_current_principal),
    service: CommentService = Depends(get_comment_service)
):
    comment = await service.approve(comment_id, principal)
    return CommentResponse.from_entity(comment)


@router.post("/{comment_id}/like", response_model=SuccessResponse)
async def like_comment(
    comment_id: str,
    service: CommentService = Depends(get_comment_service)
):
    await service.like(comment_id)
    return SuccessResponse()


@router.delete("/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    comment_id: str,
    principal: Principal = Depends(get_current_principal),
    service: CommentService = Depends(get_comment_service)
):
    if not await service.delete_comment(comment_id, principal):
        raise EntityNotFoundError("Comment not found")
    return SuccessResponse()
