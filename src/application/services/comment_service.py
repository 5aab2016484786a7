"""
Application Service для комментариев и общего обсуждения.
"""

import logging
from typing import List, Optional

from src.application.commands.post_comment_command import PostCommentCommand
from src.application.handlers.comment_command_handler import CommentCommandHandler
from src.application.queries.list_comments_query import ListThreadQuery
from src.domain.entities.comment import Comment
from src.domain.policies import publishing_policy as policy
from src.domain.repositories.comment_repository import ICommentRepository
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import (
    AuthenticationRequiredError,
    DomainValidationError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


def _ensure_moderator(actor: Optional[Principal]) -> None:
    if actor is None:
        raise AuthenticationRequiredError("Authentication required")
    policy.ensure_can_moderate(actor.role)


class CommentService:
    """
    Application Service для комментариев.

    Одобрение: false -> true, только администратор.
    Неодобренные комментарии видит только модератор.
    """

    def __init__(
        self,
        repository: ICommentRepository,
        command_handler: CommentCommandHandler
    ):
        self.repository = repository
        self.command_handler = command_handler

    async def post_comment(self, command: PostCommentCommand) -> Comment:
        return await self.command_handler.handle_post_comment(command)

    async def approve(self, comment_id: str, actor: Principal) -> Comment:
        return await self.command_handler.handle_approve(comment_id, actor)

    async def like(self, comment_id: str) -> None:
        if not await self.repository.increment_likes(comment_id):
            raise EntityNotFoundError("Comment not found")

    async def delete_comment(self, comment_id: str, actor: Principal) -> bool:
        """Удалить комментарий вместе с ответами на него."""
        policy.ensure_can_moderate(actor.role)
        deleted = await self.repository.delete(comment_id)
        if deleted:
            logger.info(f"Comment {comment_id} deleted by {actor.user_id}")
        return deleted

    # =========================================================================
    # Запросы
    # =========================================================================

    async def list_thread(
        self,
        query: ListThreadQuery,
        actor: Optional[Principal] = None
    ) -> List[Comment]:
        """Ветка одного контента, новые первыми."""
        content_ref = query.target.content_ref()
        if content_ref is None:
            raise DomainValidationError("Thread requires an article, news or innovation id")

        if query.approved is not True:
            _ensure_moderator(actor)

        kind, content_id = content_ref
        return await self.repository.find_by_content(kind, content_id, approved=query.approved)

    async def list_replies(
        self,
        parent_id: str,
        approved: Optional[bool] = True,
        actor: Optional[Principal] = None
    ) -> List[Comment]:
        """Прямые ответы; неодобренные видит только модератор."""
        if approved is not True:
            _ensure_moderator(actor)
        return await self.repository.find_replies([parent_id], approved=approved)

    async def list_general_discussion(self) -> List[Comment]:
        """Посты общего обсуждения с прямыми ответами."""
        posts = await self.repository.find_general_posts()
        replies = await self.repository.find_replies([post.id for post in posts], approved=True)

        by_parent = {post.id: post for post in posts}
        for reply in replies:
            by_parent[reply.parent_id].replies.append(reply)
        return posts

    async def list_comments(
        self,
        approved: Optional[bool] = None,
        actor: Optional[Principal] = None
    ) -> List[Comment]:
        """
        Все комментарии.

        approved=True доступен всем; очередь модерации (approved=False)
        и полный список: только администратору.
        """
        if approved is not True:
            _ensure_moderator(actor)
        return await self.repository.find_all(approved=approved)
