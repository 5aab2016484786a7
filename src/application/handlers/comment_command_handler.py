# -*- coding: utf-8 -*-
"""
Command Handler для комментариев.
"""

import logging
from typing import Dict

from src.application.commands.post_comment_command import PostCommentCommand
from src.domain.entities.comment import Comment
from src.domain.policies import publishing_policy as policy
from src.domain.repositories.comment_repository import ICommentRepository
from src.domain.repositories.content_repository import IContentRepository
from src.domain.repositories.user_repository import IUserRepository
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import (
    AuthenticationRequiredError,
    DomainValidationError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class CommentCommandHandler:
    """Handler для команд работы с комментариями."""

    def __init__(
        self,
        comments: ICommentRepository,
        users: IUserRepository,
        content: Dict[ContentKind, IContentRepository]
    ):
        self.comments = comments
        self.users = users
        self.content = content

    async def handle_post_comment(self, command: PostCommentCommand) -> Comment:
        """
        Обработка команды публикации комментария.

        Правила:
        - автор должен существовать
        - не более одной привязки к контенту (проверяет CommentTarget)
        - целевой контент и родитель должны существовать
        - глубина ответов: один уровень
        - ответ указывает тот же контент, что и родитель (или никакого
          для общего обсуждения)

        Raises:
            AuthenticationRequiredError: Автор не найден
            DomainValidationError: Нарушены правила ветки
            EntityNotFoundError: Нет целевого контента или родителя
        """
        if not command.author_id or not await self.users.find_by_id(command.author_id):
            raise AuthenticationRequiredError("Comment author is not a known user")

        target = command.target
        content_ref = target.content_ref()

        if content_ref:
            kind, content_id = content_ref
            if not await self.content[kind].find_by_id(content_id):
                raise EntityNotFoundError(f"{kind.display_name} not found")

        if target.is_reply:
            parent = await self.comments.find_by_id(target.parent_id)
            if not parent:
                raise EntityNotFoundError("Parent comment not found")
            if parent.parent_id:
                raise DomainValidationError("Replies can only be one level deep")
            if content_ref != parent.target.content_ref():
                raise DomainValidationError("Reply must name the same content as the parent comment")

        comment = Comment.create(command.content, command.author_id, target)
        saved = await self.comments.save(comment)

        logger.debug(f"Comment {saved.id} posted (approved={saved.approved})")
        return saved

    async def handle_approve(self, comment_id: str, actor: Principal) -> Comment:
        """Одобрить комментарий. Идемпотентно."""
        policy.ensure_can_moderate(actor.role)

        comment = await self.comments.find_by_id(comment_id)
        if not comment:
            raise EntityNotFoundError("Comment not found")
        if comment.approved:
            return comment

        approved = await self.comments.set_approved(comment_id)
        if not approved:
            raise EntityNotFoundError("Comment not found")

        logger.info(f"Comment {comment_id} approved by {actor.user_id}")
        return approved
