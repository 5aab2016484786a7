"""
CQRS Command: PostCommentCommand
"""

from dataclasses import dataclass, field

from src.domain.value_objects.comment_target import CommentTarget


@dataclass(frozen=True)
class PostCommentCommand:
    """Комментарий, ответ или пост общего обсуждения."""

    content: str
    author_id: str
    target: CommentTarget = field(default_factory=CommentTarget)
