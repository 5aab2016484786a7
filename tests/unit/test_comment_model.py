"""
Unit tests для Comment и CommentTarget.
"""

import pytest

from src.domain.entities.comment import Comment
from src.domain.entities.stored_file import StoredFile
from src.domain.value_objects.comment_target import CommentTarget
from src.domain.value_objects.content_kind import ContentKind
from src.shared.exceptions.domain_exceptions import DomainValidationError


def test_target_rejects_two_content_references():
    """Тест: не более одной привязки к контенту."""
    with pytest.raises(DomainValidationError):
        CommentTarget(article_id="a1", news_id="n1")


def test_target_blank_values_mean_general_discussion():
    target = CommentTarget(article_id="", news_id=None, innovation_id="  ")

    assert target.is_general_discussion is True
    assert target.content_ref() is None
    assert target.is_reply is False


def test_target_for_content():
    target = CommentTarget.for_content(ContentKind.INNOVATION, "i1")

    assert target.innovation_id == "i1"
    assert target.content_ref() == (ContentKind.INNOVATION, "i1")


def test_general_post_is_approved_immediately():
    """Тест: пост без привязки одобрен сразу."""
    comment = Comment.create("Salom!", "u1", CommentTarget())
    assert comment.approved is True


def test_reply_in_general_discussion_is_approved():
    comment = Comment.create("Javob", "u1", CommentTarget(parent_id="c1"))

    assert comment.approved is True
    assert comment.parent_id == "c1"


def test_comment_on_content_awaits_moderation():
    """Тест: комментарий к статье ждёт модерации."""
    comment = Comment.create("Zo'r maqola", "u1", CommentTarget(article_id="a1"))

    assert comment.approved is False
    assert comment.approve() is True
    assert comment.approve() is False
    assert comment.approved is True


def test_comment_requires_content():
    with pytest.raises(DomainValidationError):
        Comment.create("   ", "u1", CommentTarget())


def test_comment_with_two_targets_is_invalid():
    with pytest.raises(DomainValidationError):
        Comment(content="x", author_id="u1", article_id="a1", innovation_id="i1")


def test_stored_file_single_target():
    with pytest.raises(DomainValidationError):
        StoredFile(name="f.png", path="/uploads/f.png", uploaded_by="u1", article_id="a1", news_id="n1")
