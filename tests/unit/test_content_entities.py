"""
Unit tests для сущностей контента.
"""

import pytest

from src.domain.entities.content import DEFAULT_READ_TIME, Article, Innovation, NewsItem, content_class
from src.domain.value_objects.content_kind import ContentKind
from src.shared.exceptions.domain_exceptions import DomainValidationError


def make_article(**overrides):
    values = dict(
        title="Sun'iy intellekt",
        slug="suniy-intellekt",
        excerpt="Qisqacha",
        content="To'liq matn",
        author_id="author-1",
    )
    values.update(overrides)
    return Article(**values)


def test_article_creation_defaults():
    """Тест создания статьи со значениями по умолчанию."""
    article = make_article()

    assert article.published is False
    assert article.views == 0
    assert article.read_time == DEFAULT_READ_TIME
    assert article.created_at is not None


def test_article_read_time_none_falls_back_to_default():
    article = make_article(read_time=None)
    assert article.read_time == DEFAULT_READ_TIME


def test_article_validation_empty_title():
    """Тест валидации - пустой заголовок."""
    with pytest.raises(DomainValidationError):
        make_article(title="   ")


def test_article_validation_slug_with_spaces():
    with pytest.raises(DomainValidationError):
        make_article(slug="bad slug")


def test_article_requires_excerpt_and_content():
    with pytest.raises(DomainValidationError):
        make_article(excerpt="")
    with pytest.raises(DomainValidationError):
        make_article(content=None)


def test_content_requires_author():
    with pytest.raises(DomainValidationError):
        NewsItem(title="Yangilik", slug="yangilik", author_id="")


def test_optional_references_blank_become_none():
    """Тест: пустые необязательные ссылки хранятся как None."""
    news = NewsItem(title="Yangilik", slug="yangilik", author_id="a", category_id="", image="  ", content="")

    assert news.category_id is None
    assert news.image is None
    assert news.content is None


def test_innovation_requires_description():
    with pytest.raises(DomainValidationError):
        Innovation(title="G'oya", slug="goya", author_id="a", description="")

    innovation = Innovation(title="G'oya", slug="goya", author_id="a", description="Tavsif")
    assert innovation.likes == 0


def test_publish_is_idempotent():
    """Тест: повторная публикация: no-op без ошибки."""
    article = make_article()

    assert article.publish() is True
    first_update = article.updated_at
    assert article.publish() is False
    assert article.published is True
    assert article.updated_at >= first_update


def test_apply_changes_ignores_published_and_unknown_fields():
    article = make_article()

    article.apply_changes({"title": "Yangi sarlavha", "published": True, "views": 100, "category_id": ""})

    assert article.title == "Yangi sarlavha"
    assert article.published is False
    assert article.views == 0
    assert article.category_id is None


def test_apply_changes_validates():
    article = make_article()
    with pytest.raises(DomainValidationError):
        article.apply_changes({"title": ""})


def test_content_class_by_kind():
    assert content_class(ContentKind.ARTICLE) is Article
    assert content_class("news") is NewsItem
    assert content_class(ContentKind.INNOVATION) is Innovation
