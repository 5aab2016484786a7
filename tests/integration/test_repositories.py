"""
Интеграционные тесты repository-адаптеров на SQLite.
"""

import pytest

from src.domain.entities.comment import Comment
from src.domain.entities.content import Article, Innovation, NewsItem
from src.domain.value_objects.comment_target import CommentTarget
from src.domain.value_objects.content_kind import ContentKind
from src.infrastructure.persistence.comment_repository_impl import CommentRepositoryImpl
from src.infrastructure.persistence.content_repository_impl import ContentRepositoryImpl
from src.infrastructure.persistence.user_repository_impl import UserRepositoryImpl
from src.shared.exceptions.domain_exceptions import (
    BusinessRuleViolation,
    DomainValidationError,
    DuplicateEntityError,
)


def new_article(author_id, slug="maqola", **overrides):
    values = dict(title="Maqola", slug=slug, excerpt="Qisqa", content="Matn", author_id=author_id)
    values.update(overrides)
    return Article(**values)


@pytest.mark.asyncio
async def test_save_and_find_article_by_slug(session, make_user):
    """Тест сохранения и поиска статьи по slug."""
    author = await make_user()
    repository = ContentRepositoryImpl(session, ContentKind.ARTICLE)

    saved = await repository.save(new_article(author.id, slug="birinchi"))
    found = await repository.find_by_slug("birinchi")

    assert found == saved
    assert found.views == 0
    assert found.author_id == author.id
    assert await repository.exists_by_slug("birinchi") is True
    assert await repository.exists_by_slug("yoq") is False


@pytest.mark.asyncio
async def test_duplicate_slug_raises(session, make_user):
    author = await make_user()
    repository = ContentRepositoryImpl(session, ContentKind.NEWS)

    await repository.save(NewsItem(title="A", slug="bir", author_id=author.id))
    with pytest.raises(DuplicateEntityError):
        await repository.save(NewsItem(title="B", slug="bir", author_id=author.id))

    # Сессия остаётся рабочей после отката
    assert len(await repository.find_all()) == 1


@pytest.mark.asyncio
async def test_unknown_author_is_rejected_by_foreign_key(session):
    repository = ContentRepositoryImpl(session, ContentKind.NEWS)

    with pytest.raises(BusinessRuleViolation):
        await repository.save(NewsItem(title="A", slug="a", author_id="missing"))


@pytest.mark.asyncio
async def test_find_all_filters(session, make_user, make_category):
    author = await make_user()
    other = await make_user()
    category = await make_category()
    repository = ContentRepositoryImpl(session, ContentKind.ARTICLE)

    await repository.save(new_article(author.id, slug="a1", published=True, category_id=category.id))
    await repository.save(new_article(author.id, slug="a2"))
    await repository.save(new_article(other.id, slug="a3", published=True))

    assert {a.slug for a in await repository.find_all(published=True)} == {"a1", "a3"}
    assert {a.slug for a in await repository.find_all(published=False)} == {"a2"}
    assert {a.slug for a in await repository.find_all(author_id=author.id)} == {"a1", "a2"}
    assert [a.slug for a in await repository.find_all(category_id=category.id)] == ["a1"]
    assert len(await repository.find_all(limit=2)) == 2


@pytest.mark.asyncio
async def test_delete_returns_whether_row_existed(session, make_user):
    author = await make_user()
    repository = ContentRepositoryImpl(session, ContentKind.ARTICLE)
    article = await repository.save(new_article(author.id))

    assert await repository.delete(article.id) is True
    assert await repository.delete(article.id) is False
    assert await repository.find_by_id(article.id) is None


@pytest.mark.asyncio
async def test_increment_counter_keeps_updated_at(session, make_user):
    """Тест: просмотр не считается редактированием."""
    author = await make_user()
    repository = ContentRepositoryImpl(session, ContentKind.ARTICLE)
    article = await repository.save(new_article(author.id))

    assert await repository.increment_counter(article.id) is True
    assert await repository.increment_counter(article.id) is True
    assert await repository.increment_counter("missing") is False

    reloaded = await repository.find_by_id(article.id)
    assert reloaded.views == 2
    assert reloaded.updated_at == article.updated_at


@pytest.mark.asyncio
async def test_news_has_no_counter(session):
    repository = ContentRepositoryImpl(session, ContentKind.NEWS)
    with pytest.raises(DomainValidationError):
        await repository.increment_counter("any")


@pytest.mark.asyncio
async def test_update_does_not_overwrite_counter(session, make_user):
    author = await make_user()
    repository = ContentRepositoryImpl(session, ContentKind.INNOVATION)
    innovation = await repository.save(
        Innovation(title="G'oya", slug="goya", description="Tavsif", author_id=author.id)
    )
    await repository.increment_counter(innovation.id)

    # innovation держит устаревшее likes=0
    innovation.apply_changes({"title": "Yangi"})
    updated = await repository.update(innovation)

    assert updated.title == "Yangi"
    assert updated.likes == 1


@pytest.mark.asyncio
async def test_comment_delete_removes_replies(session, make_user):
    author = await make_user()
    repository = CommentRepositoryImpl(session)

    post = await repository.save(Comment.create("Post", author.id, CommentTarget()))
    await repository.save(Comment.create("Javob", author.id, CommentTarget(parent_id=post.id)))
    other = await repository.save(Comment.create("Boshqa", author.id, CommentTarget()))

    assert await repository.delete(post.id) is True
    remaining = await repository.find_all()
    assert [c.id for c in remaining] == [other.id]


@pytest.mark.asyncio
async def test_deleting_content_cascades_to_comments(session, make_user):
    author = await make_user()
    articles = ContentRepositoryImpl(session, ContentKind.ARTICLE)
    comments = CommentRepositoryImpl(session)
    article = await articles.save(new_article(author.id))
    await comments.save(Comment.create("Fikr", author.id, CommentTarget(article_id=article.id)))

    assert await articles.delete(article.id) is True
    assert await comments.find_all() == []


@pytest.mark.asyncio
async def test_user_email_is_unique(session, make_user):
    user = await make_user(email="bir@gmail.com")
    repository = UserRepositoryImpl(session)

    assert (await repository.find_by_email("BIR@gmail.com")).id == user.id
    with pytest.raises(DuplicateEntityError):
        await make_user(email="bir@gmail.com")
