"""
Сквозной сценарий публикации через HTTP API.
"""

import pytest

from src.domain.value_objects.user_role import UserRole
from tests.helpers import auth_headers


@pytest.mark.asyncio
async def test_editor_draft_then_admin_publishes(client, make_user):
    """
    Тест: редактор создаёт статью с published=true, получает черновик;
    редактор не может опубликовать, администратор может.
    """
    editor = await make_user(role=UserRole.EDITOR_ADMIN)
    admin = await make_user(role=UserRole.SUPER_ADMIN)

    response = await client.post(
        "/api/articles",
        json={"title": "Yangi maqola", "slug": "yangi-maqola", "excerpt": "Qisqa", "content": "Matn",
              "published": True},
        headers=auth_headers(editor),
    )
    assert response.status_code == 201
    article = response.json()
    assert article["published"] is False
    assert article["author_id"] == editor.id
    assert article["read_time"] == "5 daqiqa"

    drafts = (await client.get("/api/articles", params={"published": "false"})).json()
    assert [a["id"] for a in drafts] == [article["id"]]

    denied = await client.patch(
        f"/api/articles/{article['id']}", json={"published": True}, headers=auth_headers(editor),
    )
    assert denied.status_code == 403

    published = await client.patch(
        f"/api/articles/{article['id']}", json={"published": True}, headers=auth_headers(admin),
    )
    assert published.status_code == 200
    assert published.json()["published"] is True

    live = (await client.get("/api/articles", params={"published": "true"})).json()
    assert [a["id"] for a in live] == [article["id"]]
    assert (await client.get("/api/articles", params={"published": "false"})).json() == []


@pytest.mark.asyncio
async def test_read_by_slug_counts_views(client, make_user):
    admin = await make_user(role=UserRole.SUPER_ADMIN)
    await client.post(
        "/api/articles",
        json={"title": "Ko'rish", "slug": "korish", "excerpt": "e", "content": "c"},
        headers=auth_headers(admin),
    )

    first = await client.get("/api/articles/slug/korish")
    second = await client.get("/api/articles/slug/korish")

    assert first.status_code == 200
    assert first.json()["views"] == 0
    assert second.json()["views"] == 1
    assert (await client.get("/api/statistics")).json()["total_views"] == 2


@pytest.mark.asyncio
async def test_validation_and_auth_errors(client, make_user):
    editor = await make_user()
    reader = await make_user(role=UserRole.CLIENT)

    missing_fields = await client.post("/api/news", json={"title": "Faqat sarlavha"}, headers=auth_headers(editor))
    assert missing_fields.status_code == 400
    assert "error" in missing_fields.json()

    anonymous = await client.post("/api/news", json={"title": "T", "slug": "t"})
    assert anonymous.status_code == 401

    forbidden = await client.post("/api/news", json={"title": "T", "slug": "t"}, headers=auth_headers(reader))
    assert forbidden.status_code == 403

    bad_token = await client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert bad_token.status_code == 401


@pytest.mark.asyncio
async def test_duplicate_slug_and_missing_records(client, make_user):
    admin = await make_user(role=UserRole.SUPER_ADMIN)
    payload = {"title": "Yangilik", "slug": "yangilik"}

    assert (await client.post("/api/news", json=payload, headers=auth_headers(admin))).status_code == 201
    assert (await client.post("/api/news", json=payload, headers=auth_headers(admin))).status_code == 400

    assert (await client.get("/api/news/slug/yoq")).status_code == 404
    assert (await client.delete("/api/news/missing", headers=auth_headers(admin))).status_code == 404


@pytest.mark.asyncio
async def test_innovation_like(client, make_user):
    editor = await make_user()
    created = await client.post(
        "/api/innovations",
        json={"title": "G'oya", "slug": "goya", "description": "Tavsif"},
        headers=auth_headers(editor),
    )
    innovation_id = created.json()["id"]

    liked = await client.post(f"/api/innovations/{innovation_id}/like")

    assert liked.status_code == 200
    assert liked.json()["likes"] == 1
    assert (await client.post("/api/innovations/missing/like")).status_code == 404


@pytest.mark.asyncio
async def test_pending_queue_and_delete(client, make_user):
    editor = await make_user()
    admin = await make_user(role=UserRole.SUPER_ADMIN)
    created = await client.post(
        "/api/news", json={"title": "Qoralama", "slug": "qoralama"}, headers=auth_headers(editor),
    )
    news_id = created.json()["id"]

    assert (await client.get("/api/news/pending", headers=auth_headers(editor))).status_code == 403
    pending = (await client.get("/api/news/pending", headers=auth_headers(admin))).json()
    assert [n["id"] for n in pending] == [news_id]

    deleted = await client.delete(f"/api/news/{news_id}", headers=auth_headers(editor))
    assert deleted.json() == {"success": True, "message": None}
    assert (await client.get(f"/api/news/{news_id}")).status_code == 404
