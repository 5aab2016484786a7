"""
HTTP API комментариев и общего обсуждения.
"""

import pytest

from src.domain.value_objects.user_role import UserRole
from tests.helpers import auth_headers


async def create_article(client, author):
    response = await client.post(
        "/api/articles",
        json={"title": "Maqola", "slug": "maqola", "excerpt": "e", "content": "c"},
        headers=auth_headers(author),
    )
    return response.json()["id"]


@pytest.mark.asyncio
async def test_comment_with_two_targets_is_rejected(client, make_user):
    editor = await make_user()
    admin = await make_user(role=UserRole.SUPER_ADMIN)
    article_id = await create_article(client, editor)

    response = await client.post(
        "/api/comments",
        json={"content": "Ikki joyga", "article_id": article_id, "news_id": "n1"},
        headers=auth_headers(editor),
    )

    assert response.status_code == 400
    assert (await client.get("/api/comments", headers=auth_headers(admin))).json() == []


@pytest.mark.asyncio
async def test_article_comment_moderation(client, make_user):
    editor = await make_user()
    admin = await make_user(role=UserRole.SUPER_ADMIN)
    reader = await make_user(role=UserRole.INVESTOR)
    article_id = await create_article(client, editor)

    posted = await client.post(
        "/api/comments", json={"content": "Ajoyib", "article_id": article_id}, headers=auth_headers(reader),
    )
    assert posted.status_code == 201
    comment = posted.json()
    assert comment["approved"] is False
    assert comment["author_id"] == reader.id

    assert (await client.get(f"/api/comments/article/{article_id}")).json() == []
    assert (await client.get("/api/comments", params={"approved": "false"})).status_code == 401

    queue = await client.get("/api/comments", params={"approved": "false"}, headers=auth_headers(admin))
    assert [c["id"] for c in queue.json()] == [comment["id"]]

    denied = await client.patch(f"/api/comments/{comment['id']}/approve", headers=auth_headers(editor))
    assert denied.status_code == 403

    approved = await client.patch(f"/api/comments/{comment['id']}/approve", headers=auth_headers(admin))
    assert approved.json()["approved"] is True

    thread = (await client.get(f"/api/comments/article/{article_id}")).json()
    assert [c["id"] for c in thread] == [comment["id"]]


@pytest.mark.asyncio
async def test_general_discussion_and_likes(client, make_user):
    user = await make_user(role=UserRole.CLIENT)

    post = (await client.post("/api/comments", json={"content": "Salom"}, headers=auth_headers(user))).json()
    reply = (await client.post(
        "/api/comments", json={"content": "Va alaykum", "parent_id": post["id"]}, headers=auth_headers(user),
    )).json()
    nested = await client.post(
        "/api/comments", json={"content": "Chuqur", "parent_id": reply["id"]}, headers=auth_headers(user),
    )
    assert nested.status_code == 400

    for _ in range(3):
        assert (await client.post(f"/api/comments/{post['id']}/like")).status_code == 200

    board = (await client.get("/api/comments/discussion")).json()
    assert len(board) == 1
    assert board[0]["likes"] == 3
    assert board[0]["approved"] is True
    assert [r["id"] for r in board[0]["replies"]] == [reply["id"]]

    replies = (await client.get(f"/api/comments/{post['id']}/replies")).json()
    assert [r["id"] for r in replies] == [reply["id"]]
    assert (await client.post("/api/comments/missing/like")).status_code == 404


@pytest.mark.asyncio
async def test_comment_requires_login(client):
    response = await client.post("/api/comments", json={"content": "Anonim"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_replies_endpoint_hides_unapproved(client, make_user):
    """Тест: аноним не видит неодобренные ответы в ветке статьи."""
    editor = await make_user()
    admin = await make_user(role=UserRole.SUPER_ADMIN)
    article_id = await create_article(client, editor)
    parent = (await client.post(
        "/api/comments", json={"content": "Fikr", "article_id": article_id}, headers=auth_headers(editor),
    )).json()

    reply = await client.post(
        "/api/comments",
        json={"content": "spam", "article_id": article_id, "parent_id": parent["id"]},
        headers=auth_headers(editor),
    )
    assert reply.json()["approved"] is False

    bare = await client.post(
        "/api/comments", json={"content": "spam", "parent_id": parent["id"]}, headers=auth_headers(editor),
    )
    assert bare.status_code == 400

    anonymous = await client.get(f"/api/comments/{parent['id']}/replies")
    assert anonymous.status_code == 200
    assert anonymous.json() == []

    assert (await client.get(f"/api/comments/{parent['id']}/replies", params={"approved": "false"})).status_code == 401

    queue = await client.get(
        f"/api/comments/{parent['id']}/replies", params={"approved": "false"}, headers=auth_headers(admin),
    )
    assert [r["id"] for r in queue.json()] == [reply.json()["id"]]
