"""
Интеграционные тесты управления пользователями и загрузки файлов.
"""

import os

import pytest

from src.domain.value_objects.comment_target import CommentTarget
from src.domain.value_objects.user_role import UserRole
from src.infrastructure.config.settings import Settings
from src.shared.exceptions.domain_exceptions import (
    BusinessRuleViolation,
    DomainValidationError,
    DuplicateEntityError,
    ForbiddenError,
)
from tests.helpers import build_services, principal_for


@pytest.mark.asyncio
async def test_create_assistant(services, make_user):
    admin = await make_user(role=UserRole.SUPER_ADMIN)

    assistant = await services.users.create_assistant(
        principal_for(admin), "Yordamchi", "help@gmail.com", "parol", services=["SEO", "Dizayn"],
    )

    assert assistant.role == UserRole.ASSISTANT
    assert assistant.email_verified is True
    assert assistant.metadata == {"services": ["SEO", "Dizayn"], "notes": ""}

    with pytest.raises(DuplicateEntityError):
        await services.users.create_assistant(principal_for(admin), "Boshqa", "help@gmail.com", "parol")


@pytest.mark.asyncio
async def test_user_management_is_super_admin_only(services, make_user):
    editor = await make_user()
    admin = await make_user(role=UserRole.SUPER_ADMIN)

    with pytest.raises(ForbiddenError):
        await services.users.list_users(principal_for(editor))
    with pytest.raises(ForbiddenError):
        await services.users.create_assistant(principal_for(editor), "X", "x@gmail.com", "p")

    assert len(await services.users.list_users(principal_for(admin))) == 2
    assert await services.users.delete_user(editor.id, principal_for(admin)) is True
    assert await services.users.delete_user(editor.id, principal_for(admin)) is False


@pytest.mark.asyncio
async def test_upload_stores_file_and_metadata(services, make_user, test_settings):
    user = await make_user(role=UserRole.CLIENT)

    stored = await services.files.upload(
        b"hello", "hujjat.pdf", "application/pdf", principal_for(user), description="Taqdimot",
    )

    assert stored.path == f"/uploads/{stored.name}"
    assert stored.size == 5
    assert stored.uploaded_by == user.id
    assert os.path.exists(os.path.join(test_settings.upload_dir, stored.name))
    assert [f.id for f in await services.files.list_files()] == [stored.id]


@pytest.mark.asyncio
async def test_upload_rejects_missing_and_oversized(session, make_user, tmp_path):
    user = await make_user()
    small = Settings(smtp_host="", upload_dir=str(tmp_path / "small"), max_upload_bytes=4)
    files = build_services(session, small).files

    with pytest.raises(DomainValidationError):
        await files.upload(b"", "empty.txt", "text/plain", principal_for(user))
    with pytest.raises(DomainValidationError):
        await files.upload(b"12345", "big.txt", "text/plain", principal_for(user))
    with pytest.raises(BusinessRuleViolation):
        await files.upload(
            b"1", "x.txt", "text/plain", principal_for(user),
            target=CommentTarget(article_id="missing"),
        )

    assert await files.list_files() == []


@pytest.mark.asyncio
async def test_avatar_requires_image(services):
    with pytest.raises(DomainValidationError):
        await services.files.upload_avatar(b"text", "notes.txt", "text/plain")

    path = await services.files.upload_avatar(b"\x89PNG", "me.png", "image/png")
    assert path.startswith("/uploads/")
    assert path.endswith(".png")


@pytest.mark.asyncio
async def test_delete_file_by_owner_or_staff(services, make_user, test_settings):
    owner = await make_user(role=UserRole.CLIENT)
    stranger = await make_user(role=UserRole.INVESTOR)
    stored = await services.files.upload(b"data", "a.txt", "text/plain", principal_for(owner))

    with pytest.raises(ForbiddenError):
        await services.files.delete_file(stored.id, principal_for(stranger))

    await services.files.delete_file(stored.id, principal_for(owner))

    assert await services.files.list_files() == []
    assert not os.path.exists(os.path.join(test_settings.upload_dir, stored.name))
