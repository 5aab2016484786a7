# -*- coding: utf-8 -*-
"""
Политика публикации и модерации.

Двухуровневая модель доверия:
- super_admin публикует сразу и модерирует очереди
- остальные сотрудники (editor_admin, assistant) создают только черновики

Все мутации в application-слое проходят через эти функции.
"""

from typing import Optional

from src.domain.value_objects.user_role import UserRole
from src.shared.exceptions.domain_exceptions import ForbiddenError


def can_publish_directly(role: UserRole) -> bool:
    """Может ли роль публиковать контент без модерации."""
    return UserRole.parse(role) == UserRole.SUPER_ADMIN


def can_moderate(role: UserRole) -> bool:
    """Может ли роль видеть очереди модерации и одобрять комментарии."""
    return UserRole.parse(role) == UserRole.SUPER_ADMIN


def can_create_content(role: UserRole) -> bool:
    """Может ли роль создавать статьи/новости/инновации."""
    return UserRole.parse(role).is_staff


def can_manage_users(role: UserRole) -> bool:
    return UserRole.parse(role) == UserRole.SUPER_ADMIN


def resolve_initial_published(role: UserRole, requested: Optional[bool]) -> bool:
    """
    Начальное значение published для нового контента.

    Для super_admin: как запрошено (по умолчанию False).
    Для остальных: всегда False, что бы ни прислал клиент.
    """
    if can_publish_directly(role):
        return bool(requested)
    return False


def resolve_author(role: UserRole, actor_id: str, requested: Optional[str]) -> str:
    """
    Автор нового контента.

    Чужого автора может указать только super_admin; остальные всегда
    публикуют от своего имени.
    """
    if requested and can_publish_directly(role):
        return requested
    return actor_id


def ensure_can_publish(role: UserRole) -> None:
    if not can_publish_directly(role):
        raise ForbiddenError("Only super administrator can publish content")


def ensure_can_moderate(role: UserRole) -> None:
    if not can_moderate(role):
        raise ForbiddenError("Only super administrator can moderate")


def ensure_can_create_content(role: UserRole) -> None:
    if not can_create_content(role):
        raise ForbiddenError("Role is not allowed to create content")


def ensure_can_manage_users(role: UserRole) -> None:
    if not can_manage_users(role):
        raise ForbiddenError("Only super administrator can manage users")
