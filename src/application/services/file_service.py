"""
Application Service для загрузки файлов.
"""

import logging
from typing import List, Optional

from src.domain.entities.stored_file import StoredFile
from src.domain.repositories.file_repository import IFileRepository
from src.domain.value_objects.comment_target import CommentTarget
from src.domain.value_objects.principal import Principal
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.storage.local_file_storage import LocalFileStorage
from src.shared.exceptions.infrastructure_exceptions import InfrastructureException
from src.shared.exceptions.domain_exceptions import (
    DomainException,
    DomainValidationError,
    EntityNotFoundError,
    ForbiddenError,
)

logger = logging.getLogger(__name__)


class FileService:
    """
    Сохранение файла на диск и его метаданных в БД.

    Лимит размера: settings.max_upload_bytes (10 MiB).
    """

    def __init__(
        self,
        repository: IFileRepository,
        storage: LocalFileStorage,
        settings: Optional[Settings] = None
    ):
        self.repository = repository
        self.storage = storage
        self.settings = settings or get_settings()

    def _check_size(self, data: bytes) -> None:
        if len(data) > self.settings.max_upload_bytes:
            raise DomainValidationError("File is too large (max 10 MB)")

    async def upload(
        self,
        data: Optional[bytes],
        original_name: str,
        mime_type: Optional[str],
        actor: Principal,
        description: Optional[str] = None,
        target: Optional[CommentTarget] = None
    ) -> StoredFile:
        """
        Сохранить загруженный файл.

        Raises:
            DomainValidationError: Нет файла, превышен лимит или несколько привязок
        """
        if not data:
            raise DomainValidationError("No file uploaded")
        self._check_size(data)
        target = target or CommentTarget()

        saved = await self.storage.save(original_name, data)
        try:
            stored = await self.repository.save(StoredFile(
                name=saved.name,
                original_name=original_name or saved.name,
                description=description,
                path=saved.path,
                mime_type=mime_type or "application/octet-stream",
                size=saved.size,
                uploaded_by=actor.user_id,
                article_id=target.article_id,
                news_id=target.news_id,
                innovation_id=target.innovation_id,
            ))
        except (DomainException, InfrastructureException):
            await self.storage.remove(saved.name)
            raise

        logger.info(f"Stored upload {stored.name} ({stored.size} bytes) from {actor.user_id}")
        return stored

    async def upload_avatar(self, data: Optional[bytes], original_name: str, mime_type: Optional[str]) -> str:
        """Сохранить аватар; возвращает публичный путь."""
        if not data:
            raise DomainValidationError("Rasm yuklanmadi")
        if not (mime_type or "").startswith("image/"):
            raise DomainValidationError("Faqat rasm fayllari qabul qilinadi")
        self._check_size(data)

        saved = await self.storage.save(original_name, data)
        return saved.path

    async def list_files(self) -> List[StoredFile]:
        return await self.repository.find_all()

    async def delete_file(self, file_id: str, actor: Principal) -> None:
        """Удалить файл; разрешено загрузившему и сотрудникам редакции."""
        stored = await self.repository.find_by_id(file_id)
        if not stored:
            raise EntityNotFoundError("File not found")
        if stored.uploaded_by != actor.user_id and not actor.role.is_staff:
            raise ForbiddenError("Not allowed to delete this file")

        await self.repository.delete(file_id)
        await self.storage.remove(stored.name)
