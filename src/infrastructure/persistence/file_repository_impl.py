"""
SQLAlchemy Repository реализация для метаданных файлов.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.stored_file import StoredFile
from src.domain.repositories.file_repository import IFileRepository
from src.infrastructure.persistence.db_errors import translate_db_errors
from src.infrastructure.persistence.models import FileModel

_LABEL = "File"
_FIELDS = (
    "id", "name", "original_name", "description", "path", "mime_type", "size",
    "uploaded_by", "article_id", "news_id", "innovation_id", "created_at",
)


class FileRepositoryImpl(IFileRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, stored_file: StoredFile) -> StoredFile:
        model = FileModel(**{name: getattr(stored_file, name) for name in _FIELDS})
        async with translate_db_errors(self.session, _LABEL):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def find_all(self) -> List[StoredFile]:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                select(FileModel).order_by(FileModel.created_at.desc())
            )
            models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_by_id(self, file_id: str) -> Optional[StoredFile]:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(FileModel, file_id)
        return self._to_entity(model) if model else None

    async def delete(self, file_id: str) -> bool:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(FileModel, file_id)
            if not model:
                return False
            await self.session.delete(model)
            await self.session.commit()
            return True

    def _to_entity(self, model: FileModel) -> StoredFile:
        return StoredFile(**{name: getattr(model, name) for name in _FIELDS})
