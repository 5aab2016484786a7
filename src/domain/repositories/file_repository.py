"""
Repository Interface: IFileRepository
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.stored_file import StoredFile


class IFileRepository(ABC):
    """Порт хранилища метаданных файлов."""

    @abstractmethod
    async def save(self, stored_file: StoredFile) -> StoredFile:
        pass

    @abstractmethod
    async def find_all(self) -> List[StoredFile]:
        pass

    @abstractmethod
    async def find_by_id(self, file_id: str) -> Optional[StoredFile]:
        pass

    @abstractmethod
    async def delete(self, file_id: str) -> bool:
        pass
