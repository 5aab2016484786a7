"""
Хранение загруженных файлов на локальном диске.
"""

import logging
import os
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import aiofiles

from src.infrastructure.config.settings import Settings, get_settings
from src.shared.exceptions.infrastructure_exceptions import FileStorageError

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"


@dataclass(frozen=True)
class SavedUpload:
    name: str
    path: str
    size: int


class LocalFileStorage:
    """Пишет файлы в settings.upload_dir под уникальными именами."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.root = Path(self.settings.upload_dir)

    @staticmethod
    def unique_name(original_name: str) -> str:
        """<epoch_ms>-<random><ext>"""
        ext = os.path.splitext(original_name or "")[1].lower()
        return f"{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}{ext}"

    async def save(self, original_name: str, data: bytes) -> SavedUpload:
        name = self.unique_name(original_name)
        target = self.root / name
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(target, "wb") as f:
                await f.write(data)
        except OSError as e:
            logger.error(f"Failed to store upload {original_name}: {e}")
            raise FileStorageError(str(e)) from e
        return SavedUpload(name=name, path=f"{PUBLIC_PREFIX}/{name}", size=len(data))

    async def remove(self, name: str) -> None:
        """Удалить файл с диска; отсутствие файла не ошибка."""
        try:
            (self.root / name).unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove upload {name}: {e}")
