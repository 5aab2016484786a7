"""
FastAPI Routes для загрузки файлов.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from src.api.dependencies import get_current_principal, get_file_service
from src.api.schemas.common_schemas import AvatarResponse, FileResponse, SuccessResponse
from src.application.services.file_service import FileService
from src.domain.value_objects.comment_target import CommentTarget
from src.domain.value_objects.principal import Principal

router = APIRouter(tags=["files"])


UPLOAD_CHUNK_SIZE = 64 * 1024


async def _read_upload(upload: Optional[UploadFile], limit: int) -> Optional[bytes]:
    """
    Прочитать загрузку кусками.

    Чтение останавливается на limit + 1 байтах: этого достаточно, чтобы
    FileService отклонил слишком большой файл.
    """
    if upload is None:
        return None
    chunks = []
    received = 0
    try:
        while received <= limit:
            chunk = await upload.read(min(UPLOAD_CHUNK_SIZE, limit + 1 - received))
            if not chunk:
                break
            chunks.append(chunk)
            received += len(chunk)
    finally:
        await upload.close()
    return b"".join(chunks)


@router.post("/upload", response_model=FileResponse, status_code=201)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    description: Optional[str] = Form(None),
    article_id: Optional[str] = Form(None),
    news_id: Optional[str] = Form(None),
    innovation_id: Optional[str] = Form(None),
    principal: Principal = Depends(get_current_principal),
    service: FileService = Depends(get_file_service)
):
    """Загрузить файл (до 10 MB), опционально привязав к контенту."""
    target = CommentTarget(article_id=article_id, news_id=news_id, innovation_id=innovation_id)
    data = await _read_upload(file, service.settings.max_upload_bytes)
    stored = await service.upload(
        data,
        original_name=file.filename if file else "",
        mime_type=file.content_type if file else None,
        actor=principal,
        description=description,
        target=target,
    )
    return FileResponse.from_entity(stored)


@router.post("/upload/avatar", response_model=AvatarResponse, status_code=201)
async def upload_avatar(
    avatar: Optional[UploadFile] = File(None),
    principal: Principal = Depends(get_current_principal),
    service: FileService = Depends(get_file_service)
):
    """Загрузить аватар (только изображения)."""
    data = await _read_upload(avatar, service.settings.max_upload_bytes)
    path = await service.upload_avatar(
        data,
        original_name=avatar.filename if avatar else "",
        mime_type=avatar.content_type if avatar else None,
    )
    return AvatarResponse(avatar=path)


@router.get("/files", response_model=List[FileResponse])
async def list_files(
    service: FileService = Depends(get_file_service)
):
    files = await service.list_files()
    return [FileResponse.from_entity(f) for f in files]


@router.delete("/files/{file_id}", response_model=SuccessResponse)
async def delete_file(
    file_id: str,
    principal: Principal = Depends(get_current_principal),
    service: FileService = Depends(get_file_service)
):
    await service.delete_file(file_id, principal)
    return SuccessResponse()
