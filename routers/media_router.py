from typing import Literal, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session

from core.auth import require_admin
from core.config import settings
from core.database import get_db
from crud.media_crud import MEDIA_FOLDER, create_media, delete_media, get_media, list_media, media_from_stored
from schemas.common_schema import ApiResponse
from schemas.media_schema import MediaResponse
from services.storage import R2Storage, get_storage, read_upload


router = APIRouter(prefix="/api/media", tags=["Media"])


@router.post("/upload", response_model=ApiResponse[MediaResponse], status_code=201, dependencies=[Depends(require_admin)])
def upload_media(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: R2Storage = Depends(get_storage),
):
    data = read_upload(file, settings.MAX_UPLOAD_BYTES)
    stored = storage.upload(data, file.filename, file.content_type, folder=MEDIA_FOLDER)
    # Object is already in the bucket; a failed insert leaves it unreferenced
    media = create_media(db, media_from_stored(stored))
    return ApiResponse(data=MediaResponse.model_validate(media))


@router.get("", response_model=ApiResponse[list[MediaResponse]])
def list_all(
    file_type: Optional[Literal["image", "video"]] = Query(None, alias="type"),
    db: Session = Depends(get_db),
):
    return ApiResponse(data=[MediaResponse.model_validate(m) for m in list_media(db, file_type=file_type)])


@router.get("/{media_id}", response_model=ApiResponse[MediaResponse])
def read_one(media_id: int, db: Session = Depends(get_db)):
    media = get_media(db, media_id)
    if not media:
        raise HTTPException(status_code=404, detail="Media not found")
    return ApiResponse(data=MediaResponse.model_validate(media))


@router.delete("/{media_id}", response_model=ApiResponse[None], dependencies=[Depends(require_admin)])
def delete(media_id: int, db: Session = Depends(get_db), storage: R2Storage = Depends(get_storage)):
    media = get_media(db, media_id)
    if not media:
        raise HTTPException(status_code=404, detail="Media not found")

    # Storage first: if the bucket refuses, the row stays so the delete can be retried
    if media.storage_key:
        storage.delete(media.storage_key)

    delete_media(db, media.id)
    return ApiResponse(message="Media deleted successfully")
