from datetime import datetime
from pydantic import BaseModel


class MediaCreate(BaseModel):
    filename: str
    original_name: str
    file_type: str
    file_size: int
    mimetype: str
    url: str
    storage_key: str
    folder: str = "media"
    alt_text: str | None = None


class MediaResponse(MediaCreate):
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}
