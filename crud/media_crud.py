import logging
from sqlalchemy.orm import Session
from sqlalchemy import desc
from models.media import Media
from schemas.media_schema import MediaCreate
from services.storage import StoredObject

logger = logging.getLogger(__name__)

MEDIA_FOLDER = "media"


def classify(mimetype: str | None) -> str:
    return "image" if (mimetype or "").startswith("image/") else "video"


def get_media(db: Session, media_id: int):
    return db.query(Media).filter(Media.id == media_id).first()


def list_media(db: Session, file_type: str | None = None):
    q = db.query(Media)
    if file_type:
        q = q.filter(Media.file_type == file_type)
    return q.order_by(desc(Media.created_at), desc(Media.id)).all()


def create_media(db: Session, payload: MediaCreate):
    m = Media(**payload.model_dump())
    db.add(m)
    db.commit()
    db.refresh(m)
    logger.info("Recorded media %s (%s)", m.id, m.storage_key)
    return m


def media_from_stored(stored: StoredObject) -> MediaCreate:
    return MediaCreate(
        filename=stored.key.split("/")[-1],
        original_name=stored.original_name,
        file_type=classify(stored.mimetype),
        file_size=stored.size,
        mimetype=stored.mimetype,
        url=stored.url,
        storage_key=stored.key,
        folder=MEDIA_FOLDER,
    )


def delete_media(db: Session, media_id: int) -> bool:
    m = get_media(db, media_id)
    if not m:
        return False
    db.delete(m)
    db.commit()
    logger.info("Deleted media %s", media_id)
    return True
