from sqlalchemy import BigInteger, Column, Index, Integer, String
from models.base import Base, TimestampMixin


class Media(Base, TimestampMixin):
    __tablename__ = "media"

    id = Column(Integer, primary_key=True, index=True)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    file_type = Column(String(16), nullable=False)
    file_size = Column(BigInteger, nullable=False)
    mimetype = Column(String(128), nullable=False)
    url = Column(String(1024), nullable=False)
    storage_key = Column(String(512), nullable=False, unique=True)
    alt_text = Column(String(512), nullable=True)
    folder = Column(String(64), nullable=False, default="media")

Index("idx_media_file_type_created_at", Media.file_type, Media.created_at.desc())
