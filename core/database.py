from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from core.config import settings
# Use the same Base as models to ensure one metadata registry
from models.base import Base

_uri = settings.SQLALCHEMY_DATABASE_URI
_connect_args = {"check_same_thread": False} if _uri.startswith("sqlite") else {}

engine = create_engine(
    _uri,
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=_connect_args,
    future=True
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
