from sqlalchemy import Column, Integer, Text
from models.base import Base, TimestampMixin

ABOUT_ID = 1


class About(Base, TimestampMixin):
    __tablename__ = "about"

    id = Column(Integer, primary_key=True, default=ABOUT_ID)
    content = Column(Text, nullable=False, default="")
