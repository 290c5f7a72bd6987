from sqlalchemy import Boolean, Column, Index, Integer, String, Text
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin

CATEGORIES = ("works", "parallel discourses")


class Project(Base, TimestampMixin):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    subtitle = Column(Text, nullable=True)
    year = Column(Integer, nullable=True)
    category = Column(String(64), nullable=False, default="works")
    slug = Column(String(255), unique=True, nullable=False, index=True)
    main_image_url = Column(String(1024), nullable=True)
    main_image_key = Column(String(512), nullable=True)
    coming_soon = Column(Boolean, default=False, nullable=False)
    # Scoped per category
    order_index = Column(Integer, default=0, nullable=False)

    sections = relationship(
        "Section",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="[Section.order_index, Section.id]",
    )

Index("idx_projects_category_order", Project.category, Project.order_index)
