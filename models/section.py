from sqlalchemy import Column, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship
from models.base import Base, TimestampMixin

ELEMENT_TYPES = ("text", "image", "video", "quote", "embed")
MIN_COLUMNS = 1
MAX_COLUMNS = 4


class Section(Base, TimestampMixin):
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(255), nullable=False, default="New Section")
    columns = Column(Integer, nullable=False, default=1)
    order_index = Column(Integer, nullable=False, default=0)

    project = relationship("Project", back_populates="sections")
    elements = relationship(
        "SectionElement",
        back_populates="section",
        cascade="all, delete-orphan",
        order_by="[SectionElement.order_index, SectionElement.id]",
    )


class SectionElement(Base, TimestampMixin):
    __tablename__ = "section_elements"

    id = Column(Integer, primary_key=True, index=True)
    section_id = Column(Integer, ForeignKey("sections.id", ondelete="CASCADE"), nullable=False)
    type = Column(String(16), nullable=False)
    # 0-based, always < section.columns
    column_index = Column(Integer, nullable=False, default=0)
    order_index = Column(Integer, nullable=False, default=0)
    content = Column(Text, nullable=False, default="")
    media_url = Column(String(1024), nullable=True)
    embed_url = Column(String(1024), nullable=True)
    embed_type = Column(String(32), nullable=True)
    alt_text = Column(String(512), nullable=False, default="")
    caption = Column(Text, nullable=False, default="")

    section = relationship("Section", back_populates="elements")

Index("idx_sections_project_order", Section.project_id, Section.order_index)
Index("idx_elements_section_column_order", SectionElement.section_id, SectionElement.column_index, SectionElement.order_index)
