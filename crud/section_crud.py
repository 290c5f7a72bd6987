import logging
from sqlalchemy.orm import Session
from core.errors import ContentValidationError, NotFoundError
from models.section import MAX_COLUMNS, MIN_COLUMNS, Section
from schemas.section_schema import SectionCreate, SectionOrder, SectionUpdate
from services.ordering import ReorderOutcome, apply_reorder, next_order_index

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "New Section"


def check_columns(columns) -> int:
    try:
        count = int(columns)
    except (TypeError, ValueError):
        count = None
    if count is None or not MIN_COLUMNS <= count <= MAX_COLUMNS:
        raise ContentValidationError(f"Invalid column count: {columns}. Must be 1, 2, 3, or 4.")
    return count


def get_section(db: Session, section_id: int):
    return db.query(Section).filter(Section.id == section_id).first()


def list_sections(db: Session, project_id: int):
    return (
        db.query(Section)
        .filter(Section.project_id == project_id)
        .order_by(Section.order_index.asc(), Section.id.asc())
        .all()
    )


def create_section(db: Session, payload: SectionCreate):
    columns = check_columns(payload.columns)
    s = Section(
        project_id=payload.project_id,
        title=payload.title or DEFAULT_TITLE,
        columns=columns,
        order_index=next_order_index(db, Section.order_index, Section.project_id == payload.project_id),
    )
    db.add(s)
    db.commit()
    db.refresh(s)
    logger.info("Created section %s in project %s at %s", s.id, s.project_id, s.order_index)
    return s


def update_section(db: Session, section_id: int, payload: SectionUpdate):
    s = get_section(db, section_id)
    if not s:
        return None
    if payload.columns is not None:
        columns = check_columns(payload.columns)
        widest = max((e.column_index for e in s.elements), default=-1)
        if widest >= columns:
            raise ContentValidationError(
                f"Cannot reduce to {columns} columns: an element sits in column {widest}"
            )
        s.columns = columns
    if payload.title is not None:
        s.title = payload.title
    if payload.order_index is not None:
        s.order_index = payload.order_index
    db.commit()
    db.refresh(s)
    logger.info("Updated section %s", s.id)
    return s


def delete_section(db: Session, section_id: int) -> bool:
    s = get_section(db, section_id)
    if not s:
        return False
    db.delete(s)
    db.commit()
    logger.info("Deleted section %s", section_id)
    return True


def reorder_sections(db: Session, project_id: int, orders: list[SectionOrder]) -> ReorderOutcome:
    def _apply(db: Session, order: SectionOrder) -> None:
        s = get_section(db, order.id)
        if not s or s.project_id != project_id:
            raise NotFoundError(f"Section {order.id} not found in project {project_id}")
        s.order_index = order.order_index

    outcome = apply_reorder(db, orders, _apply)
    logger.info("Reordered sections of project %s: %d updated, %d failed",
                project_id, len(outcome.updated), len(outcome.failed))
    return outcome


