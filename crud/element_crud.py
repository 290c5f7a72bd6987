import logging
from sqlalchemy.orm import Session
from core.errors import ContentValidationError, NotFoundError
from models.section import ELEMENT_TYPES, Section, SectionElement
from schemas.section_schema import ElementCreate, ElementOrder, ElementUpdate
from services.embed import normalize_embed_url, player_type
from services.ordering import ReorderOutcome, apply_reorder, next_order_index

logger = logging.getLogger(__name__)


def _check_type(element_type: str) -> str:
    if element_type not in ELEMENT_TYPES:
        raise ContentValidationError(
            f"Invalid element type: {element_type}. Must be one of: {', '.join(ELEMENT_TYPES)}"
        )
    return element_type


def _check_column(section: Section, column_index: int) -> int:
    if column_index < 0 or column_index >= section.columns:
        raise ContentValidationError(
            f"Invalid column index: {column_index}. Section {section.id} has {section.columns} column(s)."
        )
    return column_index


def _resolve_embed(element_type: str, embed_url: str | None) -> tuple[str | None, str | None]:
    """Returns ``(embed_url, embed_type)`` to store."""
    if element_type != "embed" or not embed_url:
        return embed_url, None
    known = player_type(embed_url)
    if known:
        return embed_url, known
    result = normalize_embed_url(embed_url)
    if not result.is_valid:
        raise ContentValidationError(result.error)
    return result.embed_url, result.type


def _next_in_column(db: Session, section_id: int, column_index: int, exclude_id: int | None = None) -> int:
    criteria = [SectionElement.section_id == section_id, SectionElement.column_index == column_index]
    if exclude_id is not None:
        criteria.append(SectionElement.id != exclude_id)
    return next_order_index(db, SectionElement.order_index, *criteria)


def get_element(db: Session, element_id: int):
    return db.query(SectionElement).filter(SectionElement.id == element_id).first()


def create_element(db: Session, section: Section, payload: ElementCreate):
    element_type = _check_type(payload.type)
    column_index = _check_column(section, payload.column_index)
    embed_url, embed_type = _resolve_embed(element_type, payload.embed_url)

    el = SectionElement(
        section_id=section.id,
        type=element_type,
        column_index=column_index,
        order_index=_next_in_column(db, section.id, column_index),
        content=payload.content or "",
        media_url=payload.media_url or None,
        embed_url=embed_url or None,
        embed_type=embed_type,
        alt_text=payload.alt_text or "",
        caption=payload.caption or "",
    )
    db.add(el)
    db.commit()
    db.refresh(el)
    logger.info("Created %s element %s in section %s column %s at %s",
                el.type, el.id, el.section_id, el.column_index, el.order_index)
    return el


def update_element(db: Session, element_id: int, payload: ElementUpdate):
    el = get_element(db, element_id)
    if not el:
        return None
    if payload.type is not None:
        el.type = _check_type(payload.type)
    if payload.column_index is not None and payload.column_index != el.column_index:
        el.column_index = _check_column(el.section, payload.column_index)
        if payload.order_index is None:
            el.order_index = _next_in_column(db, el.section_id, el.column_index, exclude_id=el.id)
    if payload.order_index is not None:
        el.order_index = payload.order_index
    if payload.content is not None:
        el.content = payload.content
    if payload.media_url is not None:
        el.media_url = payload.media_url or None
    if payload.alt_text is not None:
        el.alt_text = payload.alt_text
    if payload.caption is not None:
        el.caption = payload.caption
    if payload.embed_url is not None:
        el.embed_url = payload.embed_url or None
    # A type switch to embed must validate whatever URL is already stored
    embed_url, el.embed_type = _resolve_embed(el.type, el.embed_url)
    el.embed_url = embed_url or None
    db.commit()
    db.refresh(el)
    logger.info("Updated element %s", el.id)
    return el


def delete_element(db: Session, element_id: int) -> bool:
    el = get_element(db, element_id)
    if not el:
        return False
    db.delete(el)
    db.commit()
    logger.info("Deleted element %s", element_id)
    return True


def reorder_elements(db: Session, section: Section, orders: list[ElementOrder]) -> ReorderOutcome:
    def _apply(db: Session, order: ElementOrder) -> None:
        el = get_element(db, order.id)
        if not el or el.section_id != section.id:
            raise NotFoundError(f"Element {order.id} not found in section {section.id}")
        el.column_index = _check_column(section, order.column_index)
        el.order_index = order.order_index

    outcome = apply_reorder(db, orders, _apply)
    logger.info("Reordered elements of section %s: %d updated, %d failed",
                section.id, len(outcome.updated), len(outcome.failed))
    return outcome
