import logging
from sqlalchemy.orm import Session
from sqlalchemy import desc
from core.errors import ContentValidationError, NotFoundError
from models.project import CATEGORIES, Project
from schemas.project_schema import ProjectCreate, ProjectOrder, ProjectUpdate
from services.ordering import ReorderOutcome, apply_reorder, next_order_index
from services.slug import unique_slug
from services.storage import StoredObject

logger = logging.getLogger(__name__)


def _check_category(category: str) -> str:
    if category not in CATEGORIES:
        raise ContentValidationError(
            f"Invalid category: {category}. Must be one of: {', '.join(CATEGORIES)}"
        )
    return category


def get_project(db: Session, project_id: int):
    return db.query(Project).filter(Project.id == project_id).first()


def get_project_by_slug(db: Session, slug: str):
    return db.query(Project).filter(Project.slug == slug).first()


def list_projects(db: Session, category: str | None = None):
    q = db.query(Project)
    if category:
        q = q.filter(Project.category == category)
    return q.order_by(Project.order_index.asc(), desc(Project.created_at)).all()


def create_project(db: Session, payload: ProjectCreate, image: StoredObject | None = None):
    if not payload.title or not payload.title.strip():
        raise ContentValidationError("Title is required")
    category = _check_category(payload.category)
    proj = Project(
        title=payload.title,
        subtitle=payload.subtitle,
        year=payload.year,
        category=category,
        coming_soon=payload.coming_soon,
        slug=unique_slug(db, payload.title),
        order_index=next_order_index(db, Project.order_index, Project.category == category),
    )
    if image is not None:
        proj.main_image_url = image.url
        proj.main_image_key = image.key
    db.add(proj)
    db.commit()
    db.refresh(proj)
    logger.info("Created project %s (%s)", proj.id, proj.slug)
    return proj


def update_project(db: Session, project_id: int, payload: ProjectUpdate, image: StoredObject | None = None):
    proj = get_project(db, project_id)
    if not proj:
        return None
    if payload.title is not None:
        if not payload.title.strip():
            raise ContentValidationError("Title is required")
        proj.title = payload.title
    if payload.subtitle is not None:
        proj.subtitle = payload.subtitle
    if payload.year is not None:
        proj.year = payload.year
    if payload.coming_soon is not None:
        proj.coming_soon = payload.coming_soon
    if payload.category is not None and payload.category != proj.category:
        proj.category = _check_category(payload.category)
        # Joins the end of the new category unless told otherwise
        if payload.order_index is None:
            proj.order_index = next_order_index(
                db, Project.order_index, Project.category == proj.category, Project.id != proj.id
            )
    if payload.order_index is not None:
        proj.order_index = payload.order_index
    if image is not None:
        proj.main_image_url = image.url
        proj.main_image_key = image.key
    elif payload.remove_main_image:
        proj.main_image_url = None
        proj.main_image_key = None
    db.commit()
    db.refresh(proj)
    logger.info("Updated project %s", proj.id)
    return proj


def delete_project(db: Session, project_id: int) -> bool:
    proj = get_project(db, project_id)
    if not proj:
        return False
    # Sections and their elements go with it (relationship cascade)
    db.delete(proj)
    db.commit()
    logger.info("Deleted project %s", project_id)
    return True


def _apply_project_order(db: Session, order: ProjectOrder) -> None:
    proj = get_project(db, order.id)
    if not proj:
        raise NotFoundError(f"Project {order.id} not found")
    if order.category is not None and order.category != proj.category:
        raise ContentValidationError(
            f"Project {order.id} is in category '{proj.category}', not '{order.category}'"
        )
    proj.order_index = order.order_index


def reorder_projects(db: Session, orders: list[ProjectOrder]) -> ReorderOutcome:
    outcome = apply_reorder(db, orders, _apply_project_order)
    logger.info("Reordered projects: %d updated, %d failed", len(outcome.updated), len(outcome.failed))
    return outcome
