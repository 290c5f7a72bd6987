import re

from sqlalchemy.orm import Session

from models.project import Project

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """``"My Project!! 2024"`` -> ``"my-project-2024"``."""
    slug = _NON_ALNUM.sub("-", (title or "").lower())
    return slug.strip("-")


def unique_slug(db: Session, title: str, exclude_id: int | None = None) -> str:
    base = slugify(title) or "project"
    candidate = base
    n = 2
    while True:
        q = db.query(Project.id).filter(Project.slug == candidate)
        if exclude_id is not None:
            q = q.filter(Project.id != exclude_id)
        if q.first() is None:
            return candidate
        candidate = f"{base}-{n}"
        n += 1
