"""Position bookkeeping for drag-and-drop ordered content.

Indices are 0-based: the first entity in a scope gets ``0`` and each new one
gets ``max + 1``. Reorders are applied one entry at a time and each entry is
committed on its own, so a failing entry never undoes the ones before it and
never stops the ones after it.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

E = TypeVar("E")


def next_order_index(db: Session, column, *criteria) -> int:
    current = db.query(func.max(column)).filter(*criteria).scalar()
    return 0 if current is None else current + 1


@dataclass
class ReorderOutcome:
    updated: list[int] = field(default_factory=list)
    failed: list[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def as_dict(self) -> dict:
        return {"updated": list(self.updated), "failed": list(self.failed)}


def apply_reorder(db: Session, entries: Iterable[E], apply_one: Callable[[Session, E], None]) -> ReorderOutcome:
    outcome = ReorderOutcome()
    for entry in entries:
        entry_id = getattr(entry, "id", None)
        try:
            apply_one(db, entry)
            db.commit()
        except Exception as exc:
            db.rollback()
            logger.warning("Reorder entry %s failed: %s", entry_id, exc)
            outcome.failed.append({"id": entry_id, "error": str(exc)})
        else:
            outcome.updated.append(entry_id)
    if outcome.failed:
        logger.warning("Reorder finished with %d failed of %d", len(outcome.failed), len(outcome.updated) + len(outcome.failed))
    return outcome
