from types import SimpleNamespace

import pytest

from models.project import Project
from models.section import Section, SectionElement
from services.ordering import apply_reorder, next_order_index


@pytest.fixture
def section(db):
    project = Project(title="P", slug="p", category="works")
    db.add(project)
    db.commit()
    s = Section(project_id=project.id, title="S", columns=2, order_index=0)
    db.add(s)
    db.commit()
    return s


def _next_element_index(db, section, column):
    return next_order_index(
        db,
        SectionElement.order_index,
        SectionElement.section_id == section.id,
        SectionElement.column_index == column,
    )


def test_empty_scope_starts_at_zero(db, section):
    assert _next_element_index(db, section, 0) == 0


def test_creation_order_yields_increasing_unique_indices(db, section):
    assigned = []
    for _ in range(3):
        idx = _next_element_index(db, section, 0)
        db.add(SectionElement(section_id=section.id, type="text", column_index=0, order_index=idx))
        db.commit()
        assigned.append(idx)

    assert assigned == [0, 1, 2]


def test_next_index_follows_max_not_count(db, section):
    db.add(SectionElement(section_id=section.id, type="text", column_index=1, order_index=7))
    db.commit()
    assert _next_element_index(db, section, 1) == 8
    # Other column is a separate scope
    assert _next_element_index(db, section, 0) == 0


def test_apply_reorder_updates_in_given_order(db):
    calls = []

    def apply_one(session, entry):
        calls.append(entry.id)

    entries = [SimpleNamespace(id=i) for i in (3, 1, 2)]
    outcome = apply_reorder(db, entries, apply_one)

    assert calls == [3, 1, 2]
    assert outcome.ok
    assert outcome.updated == [3, 1, 2]


def test_apply_reorder_continues_past_failed_entry(db):
    projects = [Project(title=f"P{i}", slug=f"p{i}", category="works", order_index=i) for i in range(4)]
    db.add_all(projects)
    db.commit()
    ids = [p.id for p in projects]
    broken = ids[1]

    def apply_one(session, entry):
        proj = session.get(Project, entry.id)
        proj.order_index = entry.order_index
        if entry.id == broken:
            raise RuntimeError("connection reset")

    # Reverse the set
    entries = [SimpleNamespace(id=pid, order_index=3 - n) for n, pid in enumerate(ids)]
    outcome = apply_reorder(db, entries, apply_one)

    assert not outcome.ok
    assert outcome.updated == [ids[0], ids[2], ids[3]]
    assert outcome.failed == [{"id": broken, "error": "connection reset"}]

    db.expire_all()
    by_id = {p.id: p.order_index for p in db.query(Project).all()}
    assert by_id[ids[0]] == 3
    assert by_id[broken] == 1  # rolled back, kept its old position
    assert by_id[ids[2]] == 1
    assert by_id[ids[3]] == 0
