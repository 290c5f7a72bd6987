import pytest

from models.project import Project
from services.slug import slugify, unique_slug


@pytest.mark.parametrize(
    "title, expected",
    [
        ("My Project!! 2024", "my-project-2024"),
        ("  --Hello World--  ", "hello-world"),
        ("Ünïcode & Friends", "n-code-friends"),
        ("already-a-slug", "already-a-slug"),
        ("!!!", ""),
    ],
)
def test_slugify(title, expected):
    assert slugify(title) == expected


def test_slugify_is_idempotent():
    once = slugify("Parallel Discourses: Vol. 2")
    assert slugify(once) == once


def test_unique_slug_appends_counter(db):
    db.add(Project(title="Same", slug="same", category="works"))
    db.add(Project(title="Same", slug="same-2", category="works"))
    db.commit()

    assert unique_slug(db, "Same") == "same-3"
    assert unique_slug(db, "Other") == "other"


def test_unique_slug_falls_back_for_symbol_only_titles(db):
    assert unique_slug(db, "???") == "project"
