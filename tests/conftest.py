import os

# Must be set before the app (and its engine/settings) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_TOKEN"] = ""
os.environ["EXPOSE_ERRORS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import get_db
from core.errors import StorageError
from main import app
from models.base import Base
from services.storage import StoredObject, get_storage


class FakeStorage:
    """In-memory stand-in for the R2 bucket."""

    def __init__(self):
        self.objects: dict[str, bytes] = {}
        self.fail_delete = False
        self._counter = 0

    def upload(self, data, filename, content_type, folder="uploads"):
        self._counter += 1
        key = f"{folder}/{self._counter:04d}-{filename}"
        self.objects[key] = data
        return StoredObject(
            key=key,
            url=f"https://cdn.example.test/{key}",
            original_name=filename,
            size=len(data),
            mimetype=content_type or "application/octet-stream",
        )

    def delete(self, key):
        if self.fail_delete:
            raise StorageError("bucket unavailable")
        self.objects.pop(key, None)


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(session_factory, storage):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_project(client):
    def _make(title="Project", category="works", **fields):
        form = {"title": title, "category": category}
        form.update({k: str(v) for k, v in fields.items()})
        response = client.post("/api/projects", data=form)
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture
def make_section(client):
    def _make(project_id, **fields):
        response = client.post("/api/sections", json={"project_id": project_id, **fields})
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make


@pytest.fixture
def make_element(client):
    def _make(section_id, type="text", **fields):
        response = client.post(f"/api/sections/{section_id}/elements", json={"type": type, **fields})
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _make
