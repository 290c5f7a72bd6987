import pytest
from fastapi.testclient import TestClient

from core.config import settings
from main import app
from routers import about_router


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "OK"
    assert "timestamp" in body


def test_unknown_route_is_404(client):
    response = client.get("/api/nothing")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Route not found"}


def test_unsupported_method_is_route_not_found(client):
    response = client.patch("/api/about", json={"content": "x"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Route not found"}


def test_unexpected_error_keeps_json_envelope(client, monkeypatch):
    def _explode(db):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(about_router, "get_about", _explode)
    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.get("/api/about")
    assert response.status_code == 500
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"success": False, "error": "Internal server error"}


def test_embed_validate_endpoint(client):
    ok = client.post("/api/embeds/validate", json={"url": "https://youtu.be/dQw4w9WgXcQ"}).json()["data"]
    assert ok == {
        "isValid": True,
        "embedUrl": "https://www.youtube.com/embed/dQw4w9WgXcQ?rel=0",
        "type": "youtube",
        "originalUrl": "https://youtu.be/dQw4w9WgXcQ",
        "error": None,
    }

    bad = client.post("/api/embeds/validate", json={"url": "https://example.com/video"}).json()["data"]
    assert bad["isValid"] is False
    assert bad["error"].startswith("Unsupported embed URL")


class TestAdminToken:
    @pytest.fixture(autouse=True)
    def _token(self, monkeypatch):
        monkeypatch.setattr(settings, "ADMIN_TOKEN", "s3cret")

    def test_reads_stay_public(self, client):
        assert client.get("/api/projects").status_code == 200
        assert client.get("/api/about").status_code == 200

    def test_writes_need_token(self, client):
        response = client.put("/api/about", json={"content": "x"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Not authenticated"}

    def test_wrong_token(self, client):
        response = client.put(
            "/api/about", json={"content": "x"}, headers={"Authorization": "Bearer nope"}
        )
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    def test_right_token(self, client):
        response = client.put(
            "/api/about", json={"content": "x"}, headers={"Authorization": "Bearer s3cret"}
        )
        assert response.status_code == 200
