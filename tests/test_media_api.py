from core.config import settings


def _upload(client, name="photo.jpg", content=b"jpeg-data", mimetype="image/jpeg"):
    return client.post("/api/media/upload", files={"file": (name, content, mimetype)})


def test_upload_records_metadata(client, storage):
    response = _upload(client)
    assert response.status_code == 201
    media = response.json()["data"]

    assert media["original_name"] == "photo.jpg"
    assert media["file_type"] == "image"
    assert media["file_size"] == len(b"jpeg-data")
    assert media["mimetype"] == "image/jpeg"
    assert media["folder"] == "media"
    assert media["storage_key"].startswith("media/")
    assert media["filename"] == media["storage_key"].split("/")[-1]
    assert storage.objects[media["storage_key"]] == b"jpeg-data"


def test_non_image_uploads_are_classified_as_video(client):
    media = _upload(client, "clip.mp4", b"mp4", "video/mp4").json()["data"]
    assert media["file_type"] == "video"


def test_upload_without_file(client):
    response = client.post("/api/media/upload")
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No file provided"}


def test_upload_over_limit(client, monkeypatch, storage):
    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 4)
    response = _upload(client, content=b"12345")
    assert response.status_code == 400
    assert "too large" in response.json()["error"]
    assert storage.objects == {}


def test_list_filters_by_type(client):
    image = _upload(client).json()["data"]
    video = _upload(client, "clip.mov", b"mov", "video/quicktime").json()["data"]

    everything = client.get("/api/media").json()["data"]
    assert {m["id"] for m in everything} == {image["id"], video["id"]}
    assert [m["id"] for m in client.get("/api/media", params={"type": "image"}).json()["data"]] == [image["id"]]
    assert [m["id"] for m in client.get("/api/media", params={"type": "video"}).json()["data"]] == [video["id"]]
    assert client.get("/api/media", params={"type": "pdf"}).status_code == 422


def test_list_newest_first(client):
    first = _upload(client, "a.jpg").json()["data"]
    second = _upload(client, "b.jpg").json()["data"]
    assert [m["id"] for m in client.get("/api/media").json()["data"]] == [second["id"], first["id"]]


def test_delete_removes_object_then_row(client, storage):
    media = _upload(client).json()["data"]

    response = client.delete(f"/api/media/{media['id']}")
    assert response.json()["message"] == "Media deleted successfully"
    assert storage.objects == {}
    assert client.get(f"/api/media/{media['id']}").status_code == 404


def test_storage_failure_keeps_row(client, storage):
    media = _upload(client).json()["data"]
    storage.fail_delete = True

    response = client.delete(f"/api/media/{media['id']}")
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Object storage error"}
    assert client.get(f"/api/media/{media['id']}").status_code == 200


def test_delete_missing_media(client):
    assert client.delete("/api/media/77").status_code == 404
