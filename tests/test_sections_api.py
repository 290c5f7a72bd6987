def test_create_section_defaults(make_project, make_section):
    proj = make_project("P")
    section = make_section(proj["id"])

    assert section["title"] == "New Section"
    assert section["columns"] == 1
    assert section["order_index"] == 0
    assert section["elements"] == []


def test_sections_get_next_index_within_their_project(make_project, make_section):
    p1 = make_project("P1")
    p2 = make_project("P2")

    assert [make_section(p1["id"])["order_index"] for _ in range(3)] == [0, 1, 2]
    assert make_section(p2["id"])["order_index"] == 0


def test_invalid_column_count(client, make_project):
    proj = make_project("P")
    for columns in (0, 5):
        response = client.post("/api/sections", json={"project_id": proj["id"], "columns": columns})
        assert response.status_code == 400
        assert "Invalid column count" in response.json()["error"]


def test_section_for_missing_project(client):
    response = client.post("/api/sections", json={"project_id": 123})
    assert response.status_code == 404
    assert response.json()["error"] == "Project not found"


def test_update_section(client, make_project, make_section):
    proj = make_project("P")
    section = make_section(proj["id"])

    response = client.put(f"/api/sections/{section['id']}", json={"title": "Intro", "columns": 3})
    assert response.status_code == 200
    data = response.json()["data"]
    assert (data["title"], data["columns"], data["order_index"]) == ("Intro", 3, 0)


def test_cannot_shrink_columns_below_placed_elements(client, make_project, make_section, make_element):
    proj = make_project("P")
    section = make_section(proj["id"], columns=3)
    make_element(section["id"], column_index=2)

    response = client.put(f"/api/sections/{section['id']}", json={"columns": 2})
    assert response.status_code == 400

    response = client.put(f"/api/sections/{section['id']}", json={"columns": 4})
    assert response.status_code == 200


def test_delete_section_removes_its_elements(client, make_project, make_section, make_element):
    proj = make_project("P")
    section = make_section(proj["id"])
    element = make_element(section["id"])

    response = client.delete(f"/api/sections/{section['id']}")
    assert response.json()["success"] is True
    assert client.get(f"/api/elements/{element['id']}").status_code == 404
    assert client.get(f"/api/projects/{proj['id']}").json()["data"]["sections"] == []
    assert client.delete(f"/api/sections/{section['id']}").status_code == 404


def test_reorder_sections_only_touches_that_project(client, make_project, make_section):
    p1 = make_project("P1")
    p2 = make_project("P2")
    a = make_section(p1["id"])
    b = make_section(p1["id"])
    foreign = make_section(p2["id"])

    response = client.post(f"/api/projects/{p1['id']}/sections/reorder", json={"sectionOrders": [
        {"id": b["id"], "order_index": 0},
        {"id": foreign["id"], "order_index": 7},
        {"id": a["id"], "order_index": 1},
    ]})
    body = response.json()
    assert body["success"] is False
    assert body["data"]["updated"] == [b["id"], a["id"]]
    assert body["data"]["failed"][0]["id"] == foreign["id"]

    assert client.get(f"/api/sections/{foreign['id']}").json()["data"]["order_index"] == 0
