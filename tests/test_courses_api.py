COURSE = {"title": "Databases", "description": "Relational storage and SQL."}


def create(client, **overrides):
    return client.post("/api/courses", json={**COURSE, **overrides})


def test_create_and_get(course_api):
    response = create(course_api)

    assert response.status_code == 201
    course = response.json()
    assert course["title"] == "Databases"
    assert course_api.get(f"/api/courses/{course['id']}").json() == course


def test_list(course_api):
    create(course_api)
    create(course_api, title="Networks")

    response = course_api.get("/api/courses")

    assert [c["title"] for c in response.json()] == ["Databases", "Networks"]


def test_lookup_returns_existing_subset(course_api):
    first = create(course_api).json()
    create(course_api, title="Networks")

    response = course_api.post("/api/courses/byIds", json={"courseIds": [first["id"], 999]})

    assert response.status_code == 200
    assert response.json() == [first]


def test_lookup_with_no_ids_is_empty(course_api):
    create(course_api)

    response = course_api.post("/api/courses/byIds", json={"courseIds": []})

    assert response.status_code == 200
    assert response.json() == []


def test_duplicate_title_is_400(course_api):
    create(course_api)

    response = create(course_api, description="Another description here.")

    assert response.status_code == 400
    assert response.json()["data"]["field"] == "title"


def test_field_validation(course_api):
    response = create(course_api, title="DB", description="short")

    assert response.status_code == 400
    assert set(response.json()["data"]["errors"]) == {"title", "description"}


def test_update(course_api):
    course_id = create(course_api).json()["id"]

    response = course_api.put(f"/api/courses/{course_id}", json={"title": "New Title", "description": "New description with enough length."})

    assert response.status_code == 200
    assert response.json()["title"] == "New Title"


def test_update_keeping_own_title(course_api):
    course_id = create(course_api).json()["id"]

    response = course_api.put(f"/api/courses/{course_id}", json={**COURSE, "description": "Changed description text."})

    assert response.status_code == 200


def test_update_missing_is_404(course_api):
    assert course_api.put("/api/courses/99", json=COURSE).status_code == 404


def test_delete(course_api):
    course_id = create(course_api).json()["id"]

    assert course_api.delete(f"/api/courses/{course_id}").status_code == 204
    assert course_api.get(f"/api/courses/{course_id}").status_code == 404
    assert course_api.delete(f"/api/courses/{course_id}").status_code == 404


def test_out_of_range_id_is_404(course_api):
    huge = "99999999999999999999"

    assert course_api.get(f"/api/courses/{huge}").status_code == 404
    assert course_api.put(f"/api/courses/{huge}", json=COURSE).status_code == 404
    assert course_api.delete(f"/api/courses/{huge}").status_code == 404


def test_lookup_ignores_out_of_range_ids(course_api):
    first = create(course_api).json()

    response = course_api.post("/api/courses/byIds", json={"courseIds": [first["id"], 99999999999999999999, -1]})

    assert response.status_code == 200
    assert response.json() == [first]
