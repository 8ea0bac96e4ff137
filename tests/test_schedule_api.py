import uuid

import pytest


def _create(client, **fields):
    response = client.post("/admin/schedule", json=fields)
    assert response.status_code == 200, response.text
    (created,) = response.json()["data"]
    return created


def test_public_list_is_empty_array_when_no_rows(client):
    response = client.get("/schedule")
    assert response.status_code == 200
    assert response.json() == []


def test_admin_list_is_wrapped_and_empty(admin_client):
    response = admin_client.get("/admin/schedule")
    assert response.status_code == 200
    assert response.json() == {"data": []}


def test_create_then_list_returns_generated_fields(admin_client):
    created = _create(admin_client, title="Spring Classic", event_type="tournament")

    assert uuid.UUID(created["id"])
    assert created["created_at"]

    listed = admin_client.get("/admin/schedule").json()["data"]
    assert [row["id"] for row in listed] == [created["id"]]


def test_create_open_gym_scenario(admin_client):
    _create(
        admin_client,
        title="Summer Open Gym",
        event_type="open_gym",
        is_recurring=True,
        day_of_week="Tuesday",
    )

    (row,) = admin_client.get("/admin/schedule").json()["data"]
    assert row["title"] == "Summer Open Gym"
    assert row["event_type"] == "open_gym"
    assert row["is_recurring"] is True
    assert row["day_of_week"] == "Tuesday"
    assert row["date"] is None
    assert row["start_time"] is None
    assert row["end_time"] is None
    assert row["description"] is None


def test_create_without_title_is_400(admin_client):
    response = admin_client.post("/admin/schedule", json={"event_type": "tournament"})
    assert response.status_code == 400
    assert response.json() == {"error": "Title is required"}


def test_create_with_bad_event_type_is_400(admin_client):
    response = admin_client.post(
        "/admin/schedule", json={"title": "Mixer", "event_type": "social"}
    )
    assert response.status_code == 400
    assert "event_type" in response.json()["error"]


def test_admin_list_orders_newest_first(admin_client):
    first = _create(admin_client, title="First")
    second = _create(admin_client, title="Second")

    listed = admin_client.get("/admin/schedule").json()["data"]
    assert [row["id"] for row in listed] == [second["id"], first["id"]]


def test_public_list_orders_by_date_with_undated_last(admin_client):
    undated = _create(admin_client, title="TBD")
    later = _create(admin_client, title="Later", date="2024-07-01")
    sooner = _create(admin_client, title="Sooner", date="2024-06-01", start_time="18:00")

    listed = admin_client.get("/schedule").json()
    assert [row["id"] for row in listed] == [sooner["id"], later["id"], undated["id"]]
    assert listed[0]["start_time"] == "18:00:00"


def test_public_list_filters_by_event_type(admin_client):
    _create(admin_client, title="Cup", event_type="tournament")
    gym = _create(admin_client, title="Gym", event_type="open_gym")

    listed = admin_client.get("/schedule", params={"event_type": "open_gym"}).json()
    assert [row["id"] for row in listed] == [gym["id"]]


def test_update_replaces_record(admin_client):
    created = _create(
        admin_client, title="Cup", event_type="tournament", description="Bring a team"
    )

    response = admin_client.put(
        "/admin/schedule",
        params={"id": created["id"]},
        json={"title": "Cup", "event_type": "tournament", "date": "2024-06-01"},
    )
    assert response.status_code == 200
    (updated,) = response.json()["data"]
    assert updated["id"] == created["id"]
    assert updated["date"] == "2024-06-01"
    assert updated["description"] is None


def test_update_requires_id(admin_client):
    response = admin_client.put("/admin/schedule", json={"title": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "ID parameter is required"}


def test_update_unknown_id_is_404_and_changes_nothing(admin_client):
    created = _create(admin_client, title="Original")

    response = admin_client.put(
        "/admin/schedule", params={"id": str(uuid.uuid4())}, json={"title": "Changed"}
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Schedule item not found"}

    (row,) = admin_client.get("/admin/schedule").json()["data"]
    assert row == created


def test_update_malformed_id_is_400(admin_client):
    response = admin_client.put(
        "/admin/schedule", params={"id": "abc"}, json={"title": "Changed"}
    )
    assert response.status_code == 400
    assert "uuid" in response.json()["error"]


def test_delete_removes_record(admin_client):
    keep = _create(admin_client, title="Keep")
    drop = _create(admin_client, title="Drop")

    response = admin_client.delete("/admin/schedule", params={"id": drop["id"]})
    assert response.status_code == 200
    assert response.json() == {"message": "Schedule item deleted successfully"}

    ids = [row["id"] for row in admin_client.get("/admin/schedule").json()["data"]]
    assert ids == [keep["id"]]


def test_delete_requires_id(admin_client):
    response = admin_client.delete("/admin/schedule")
    assert response.status_code == 400
    assert response.json() == {"error": "ID parameter is required"}


def test_delete_malformed_id_is_400(admin_client):
    response = admin_client.delete("/admin/schedule", params={"id": "abc"})
    assert response.status_code == 400
    assert "uuid" in response.json()["error"]


def test_update_without_body_or_id_reports_missing_id(admin_client):
    response = admin_client.put("/admin/schedule")
    assert response.status_code == 400
    assert response.json() == {"error": "ID parameter is required"}


def test_update_without_body_is_400(admin_client):
    created = _create(admin_client, title="Cup")

    response = admin_client.put("/admin/schedule", params={"id": created["id"]})
    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be a JSON object"}


@pytest.mark.parametrize("kwargs", [{}, {"json": ["title"]}, {"json": "Cup"}])
def test_create_with_non_object_body_is_400(admin_client, kwargs):
    response = admin_client.post("/admin/schedule", **kwargs)
    assert response.status_code == 400
    assert response.json() == {"error": "Request body must be a JSON object"}


def test_create_with_malformed_json_is_400(admin_client):
    response = admin_client.post(
        "/admin/schedule",
        content=b"{\"title\": ",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_admin_endpoints_require_session(client):
    assert client.get("/admin/schedule").status_code == 401
    response = client.post("/admin/schedule", json={"title": "Sneaky"})
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert client.get("/schedule").json() == []


def test_navigation_and_health(client):
    assert client.get("/health").json() == {"ok": True}
    titles = [entry["title"] for entry in client.get("/navigation").json()]
    assert titles == ["Home", "Schedule", "Photos"]
