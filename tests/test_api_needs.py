# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_need
from volunteer_hub.db import models
from tests.test_helpers import create_need, login, need_payload


def test_read_upcoming_needs_is_public(client: TestClient, db_session: Session, owner):
    for day in range(10, 0, -1):
        create_need(db_session, owner, post_title=f"Day {day}", deadline=f"2030-03-{day:02d}T08:00:00")

    response = client.get("/api/add_volunteer_post")

    assert response.status_code == 200
    data = response.json()
    assert [need["post_title"] for need in data] == [f"Day {day}" for day in range(1, 7)]
    assert all(need["owner_id"] == owner.id for need in data)


def test_read_single_need(client: TestClient, db_session: Session, owner):
    need = create_need(db_session, owner)

    response = client.get(f"/api/add_volunteer_post/{need.id}")

    assert response.status_code == 200
    assert response.json()["post_title"] == "Beach Cleanup"


def test_read_single_need_not_found(client: TestClient):
    assert client.get("/api/add_volunteer_post/999").status_code == 404
    assert client.get("/api/add_volunteer_post/not-an-id").status_code == 400


def test_create_need_unauthenticated(client: TestClient, db_session: Session):
    response = client.post("/api/add_volunteer_post", json=need_payload())

    assert response.status_code == 401
    assert db_session.query(models.Need).count() == 0


def test_create_need_authenticated(client: TestClient, db_session: Session, owner):
    login(client, "owner@example.com")

    response = client.post("/api/add_volunteer_post", json=need_payload(volunteers_needed="4"))

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Volunteer post added successfully"

    created = client.get(f"/api/add_volunteer_post/{body['id']}").json()
    assert created["owner_id"] == owner.id
    assert created["volunteers_needed"] == 4
    assert created["deadline"] == "2030-06-01T09:00:00"


def test_create_need_ignores_client_supplied_owner(client: TestClient, db_session: Session, owner, other_user):
    login(client, "owner@example.com")

    response = client.post("/api/add_volunteer_post", json=need_payload(owner_id=other_user.id, user_id=other_user.id))

    assert response.status_code == 201
    assert crud_need.get_need(db_session, response.json()["id"]).owner_id == owner.id


def test_create_need_invalid_volunteer_count(client: TestClient, db_session: Session, owner):
    login(client, "owner@example.com")

    response = client.post("/api/add_volunteer_post", json=need_payload(volunteers_needed="lots"))

    assert response.status_code == 400
    assert response.json()["detail"] == "volunteers_needed must be a non-negative integer"
    assert db_session.query(models.Need).count() == 0


def test_read_user_needs(client: TestClient, db_session: Session, owner, other_user):
    create_need(db_session, owner, post_title="Mine")
    create_need(db_session, other_user, post_title="Theirs")
    login(client, "owner@example.com")

    response = client.get(f"/api/user_volunteer_post/{owner.id}")

    assert response.status_code == 200
    assert [need["post_title"] for need in response.json()] == ["Mine"]


def test_read_user_needs_of_someone_else(client: TestClient, db_session: Session, owner, other_user):
    create_need(db_session, other_user, post_title="Theirs")
    login(client, "owner@example.com")

    response = client.get(f"/api/user_volunteer_post/{other_user.id}")

    assert response.status_code == 403


def test_read_user_needs_unauthenticated(client: TestClient, owner):
    assert client.get(f"/api/user_volunteer_post/{owner.id}").status_code == 401


def test_update_need_by_owner(client: TestClient, db_session: Session, owner, other_user):
    need = create_need(db_session, owner)
    login(client, "owner@example.com")

    response = client.put(
        f"/api/add_volunteer_post/{need.id}",
        json={"location": "Kuakata", "volunteers_needed": 10, "owner_id": other_user.id},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["location"] == "Kuakata"
    assert data["volunteers_needed"] == 10
    assert data["post_title"] == "Beach Cleanup"
    assert data["owner_id"] == owner.id


def test_update_need_by_other_user(client: TestClient, db_session: Session, owner, other_user):
    need = create_need(db_session, owner)
    login(client, "other@example.com")

    response = client.put(f"/api/add_volunteer_post/{need.id}", json={"post_title": "Hijacked"})

    assert response.status_code == 403
    assert crud_need.get_need(db_session, need.id).post_title == "Beach Cleanup"


def test_update_missing_need(client: TestClient, owner):
    login(client, "owner@example.com")

    response = client.put("/api/add_volunteer_post/12345", json={"post_title": "Ghost"})

    assert response.status_code == 404


def test_update_need_malformed_id(client: TestClient, owner):
    login(client, "owner@example.com")

    response = client.put("/api/add_volunteer_post/abc", json={"post_title": "Ghost"})

    assert response.status_code == 400


def test_delete_need_by_other_user(client: TestClient, db_session: Session, owner, other_user):
    need = create_need(db_session, owner)
    login(client, "other@example.com")

    response = client.delete(f"/api/add_volunteer_post/{need.id}")

    assert response.status_code == 403
    assert crud_need.get_need(db_session, need.id) is not None


def test_delete_need_twice(client: TestClient, db_session: Session, owner):
    need = create_need(db_session, owner)
    need_id = need.id
    login(client, "owner@example.com")

    first = client.delete(f"/api/add_volunteer_post/{need_id}")
    second = client.delete(f"/api/add_volunteer_post/{need_id}")

    assert first.status_code == 200
    assert first.json() == {"message": "Volunteer post deleted successfully"}
    assert second.status_code == 404
    assert db_session.query(models.Need).count() == 0


def test_create_need_with_offset_deadline_reads_back_in_utc(client: TestClient, owner):
    login(client, "owner@example.com")

    response = client.post("/api/add_volunteer_post", json=need_payload(deadline="2030-06-01T09:00:00+05:00"))

    assert response.status_code == 201
    created = client.get(f"/api/add_volunteer_post/{response.json()['id']}").json()
    assert created["deadline"] == "2030-06-01T04:00:00"


def test_read_single_need_out_of_range_id(client: TestClient):
    response = client.get("/api/add_volunteer_post/99999999999999999999")

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid need id"}


def test_update_and_delete_need_out_of_range_id(client: TestClient, owner):
    login(client, "owner@example.com")

    assert client.put("/api/add_volunteer_post/99999999999999999999", json={"post_title": "Ghost"}).status_code == 400
    assert client.delete("/api/add_volunteer_post/99999999999999999999").status_code == 400


def test_create_need_out_of_range_volunteer_count(client: TestClient, db_session: Session, owner):
    login(client, "owner@example.com")

    response = client.post("/api/add_volunteer_post", json=need_payload(volunteers_needed="99999999999999999999"))

    assert response.status_code == 400
    assert response.json()["detail"] == "volunteers_needed must be a non-negative integer"
    assert db_session.query(models.Need).count() == 0


def test_update_need_clears_thumbnail_with_null(client: TestClient, db_session: Session, owner):
    need = create_need(db_session, owner)
    login(client, "owner@example.com")

    response = client.put(f"/api/add_volunteer_post/{need.id}", json={"thumbnail": None})

    assert response.status_code == 200
    assert response.json()["thumbnail"] is None
    assert response.json()["post_title"] == "Beach Cleanup"


def test_update_need_rejects_null_title(client: TestClient, db_session: Session, owner):
    need = create_need(db_session, owner)
    login(client, "owner@example.com")

    response = client.put(f"/api/add_volunteer_post/{need.id}", json={"post_title": None})

    assert response.status_code == 400
    assert response.json() == {"detail": "post_title cannot be null"}
    assert crud_need.get_need(db_session, need.id).post_title == "Beach Cleanup"
