"""Tests for finding teachers and the connection request workflow."""

import pytest


@pytest.fixture
def pending_request(client, teacher, student):
    response = client.post(f"/teachers/{teacher[0]}/connect", headers=student[1])
    assert response.status_code == 201
    return response.json()


class TestFindTeachers:
    """Tests for GET /teachers."""

    def test_lists_teachers_only(self, client, store, teacher, student):
        store.add_user("student", full_name="Another Student")
        response = client.get("/teachers", headers=student[1])
        assert response.status_code == 200
        data = response.json()
        assert [t["user_id"] for t in data] == [teacher[0]]
        assert data[0]["connection_status"] == "none"
        assert data[0]["bio"] == "Math"

    def test_search_by_name_or_email(self, client, store, teacher, student):
        store.add_user("teacher", full_name="Grace Hopper", email="grace@navy.mil")
        names = lambda q: [t["full_name"] for t in client.get("/teachers", params={"q": q}, headers=student[1]).json()]
        assert names("GRACE") == ["Grace Hopper"]
        assert names("navy") == ["Grace Hopper"]
        assert names("ada") == ["Ada Teacher"]
        assert names("nobody") == []

    def test_no_teachers(self, client, student):
        assert client.get("/teachers", headers=student[1]).json() == []

    def test_shows_request_status(self, client, teacher, student, pending_request):
        data = client.get("/teachers", headers=student[1]).json()
        assert data[0]["connection_status"] == "pending"


class TestRequestConnection:
    """Tests for POST /teachers/{id}/connect."""

    def test_creates_pending_request(self, store, teacher, student, pending_request):
        assert pending_request["status"] == "pending"
        assert pending_request["teacher_id"] == teacher[0]
        assert pending_request["student_id"] == student[0]
        assert len(store.rows("teacher_student_connections")) == 1

    def test_duplicate_request(self, client, teacher, student, pending_request):
        response = client.post(f"/teachers/{teacher[0]}/connect", headers=student[1])
        assert response.status_code == 409

    def test_target_must_be_teacher(self, client, store, student):
        other_student, _ = store.add_user("student")
        response = client.post(f"/teachers/{other_student}/connect", headers=student[1])
        assert response.status_code == 404


class TestConnectionRequests:
    """Tests for /connections (teacher side)."""

    def test_list_enriched_with_student(self, client, teacher, pending_request):
        response = client.get("/connections", headers=teacher[1])
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["student"] == {"full_name": "Sam Student", "email": "sam@example.com", "bio": None}

    def test_missing_profile_shown_as_unknown(self, client, store, teacher, student, pending_request):
        store.tables["profiles"] = [p for p in store.rows("profiles") if p["user_id"] != student[0]]
        data = client.get("/connections", headers=teacher[1]).json()
        assert data[0]["student"]["full_name"] == "Unknown"
        assert data[0]["student"]["email"] == "Unknown"

    def test_newest_first(self, client, store, teacher, pending_request):
        later_student, _ = store.add_user("student", full_name="Later")
        store.add_row("teacher_student_connections", {"teacher_id": teacher[0], "student_id": later_student, "status": "pending"})
        data = client.get("/connections", headers=teacher[1]).json()
        assert [c["student"]["full_name"] for c in data] == ["Later", "Sam Student"]

    def test_approve(self, client, store, teacher, pending_request):
        response = client.put(f"/connections/{pending_request['id']}", json={"status": "approved"}, headers=teacher[1])
        assert response.status_code == 200
        assert response.json()["message"] == "Connection request has been approved"
        assert store.rows("teacher_student_connections")[0]["status"] == "approved"

    def test_reject(self, client, store, teacher, pending_request):
        client.put(f"/connections/{pending_request['id']}", json={"status": "rejected"}, headers=teacher[1])
        assert store.rows("teacher_student_connections")[0]["status"] == "rejected"

    def test_decision_is_final(self, client, store, teacher, pending_request):
        url = f"/connections/{pending_request['id']}"
        client.put(url, json={"status": "rejected"}, headers=teacher[1])
        response = client.put(url, json={"status": "approved"}, headers=teacher[1])
        assert response.status_code == 409
        assert store.rows("teacher_student_connections")[0]["status"] == "rejected"

    def test_cannot_reset_to_pending(self, client, teacher, pending_request):
        response = client.put(f"/connections/{pending_request['id']}", json={"status": "pending"}, headers=teacher[1])
        assert response.status_code == 422

    def test_other_teacher_cannot_decide(self, client, store, pending_request):
        _, other_headers = store.add_user("teacher")
        response = client.put(f"/connections/{pending_request['id']}", json={"status": "approved"}, headers=other_headers)
        assert response.status_code == 404
