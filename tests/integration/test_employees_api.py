from unittest.mock import patch

from innkeeper.db import models
from innkeeper.utils.security import decode_token


def test_next_employee_id(client, auth_headers, make_employee):
    headers = auth_headers("employeeAdmin")
    assert client.get("/api/employee/next-employee-id", headers=headers).json() == {"number": 1, "padded": "0001", "raw": "1"}
    make_employee(employee_number=41)
    assert client.get("/api/employee/next-employee-id", headers=headers).json()["padded"] == "0042"


def test_create_employee_without_email(client, auth_headers, db):
    resp = client.post("/api/employee/", headers=auth_headers("employeeAdmin"), json={
        "full_name": "  Maria Cruz ",
        "username": "maria",
        "password": "welcome1",
        "job_title": "Cleaner",
    })
    assert resp.status_code == 201
    body = resp.json()
    assert body["employee_number"] == 1
    assert body["email_sent"] is False
    assert body["email_error"] is None

    employee = db.query(models.Employee).one()
    assert employee.name == "Maria Cruz"
    assert employee.department == "General"
    assert employee.password_hash.startswith("$argon2id$")


def test_create_employee_sends_credentials(client, auth_headers):
    with patch("innkeeper.api.employees.email_service.send_employee_credentials_sync",
               return_value={"success": True, "error": None}) as send:
        resp = client.post("/api/employee/", headers=auth_headers("hotelAdmin"), json={
            "name": "Leo", "email": "leo@hotel.test", "username": "leo", "password": "pw123456",
        })
    assert resp.status_code == 201
    assert resp.json()["email_sent"] is True
    kwargs = send.call_args.kwargs
    assert kwargs["email"] == "leo@hotel.test"
    assert kwargs["employee_id"] == "0001"


def test_create_employee_reports_email_failure(client, auth_headers):
    with patch("innkeeper.api.employees.email_service.send_employee_credentials_sync",
               side_effect=RuntimeError("smtp down")):
        resp = client.post("/api/employee/", headers=auth_headers("employeeAdmin"), json={
            "name": "Ivy", "email": "ivy@hotel.test", "password": "pw123456",
        })
    assert resp.status_code == 201
    assert resp.json()["email_sent"] is False
    assert resp.json()["email_error"] == "smtp down"


def test_create_employee_validation(client, auth_headers, make_employee):
    headers = auth_headers("employeeAdmin")
    assert client.post("/api/employee/", headers=headers, json={"department": "Kitchen"}).json()["detail"] == "Name is required"
    make_employee(employee_number=5, card_id="CARD-5")
    dup = client.post("/api/employee/", headers=headers, json={"name": "X", "employee_number": 5})
    assert dup.status_code == 400
    dup_card = client.post("/api/employee/", headers=headers, json={"name": "Y", "card_id": "CARD-5"})
    assert dup_card.status_code == 400
    # restaurant admins cannot manage staff
    assert client.post("/api/employee/", headers=auth_headers("restaurantAdmin"), json={"name": "Z"}).status_code == 403


def test_create_employee_number_taken_after_check(client, auth_headers, make_employee, db):
    make_employee(employee_number=9)
    headers = auth_headers("employeeAdmin")
    # Lookup misses, as when a concurrent create commits the same number first
    with patch("innkeeper.api.employees.user_repo.get_employee_by_number", return_value=None):
        resp = client.post("/api/employee/", headers=headers, json={"name": "Late", "employee_number": 9})
    assert resp.status_code == 400
    assert "already in use" in resp.json()["detail"]
    assert db.query(models.Employee).count() == 1

    follow_up = client.post("/api/employee/", headers=headers, json={"name": "Next"})
    assert follow_up.status_code == 201
    assert follow_up.json()["employee_number"] == 10


def test_employee_login_profile_and_password(client, make_employee):
    make_employee(name="Noor", username="noor", email="noor@hotel.test", password="first-pass")

    bad = client.post("/api/employee/login", json={"email": "noor", "password": "nope"})
    assert bad.status_code == 401

    login = client.post("/api/employee/login", json={"email": "noor", "password": "first-pass"})
    assert login.status_code == 200
    body = login.json()
    assert body["success"] is True
    assert body["employee"]["name"] == "Noor"
    assert decode_token(body["token"])["kind"] == "employee"
    headers = {"Authorization": f"Bearer {body['token']}"}

    assert client.get("/api/employee/profile", headers=headers).json()["username"] == "noor"
    updated = client.put("/api/employee/profile", headers=headers, json={"contact_number": "555-0101", "name": ""})
    assert updated.json()["contact_number"] == "555-0101"
    assert updated.json()["name"] == "Noor"

    short = client.put("/api/employee/change-password", headers=headers,
                       json={"current_password": "first-pass", "new_password": "abc"})
    assert short.status_code == 400
    wrong = client.put("/api/employee/change-password", headers=headers,
                       json={"current_password": "nope", "new_password": "second-pass"})
    assert wrong.status_code == 401
    ok = client.put("/api/employee/change-password", headers=headers,
                    json={"current_password": "first-pass", "new_password": "second-pass"})
    assert ok.status_code == 200
    relogin = client.post("/api/employee/login", json={"email": "noor@hotel.test", "password": "second-pass"})
    assert relogin.status_code == 200

    dashboard = client.get("/api/employee/dashboard", headers=headers).json()
    assert dashboard["employee"]["name"] == "Noor"


def test_inactive_employee_cannot_log_in(client, make_employee):
    make_employee(username="gone", password="pw123456", status="inactive")
    assert client.post("/api/employee/login", json={"email": "gone", "password": "pw123456"}).status_code == 401


def test_profile_requires_employee_session(client, auth_headers):
    assert client.get("/api/employee/profile", headers=auth_headers("hotelAdmin")).status_code == 403


def test_list_and_delete_employee(client, auth_headers, make_employee, db):
    headers = auth_headers("employeeAdmin")
    by_id = make_employee(name="A")
    by_code = make_employee(name="B", employee_code="EMP-B")
    by_number = make_employee(name="C")

    assert len(client.get("/api/employee/", headers=headers).json()) == 3
    assert client.delete(f"/api/employee/{by_id.id}", headers=headers).status_code == 200
    assert client.delete("/api/employee/EMP-B", headers=headers).status_code == 200
    assert client.delete(f"/api/employee/{by_number.employee_number:04d}", headers=headers).status_code == 200
    assert client.delete("/api/employee/unknown", headers=headers).status_code == 404
    assert db.query(models.Employee).count() == 0
