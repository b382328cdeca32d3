from innkeeper.db import models
from innkeeper.db.repositories import tasks as task_repo


def _create_task(client, headers, **overrides):
    payload = {"room": "501", "type": "CLEANING", "priority": "HIGH", "description": "Deep clean"}
    payload.update(overrides)
    return client.post("/api/tasks/", headers=headers, json=payload)


def test_create_assigned_task_notifies_employee(client, auth_headers, make_employee, db):
    worker = make_employee(name="Rosa Diaz", job_title="Cleaner")
    headers = auth_headers("employeeAdmin")

    resp = _create_task(client, headers, assigned_to="rosa diaz")
    assert resp.status_code == 201
    task = resp.json()
    assert task["task_code"] == "T1001"
    assert task["status"] == "NOT_STARTED"
    assert task["assigned_to"] == str(worker.id)
    assert task["employee_code"] == "0001"
    assert task["job_title"] == "Cleaner"
    assert task["estimated_duration"] == 30

    note = db.query(models.Notification).one()
    assert note.recipient_id == worker.id
    assert note.action == "assigned"
    assert note.priority == "high"

    second = _create_task(client, headers, assigned_to=str(worker.id)).json()
    assert second["task_code"] == "T1002"


def test_create_unassigned_task(client, auth_headers, db):
    task = _create_task(client, auth_headers("hotelAdmin"), type="MAINTENANCE").json()
    assert task["status"] == "UNASSIGNED"
    assert task["employee_code"] == "N/A"
    assert task["job_title"] == "Staff"
    assert db.query(models.Notification).count() == 0


def test_create_task_validation(client, auth_headers):
    headers = auth_headers("employeeAdmin")
    assert _create_task(client, headers, assigned_to="Nobody").status_code == 404
    assert _create_task(client, headers, type="LAUNDRY").status_code == 422
    assert _create_task(client, auth_headers("restaurantAdmin")).status_code == 403


def test_list_get_and_maintenance_filter(client, auth_headers):
    headers = auth_headers("hotelAdmin")
    cleaning = _create_task(client, headers).json()
    _create_task(client, headers, type="MAINTENANCE")

    assert len(client.get("/api/tasks/", headers=headers).json()) == 2
    assert [t["type"] for t in client.get("/api/tasks/maintenance", headers=headers).json()] == ["MAINTENANCE"]
    assert client.get(f"/api/tasks/{cleaning['id']}", headers=headers).json()["task_code"] == cleaning["task_code"]


def test_status_updates_drive_room_status(client, auth_headers, make_room, make_employee, employee_headers, db):
    room = make_room(room_number="501", status="checked-out")
    worker = make_employee(name="Sam")
    task = _create_task(client, auth_headers("employeeAdmin"), assigned_to="Sam").json()
    headers = employee_headers(worker)

    started = client.patch(f"/api/tasks/{task['id']}/status", headers=headers, json={"status": "IN_PROGRESS"})
    assert started.status_code == 200
    body = started.json()
    assert body["task"]["status"] == "IN_PROGRESS"
    assert body["task"]["prior_status"] == "checked-out"
    assert body["room_status_change"] == {"old_status": "checked-out", "new_status": "cleaning"}
    db.refresh(room)
    assert room.status == "cleaning"

    done = client.patch(f"/api/tasks/{task['id']}/status", headers=headers, json={"status": "COMPLETED"}).json()
    assert done["room_status_change"] == {"old_status": "cleaning", "new_status": "available"}

    log = db.query(models.ActivityLog).order_by(models.ActivityLog.timestamp.asc()).first()
    assert log.user == "Sam"
    actions = [n.action for n in db.query(models.Notification).all()]
    assert actions.count("status_changed") == 2

    # Repeating the current status is a no-op
    same = client.patch(f"/api/tasks/{task['id']}/status", headers=headers, json={"status": "COMPLETED"}).json()
    assert same["room_status_change"] is None


def test_completed_cleaning_returns_guest_room_to_occupied(client, auth_headers, make_room, db):
    room = make_room(room_number="502", status="occupied", guest_name="Guest")
    headers = auth_headers("hotelAdmin")
    task = _create_task(client, headers, room="502").json()
    client.patch(f"/api/tasks/{task['id']}/status", headers=headers, json={"status": "IN_PROGRESS"})
    client.patch(f"/api/tasks/{task['id']}/status", headers=headers, json={"status": "COMPLETED"})
    db.refresh(room)
    assert room.status == "occupied"


def test_employee_cannot_touch_others_tasks(client, auth_headers, make_employee, employee_headers):
    owner = make_employee(name="Owner")
    other = make_employee(name="Other")
    task = _create_task(client, auth_headers("employeeAdmin"), assigned_to="Owner").json()
    resp = client.patch(f"/api/tasks/{task['id']}/status", headers=employee_headers(other), json={"status": "IN_PROGRESS"})
    assert resp.status_code == 403
    note = client.post(f"/api/tasks/{task['id']}/notes", headers=employee_headers(other), json={"note": "hi"})
    assert note.status_code == 403
    assert client.get("/api/tasks/", headers=employee_headers(owner)).status_code == 200


def test_notes_and_delete(client, auth_headers):
    headers = auth_headers("hotelAdmin")
    task = _create_task(client, headers).json()

    noted = client.post(f"/api/tasks/{task['id']}/notes", headers=headers, json={"note": "Bring extra sheets"})
    assert noted.status_code == 200
    notes = noted.json()["notes"]
    assert notes[0]["note"] == "Bring extra sheets"
    assert notes[0]["added_by"]

    assert client.delete(f"/api/tasks/{task['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/tasks/{task['id']}", headers=headers).status_code == 404


def test_task_requests_share_code_sequence(client, auth_headers):
    headers = auth_headers("hotelAdmin")
    _create_task(client, headers)
    req = client.post("/api/requests/", headers=headers, json={"room_number": " 601 ", "job_type": "CLEANING"})
    assert req.status_code == 201
    assert req.json()["task_code"] == "T1002"
    assert req.json()["room_number"] == "601"
    assert req.json()["priority"] == "MEDIUM"

    assert _create_task(client, headers).json()["task_code"] == "T1003"
    assert len(client.get("/api/requests/", headers=headers).json()) == 1
    assert client.post("/api/requests/", json={"room_number": "1", "job_type": "X"}).status_code == 401


def test_create_task_conflict_when_no_code_can_be_claimed(client, auth_headers, monkeypatch):
    headers = auth_headers("hotelAdmin")
    assert _create_task(client, headers).json()["task_code"] == "T1001"
    monkeypatch.setattr(task_repo, "allocate_task_code", lambda db: "T1001")

    resp = _create_task(client, headers)
    assert resp.status_code == 409
    assert "task code" in resp.json()["detail"]
    assert len(client.get("/api/tasks/", headers=headers).json()) == 1
