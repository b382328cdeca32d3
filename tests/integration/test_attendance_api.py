from datetime import datetime, timedelta, timezone

from innkeeper.db import models
from innkeeper.services import attendance_service


def test_tap_toggles_clock_in_and_out(client, make_employee, db):
    worker = make_employee(name="Kai", card_id="CARD-77")

    first = client.post("/api/attendance/tap", json={"employee_id": "CARD-77"})
    assert first.status_code == 200
    assert first.json()["message"] == "Clocked in"
    assert first.json()["employee"] == "Kai"
    assert first.json()["data"]["clock_out"] is None

    second = client.post("/api/attendance/tap", json={"employee_id": f"{worker.employee_number:04d}"})
    assert second.json()["message"] == "Clocked out"
    assert second.json()["data"]["total_hours"] is not None
    assert second.json()["data"]["id"] == first.json()["data"]["id"]

    assert client.post("/api/attendance/tap", json={"employee_id": "nobody"}).status_code == 404
    assert db.query(models.Attendance).count() == 1


def test_tap_service_computes_hours_and_card_fallback(db, make_employee):
    worker = make_employee(name="Lee")
    start = datetime(2025, 4, 1, 8, 0, tzinfo=timezone.utc)

    message, record = attendance_service.tap(db, worker, at=start)
    assert message == "Clocked in"
    assert record.card_id == "0001"
    assert record.date == "2025-04-01"

    message, record = attendance_service.tap(db, worker, at=start + timedelta(hours=7, minutes=30))
    assert message == "Clocked out"
    assert record.total_hours == 7.5


def test_find_employee_prefers_card_id(db, make_employee):
    by_number = make_employee(name="Number Seven", employee_number=7)
    by_card = make_employee(name="Card Holder", card_id="7")
    assert attendance_service.find_employee(db, "7").id == by_card.id
    assert attendance_service.find_employee(db, "0007").id == by_number.id
    assert attendance_service.find_employee(db, " ") is None


def test_attendance_list_and_payroll(client, auth_headers, make_employee, db, monkeypatch):
    ana = make_employee(name="Ana")
    ben = make_employee(name="Ben")
    start = datetime(2025, 4, 1, 9, 0, tzinfo=timezone.utc)
    attendance_service.tap(db, ana, at=start)
    attendance_service.tap(db, ana, at=start + timedelta(hours=8))
    attendance_service.tap(db, ben, at=start)
    attendance_service.tap(db, ben, at=start + timedelta(hours=4, minutes=15))
    attendance_service.tap(db, ben, at=start + timedelta(hours=5))  # still open

    headers = auth_headers("employeeAdmin")
    rows = client.get("/api/attendance/", headers=headers).json()
    assert len(rows) == 3
    assert len(client.get(f"/api/attendance/?employee_id={ben.id}", headers=headers).json()) == 2
    assert client.get("/api/attendance/", headers=auth_headers("restaurantAdmin")).status_code == 403

    payroll = client.get("/api/payroll/", headers=headers).json()
    assert payroll["rate"] == 95.0
    assert [(e["name"], e["total_hours"], e["total_pay"]) for e in payroll["entries"]] == [
        ("Ana", 8.0, 760.0),
        ("Ben", 4.25, 403.75),
    ]
    assert payroll["total_payout"] == 1163.75

    monkeypatch.setenv("PAYROLL_HOURLY_RATE", "100")
    export = client.get("/api/payroll/export", headers=headers)
    assert export.status_code == 200
    assert export.headers["content-type"].startswith("text/csv")
    lines = export.text.splitlines()
    assert lines[0] == "employee_number,name,card_id,total_hours,rate,total_pay,status"
    assert lines[1] == "1,Ana,0001,8.0,100.0,800.0,Unpaid"
