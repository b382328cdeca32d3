"""
Room status transitions implied by task status changes.
"""
import pytest

from innkeeper.db import models
from innkeeper.services import room_status_service
from innkeeper.services.room_status_service import compute_status_for_task


@pytest.mark.parametrize(
    "task_type, room_status, expected",
    [
        ("CLEANING", "checked-out", "cleaning"),
        ("MAINTENANCE", "occupied", "maintenance"),
        ("cleaning", "available", "cleaning"),
        ("INSPECTION", "occupied", None),
    ],
)
def test_in_progress(task_type, room_status, expected):
    assert compute_status_for_task(task_type, "IN_PROGRESS", room_status, has_guest=False) == expected


@pytest.mark.parametrize(
    "room_status, has_guest, expected",
    [
        ("checked-out", True, "available"),
        ("checked-out", False, "available"),
        ("cleaning", True, "occupied"),
        ("cleaning", False, "available"),
        ("maintenance", True, "occupied"),
        ("maintenance", False, "available"),
        ("booked", False, None),
    ],
)
def test_completed(room_status, has_guest, expected):
    assert compute_status_for_task("CLEANING", "COMPLETED", room_status, has_guest) == expected


def test_other_statuses_do_not_change_room():
    assert compute_status_for_task("CLEANING", "NOT_STARTED", "occupied", True) is None
    assert compute_status_for_task("CLEANING", "UNASSIGNED", "occupied", True) is None


def test_update_on_task_change_logs_activity(db, make_room):
    room = make_room(room_number="204", status="checked-out")
    task = models.Task(task_code="T1001", room=" 204 ", type="CLEANING", priority="LOW")
    db.add(task)
    db.commit()

    change = room_status_service.update_room_status_on_task_change(db, task, "IN_PROGRESS", user="Ana")
    assert change == {"old_status": "checked-out", "new_status": "cleaning"}
    db.refresh(room)
    assert room.status == "cleaning"

    log = db.query(models.ActivityLog).one()
    assert log.collection == "rooms"
    assert log.document_id == room.id
    assert log.user == "Ana"
    assert log.change == {"field": "status", "old_value": "checked-out", "new_value": "cleaning"}


def test_update_on_task_change_missing_room_or_no_change(db, make_room):
    task = models.Task(task_code="T1002", room="999", type="CLEANING", priority="LOW")
    assert room_status_service.update_room_status_on_task_change(db, task, "IN_PROGRESS") is None

    make_room(room_number="300", status="cleaning")
    task.room = "300"
    assert room_status_service.update_room_status_on_task_change(db, task, "IN_PROGRESS") is None
    assert db.query(models.ActivityLog).count() == 0


def test_helpers(db, make_room):
    make_room(room_number="A1", status="occupied")
    assert room_status_service.get_prior_room_status(db, "a1") == "occupied"
    assert room_status_service.get_prior_room_status(db, "nope") == "available"
    assert room_status_service.set_room_occupied(db, "A1") is None
    assert room_status_service.set_room_checked_out(db, "A1") == {"old_status": "occupied", "new_status": "checked-out"}
    assert room_status_service.set_room_occupied(db, "A1") == {"old_status": "checked-out", "new_status": "occupied"}
    assert room_status_service.set_room_checked_out(db, "missing") is None
