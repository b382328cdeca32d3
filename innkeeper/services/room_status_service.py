"""
Room status transitions driven by housekeeping/maintenance tasks and checkout.

Every real change is persisted and written to the activity log.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from sqlalchemy.orm import Session

from innkeeper import activity
from innkeeper.db import models
from innkeeper.db.repositories import rooms as room_repo

logger = logging.getLogger(__name__)

_IN_PROGRESS_STATUS = {
    "CLEANING": "cleaning",
    "MAINTENANCE": "maintenance",
}


def _apply(db: Session, room: models.Room, new_status: str, *, user: Optional[str] = None) -> Dict[str, str]:
    old_status = room.status
    room.status = new_status
    db.commit()
    db.refresh(room)
    activity.log_room_status_change(
        db,
        room_id=room.id,
        room_number=room.room_number,
        old_value=old_status,
        new_value=new_status,
        user=user,
    )
    return {"old_status": old_status, "new_status": new_status}


def compute_status_for_task(task_type: str, task_status: str, room_status: str, has_guest: bool) -> Optional[str]:
    """Return the room status a task transition implies, or None for no change."""
    if task_status == "IN_PROGRESS":
        return _IN_PROGRESS_STATUS.get((task_type or "").upper())
    if task_status == "COMPLETED":
        if room_status == "checked-out":
            return "available"
        if room_status in ("cleaning", "maintenance"):
            return "occupied" if has_guest else "available"
    return None


def update_room_status_on_task_change(db: Session, task: models.Task, new_task_status: str, *, user: Optional[str] = None) -> Optional[Dict[str, str]]:
    room = room_repo.get_room_by_number(db, task.room)
    if room is None:
        logger.warning("Room %r not found for task %s status update", task.room, task.task_code)
        return None

    new_status = compute_status_for_task(task.type, new_task_status, room.status, bool(room.guest_name))
    if not new_status or new_status == room.status:
        logger.debug("No room status change for %s (status %s, task %s -> %s)",
                     room.room_number, room.status, task.task_code, new_task_status)
        return None

    logger.info("Room %s status: %s -> %s (task %s -> %s)",
                room.room_number, room.status, new_status, task.task_code, new_task_status)
    return _apply(db, room, new_status, user=user)


def set_room_checked_out(db: Session, room_number: str, *, user: Optional[str] = None) -> Optional[Dict[str, str]]:
    room = room_repo.get_room_by_number(db, room_number)
    if room is None:
        logger.warning("Room %r not found for checkout", room_number)
        return None
    return _apply(db, room, "checked-out", user=user)


def set_room_occupied(db: Session, room_number: str, *, user: Optional[str] = None) -> Optional[Dict[str, str]]:
    room = room_repo.get_room_by_number(db, room_number)
    if room is None:
        logger.warning("Room %r not found", room_number)
        return None
    if room.status == "occupied":
        return None
    return _apply(db, room, "occupied", user=user)


def set_room_status(db: Session, room: models.Room, new_status: str, *, user: Optional[str] = None) -> Optional[Dict[str, str]]:
    if room.status == new_status:
        return None
    return _apply(db, room, new_status, user=user)


def get_prior_room_status(db: Session, room_number: str) -> str:
    room = room_repo.get_room_by_number(db, room_number)
    return room.status if room is not None else "available"
