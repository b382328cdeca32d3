"""
Activity log helpers and enums.

Centralized helpers that persist normalized activity records; room status
changes are the main producer.
"""
from __future__ import annotations
import uuid
from enum import Enum
from typing import Any, Optional, Dict
from sqlalchemy.orm import Session

from innkeeper.db import schemas
from innkeeper.db.repositories import activity as activity_repo


class ActivityAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    CHECKOUT = "checkout"
    TASK_UPDATE = "task_update"


def log(
    db: Session,
    *,
    action: ActivityAction | str,
    collection: str,
    document_id: uuid.UUID,
    user: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    change: Optional[Dict[str, Any]] = None,
):
    """Persist one activity record."""
    # Store plain strings, not Enum reprs
    action_value = action.value if isinstance(action, ActivityAction) else str(action)
    entry = schemas.ActivityLogCreate(
        action_type=action_value,
        collection=collection,
        document_id=document_id,
        user=user,
        details=details or {},
        change=change,
    )
    return activity_repo.create_activity_log(db, entry)


def log_room_status_change(
    db: Session,
    *,
    room_id: uuid.UUID,
    room_number: str,
    old_value: Optional[str],
    new_value: str,
    action: ActivityAction | str = ActivityAction.UPDATE,
    user: Optional[str] = None,
):
    return log(
        db,
        action=action,
        collection="rooms",
        document_id=room_id,
        user=user,
        details={"room_number": room_number, "status": new_value},
        change={"field": "status", "old_value": old_value, "new_value": new_value},
    )


__all__ = ["ActivityAction", "log", "log_room_status_change"]
