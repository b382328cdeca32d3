"""
Staff notification endpoints.

Admins see every notification; an employee session sees only its own.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.api.deps import require_roles, TASK_ROLES
from innkeeper.services.notification_service import NotificationService

router = APIRouter(tags=["notifications"])


def _recipient_filter(current_user: dict):
    return current_user["id"] if current_user["kind"] == "employee" else None


@router.get("/", response_model=List[schemas.Notification])
def get_notifications(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    _account, current_user = user_context
    return NotificationService(db).get_notifications(_recipient_filter(current_user), limit=50)


@router.get("/unread-count", response_model=schemas.UnreadCount)
def unread_count(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    _account, current_user = user_context
    return schemas.UnreadCount(count=NotificationService(db).get_unread_count(_recipient_filter(current_user)))


@router.patch("/mark-all-read", response_model=schemas.MessageResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    _account, current_user = user_context
    NotificationService(db).mark_all_read(_recipient_filter(current_user))
    return schemas.MessageResponse(message="All notifications marked as read")


@router.patch("/{notification_id}/read", response_model=schemas.Notification)
def mark_notification_read(
    notification_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    _account, current_user = user_context
    notification = NotificationService(db).mark_notification_read(notification_id, _recipient_filter(current_user))
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return notification
