"""
Notification service: staff notifications for task and request events.
Centralizes creation and read-state handling so routes stay thin.
"""

import logging
import uuid
from typing import Optional, List

from sqlalchemy.orm import Session

from innkeeper.db import models

logger = logging.getLogger(__name__)

TYPE_TASK_REQUEST = 'task_request'
TYPE_TASK_UPDATE = 'task_update'
TYPE_REQUEST_UPDATE = 'request_update'

_PRIORITY_BY_TASK = {'LOW': 'low', 'MEDIUM': 'medium', 'HIGH': 'high'}


class NotificationService:
    """Service class for staff notification operations."""

    def __init__(self, db: Session):
        self.db = db

    def create_notification(
        self,
        *,
        recipient_id: uuid.UUID,
        recipient_model: str,
        type: str,
        title: str,
        message: str,
        related_id: uuid.UUID,
        related_model: str,
        priority: str = 'medium',
        action: Optional[str] = None,
        task_code: Optional[str] = None,
        room: Optional[str] = None,
        task_type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> models.Notification:
        notification = models.Notification(
            recipient_id=recipient_id,
            recipient_model=recipient_model,
            type=type,
            title=title,
            message=message,
            related_id=related_id,
            related_model=related_model,
            priority=priority,
            action=action,
            task_code=task_code,
            room=room,
            task_type=task_type,
            status=status,
        )
        self.db.add(notification)
        self.db.commit()
        self.db.refresh(notification)
        return notification

    def notify_task_assigned(self, task: models.Task) -> Optional[models.Notification]:
        """Tell the assignee about a new task; no-op for unassigned tasks."""
        if task.assigned_to is None:
            return None
        return self.create_notification(
            recipient_id=task.assigned_to,
            recipient_model='Employee',
            type=TYPE_TASK_REQUEST,
            title=f"New {task.type.lower()} task {task.task_code}",
            message=f"You have been assigned {task.type.lower()} for room {task.room}.",
            related_id=task.id,
            related_model='Task',
            priority=_PRIORITY_BY_TASK.get(task.priority, 'medium'),
            action='assigned',
            task_code=task.task_code,
            room=task.room,
            task_type=task.type,
            status=task.status,
        )

    def notify_task_status_changed(self, task: models.Task, old_status: str) -> Optional[models.Notification]:
        if task.assigned_to is None:
            return None
        return self.create_notification(
            recipient_id=task.assigned_to,
            recipient_model='Employee',
            type=TYPE_TASK_UPDATE,
            title=f"Task {task.task_code} updated",
            message=f"Task {task.task_code} for room {task.room} moved from {old_status} to {task.status}.",
            related_id=task.id,
            related_model='Task',
            priority=_PRIORITY_BY_TASK.get(task.priority, 'medium'),
            action='status_changed',
            task_code=task.task_code,
            room=task.room,
            task_type=task.type,
            status=task.status,
        )

    def get_notifications(self, recipient_id: Optional[uuid.UUID] = None, limit: int = 50) -> List[models.Notification]:
        """Newest first; all recipients when ``recipient_id`` is None."""
        query = self.db.query(models.Notification)
        if recipient_id is not None:
            query = query.filter(models.Notification.recipient_id == recipient_id)
        return query.order_by(models.Notification.created_at.desc()).limit(limit).all()

    def mark_notification_read(self, notification_id: uuid.UUID, recipient_id: Optional[uuid.UUID] = None) -> Optional[models.Notification]:
        """Mark one notification read; None if missing or not owned by ``recipient_id``."""
        notification = self.db.get(models.Notification, notification_id)
        if notification is None:
            return None
        if recipient_id is not None and notification.recipient_id != recipient_id:
            return None
        notification.is_read = True
        self.db.commit()
        self.db.refresh(notification)
        return notification

    def mark_all_read(self, recipient_id: Optional[uuid.UUID] = None) -> int:
        query = self.db.query(models.Notification).filter(models.Notification.is_read.is_(False))
        if recipient_id is not None:
            query = query.filter(models.Notification.recipient_id == recipient_id)
        count = query.update({models.Notification.is_read: True}, synchronize_session=False)
        self.db.commit()
        return count

    def get_unread_count(self, recipient_id: Optional[uuid.UUID] = None) -> int:
        query = self.db.query(models.Notification).filter(models.Notification.is_read.is_(False))
        if recipient_id is not None:
            query = query.filter(models.Notification.recipient_id == recipient_id)
        return query.count()
