"""
Housekeeping and maintenance task endpoints.

Task status changes drive room status (see ``room_status_service``) and notify
the assigned employee.
"""
import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import models, schemas
from innkeeper.db.repositories import tasks as task_repo
from innkeeper.db.repositories import users as user_repo
from innkeeper.api.deps import require_roles, actor_name, STAFF_ADMIN_ROLES, TASK_ROLES
from innkeeper.services import room_status_service
from innkeeper.services.notification_service import NotificationService
from innkeeper.utils.ids import pad_employee_number

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


def _resolve_assignee(db: Session, value: Optional[str]) -> Optional[models.Employee]:
    if not value or not value.strip():
        return None
    try:
        employee = user_repo.get_employee(db, uuid.UUID(value.strip()))
    except ValueError:
        employee = user_repo.get_employee_by_name(db, value)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


def _get_task_or_404(db: Session, task_id: uuid.UUID) -> models.Task:
    task = task_repo.get_task(db, task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


def _ensure_can_touch(task: models.Task, current_user: dict) -> None:
    # Employees may only act on their own tasks
    if current_user["kind"] == "employee" and task.assigned_to != current_user["id"]:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Task is assigned to someone else")


@router.get("/", response_model=List[schemas.Task])
def list_tasks(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    return task_repo.list_tasks(db)


@router.get("/maintenance", response_model=List[schemas.Task])
def list_maintenance_tasks(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    return task_repo.list_tasks(db, task_type="MAINTENANCE")


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.Task)
def create_task(
    payload: schemas.TaskCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    assignee = _resolve_assignee(db, payload.assigned_to)
    fields = dict(
        assigned_to=assignee.id if assignee else None,
        employee_code=(assignee.employee_code or pad_employee_number(assignee.employee_number)) if assignee else "N/A",
        room=payload.room.strip(),
        type=payload.type,
        status="NOT_STARTED" if assignee else "UNASSIGNED",
        priority=payload.priority,
        description=payload.description,
        job_title=payload.job_title or (assignee.job_title if assignee else None) or "Staff",
        estimated_duration=payload.estimated_duration,
        created_by=payload.created_by,
    )
    if payload.due_date is not None:
        fields["due_date"] = payload.due_date
    try:
        task = task_repo.create_task(db, **fields)
    except task_repo.TaskCodeConflict as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    logger.info("Created task %s (%s, room %s)", task.task_code, task.type, task.room)

    try:
        NotificationService(db).notify_task_assigned(task)
    except Exception as e:
        logger.warning("Failed to notify assignee for task %s: %s", task.task_code, e)
    return task


@router.get("/{task_id}", response_model=schemas.Task)
def get_task(
    task_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    return _get_task_or_404(db, task_id)


@router.patch("/{task_id}/status", response_model=schemas.TaskStatusResult)
def update_task_status(
    task_id: uuid.UUID,
    payload: schemas.TaskStatusUpdate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    _account, current_user = user_context
    task = _get_task_or_404(db, task_id)
    _ensure_can_touch(task, current_user)

    old_status = task.status
    if old_status == payload.status:
        return schemas.TaskStatusResult(task=task)

    if payload.status == "IN_PROGRESS" and task.prior_status is None:
        task.prior_status = room_status_service.get_prior_room_status(db, task.room)
    room_change = room_status_service.update_room_status_on_task_change(
        db, task, payload.status, user=payload.updated_by or actor_name(current_user)
    )
    task.status = payload.status
    db.commit()
    db.refresh(task)
    logger.info("Task %s: %s -> %s", task.task_code, old_status, task.status)

    try:
        NotificationService(db).notify_task_status_changed(task, old_status)
    except Exception as e:
        logger.warning("Failed to notify status change for task %s: %s", task.task_code, e)
    return schemas.TaskStatusResult(task=task, room_status_change=room_change)


@router.post("/{task_id}/notes", response_model=schemas.Task)
def add_note(
    task_id: uuid.UUID,
    payload: schemas.TaskNoteCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    _account, current_user = user_context
    task = _get_task_or_404(db, task_id)
    _ensure_can_touch(task, current_user)
    note = {
        "note": payload.note,
        "added_at": models.now_utc().isoformat(),
        "added_by": payload.added_by or actor_name(current_user),
    }
    task.notes = list(task.notes or []) + [note]
    db.commit()
    db.refresh(task)
    return task


@router.delete("/{task_id}", response_model=schemas.MessageResponse)
def delete_task(
    task_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    task = _get_task_or_404(db, task_id)
    task_repo.delete_task(db, task)
    return schemas.MessageResponse(message="Task deleted")
