"""
Task and task request repository functions.
"""
from __future__ import annotations

import logging
import re
import uuid
from typing import Optional, List, Iterable
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from innkeeper.db import models

logger = logging.getLogger(__name__)

TASK_CODE_START = 1001
TASK_CODE_ATTEMPTS = 3
_CODE_RE = re.compile(r'^T(\d+)$')


class TaskCodeConflict(Exception):
    """Raised when a fresh task code could not be claimed."""


def next_task_code(existing: Iterable[str]) -> str:
    """Return the next ``T####`` code after the highest numeric code seen."""
    highest = TASK_CODE_START - 1
    for code in existing:
        match = _CODE_RE.match(code or '')
        if match:
            highest = max(highest, int(match.group(1)))
    return f"T{highest + 1}"


def allocate_task_code(db: Session) -> str:
    task_codes = [c for (c,) in db.query(models.Task.task_code).all()]
    request_codes = [c for (c,) in db.query(models.TaskRequest.task_code).all()]
    return next_task_code(task_codes + request_codes)


def _insert_with_task_code(db: Session, model, fields: dict):
    """Insert ``model(**fields)`` under a newly allocated task code.

    A concurrent writer can claim the same code between allocation and
    commit; the unique constraint rejects the loser, which reallocates.
    """
    for attempt in range(1, TASK_CODE_ATTEMPTS + 1):
        code = allocate_task_code(db)
        record = model(task_code=code, **fields)
        db.add(record)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning("Task code %s already taken (attempt %d)", code, attempt)
            continue
        db.refresh(record)
        return record
    raise TaskCodeConflict("Could not allocate a unique task code, please retry")


def list_tasks(db: Session, task_type: Optional[str] = None) -> List[models.Task]:
    query = db.query(models.Task)
    if task_type:
        query = query.filter(models.Task.type == task_type)
    return query.order_by(models.Task.created_at.desc()).all()


def get_task(db: Session, task_id: uuid.UUID) -> Optional[models.Task]:
    return db.get(models.Task, task_id)


def create_task(db: Session, **fields) -> models.Task:
    return _insert_with_task_code(db, models.Task, fields)


def delete_task(db: Session, task: models.Task) -> None:
    db.delete(task)
    db.commit()


def create_task_request(db: Session, **fields) -> models.TaskRequest:
    return _insert_with_task_code(db, models.TaskRequest, fields)


def list_task_requests(db: Session) -> List[models.TaskRequest]:
    return db.query(models.TaskRequest).order_by(models.TaskRequest.date.desc()).all()
