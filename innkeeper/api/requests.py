"""
Task request endpoints: guests or front desk ask for a job on a room.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import tasks as task_repo
from innkeeper.api.deps import require_roles, ADMIN_ROLES, TASK_ROLES

router = APIRouter(tags=["requests"])


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.TaskRequest)
def create_request(
    payload: schemas.TaskRequestCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*ADMIN_ROLES)),
):
    data = payload.model_dump(exclude_none=True)
    data["room_number"] = data["room_number"].strip()
    try:
        return task_repo.create_task_request(db, **data)
    except task_repo.TaskCodeConflict as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/", response_model=List[schemas.TaskRequest])
def list_requests(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*TASK_ROLES)),
):
    return task_repo.list_task_requests(db)
