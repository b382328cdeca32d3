"""
Activity log endpoints for the hotel dashboard.
"""
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import activity as activity_repo
from innkeeper.db.repositories import rooms as room_repo
from innkeeper.api.deps import require_roles, HOTEL_ROLES

router = APIRouter(tags=["activity-logs"])


@router.get("/", response_model=List[schemas.ActivityLog])
def list_activity_logs(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    return activity_repo.get_activity_logs(db, limit=100)


@router.get("/rooms/number/{room_number}", response_model=List[schemas.ActivityLog])
def room_logs_by_number(
    room_number: str,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    room = room_repo.get_room_by_number(db, room_number)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return activity_repo.get_logs_for_document(db, "rooms", room.id)


@router.get("/rooms/{room_id}", response_model=List[schemas.ActivityLog])
def room_logs(
    room_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    return activity_repo.get_logs_for_document(db, "rooms", room_id)
