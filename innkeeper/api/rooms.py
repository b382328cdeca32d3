"""
Room endpoints: inventory, status changes and guest-facing room validation.
"""
import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import rooms as room_repo
from innkeeper.api.deps import require_roles, actor_name, ADMIN_ROLES, HOTEL_ROLES
from innkeeper.services import room_status_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rooms"])


@router.get("/", response_model=List[schemas.Room])
def list_rooms(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*ADMIN_ROLES)),
):
    return room_repo.list_rooms(db)


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.Room)
def create_room(
    payload: schemas.RoomCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    if room_repo.get_room_by_number(db, payload.room_number):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="A room with that number already exists.")
    room = room_repo.create_room(db, **payload.model_dump())
    logger.info("Added room %s (%s)", room.room_number, room.room_type)
    return room


@router.patch("/{room_id}", response_model=schemas.Room)
def update_room_status(
    room_id: uuid.UUID,
    payload: schemas.RoomStatusUpdate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    _account, current_user = user_context
    room = room_repo.get_room(db, room_id)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    room_status_service.set_room_status(db, room, payload.status, user=actor_name(current_user))
    return room


@router.post("/validate", response_model=schemas.RoomValidateResponse)
def validate_room(payload: schemas.RoomValidateRequest, db: Session = Depends(get_db)):
    """Guest login check: case-insensitive, trimmed room number match."""
    if not payload.room_number or not payload.room_number.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Room number required.")
    if room_repo.get_room_by_number(db, payload.room_number):
        return schemas.RoomValidateResponse(valid=True)
    return schemas.RoomValidateResponse(valid=False, error="Room not found.")
