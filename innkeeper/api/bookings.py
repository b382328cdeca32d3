"""
Room booking endpoints.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import rooms as room_repo
from innkeeper.api.deps import require_roles, actor_name, HOTEL_ROLES
from innkeeper.services import room_status_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bookings"])


@router.get("/", response_model=List[schemas.Booking])
def list_bookings(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    return room_repo.list_bookings(db)


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.Booking)
def create_booking(
    payload: schemas.BookingCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    _account, current_user = user_context
    room = room_repo.get_room(db, payload.room_id)
    if room is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    if room.status != "available":
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Room {room.room_number} is {room.status}.")
    booking = room_repo.create_booking(db, **payload.model_dump())
    room_status_service.set_room_status(db, room, "booked", user=actor_name(current_user))
    logger.info("Booked room %s for %s", room.room_number, booking.customer_name)
    return booking
