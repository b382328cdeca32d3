"""
Amenity reservation endpoints (spa, pool, dining tables, ...).
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import rooms as room_repo
from innkeeper.api.deps import require_roles, HOTEL_ROLES

router = APIRouter(tags=["reservations"])


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.MessageResponse)
def create_reservation(payload: schemas.ReservationCreate, db: Session = Depends(get_db)):
    room_repo.create_reservation(db, **payload.model_dump())
    return schemas.MessageResponse(message="Reservation created successfully.")


@router.get("/", response_model=List[schemas.Reservation])
def list_reservations(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    return room_repo.list_reservations(db)
