"""
Guest to front desk messages.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import rooms as room_repo
from innkeeper.api.deps import require_roles, HOTEL_ROLES

router = APIRouter(tags=["contact"])


@router.post("/", status_code=status.HTTP_201_CREATED)
def send_message(payload: schemas.ContactMessageCreate, db: Session = Depends(get_db)):
    room_repo.create_contact_message(db, **payload.model_dump())
    return {"success": True}


@router.get("/", response_model=List[schemas.ContactMessage])
def list_messages(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    return room_repo.list_contact_messages(db)
