"""
Hotel admin dashboard notifications (room and task status events).
"""
import logging
import uuid
from datetime import timedelta
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.models import as_utc, now_utc
from innkeeper.db.repositories import notifications as notif_repo
from innkeeper.api.deps import require_roles, ADMIN_ROLES, HOTEL_ROLES

logger = logging.getLogger(__name__)

router = APIRouter(tags=["hotel-admin-notifications"])

DUPLICATE_WINDOW = timedelta(seconds=10)


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.HotelAdminNotificationSaved)
def save_notification(
    payload: schemas.HotelAdminNotificationCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*ADMIN_ROLES)),
):
    """Store an event unless the same one was stored in the last 10 seconds."""
    existing = notif_repo.find_recent_duplicate(
        db,
        new_status=payload.new_status,
        since=now_utc() - DUPLICATE_WINDOW,
        booking_id=payload.booking_id,
        task_code=payload.task_code,
        room_number=payload.room_number,
    )
    if existing is not None:
        logger.debug("Skipping duplicate hotel admin notification %s", existing.id)
        saved = schemas.HotelAdminNotificationSaved(id=existing.id, skipped_duplicate=True)
        return JSONResponse(status_code=status.HTTP_200_OK, content=saved.model_dump(mode="json"))

    fields = payload.model_dump()
    fields["timestamp"] = as_utc(payload.timestamp) if payload.timestamp else now_utc()
    notif = notif_repo.create_hotel_admin_notification(db, raw=payload.model_dump(mode="json"), **fields)
    return schemas.HotelAdminNotificationSaved(id=notif.id)


@router.get("/", response_model=List[schemas.HotelAdminNotification])
def list_notifications(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    return notif_repo.list_hotel_admin_notifications(db, limit=25)


@router.patch("/{notif_id}/read", response_model=schemas.HotelAdminNotification)
def mark_read(
    notif_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*HOTEL_ROLES)),
):
    notif = notif_repo.get_hotel_admin_notification(db, notif_id)
    if notif is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    notif.read = True
    db.commit()
    db.refresh(notif)
    return notif
