"""
Hotel admin notification repository functions.

Staff notifications go through ``innkeeper.services.notification_service``.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional, List
from sqlalchemy.orm import Session

from innkeeper.db import models


def find_recent_duplicate(
    db: Session,
    *,
    new_status: Optional[str],
    since: datetime,
    booking_id: Optional[str] = None,
    task_code: Optional[str] = None,
    room_number: Optional[str] = None,
) -> Optional[models.HotelAdminNotification]:
    Notif = models.HotelAdminNotification
    query = db.query(Notif).filter(Notif.timestamp >= since)
    if new_status is None:
        query = query.filter(Notif.new_status.is_(None))
    else:
        query = query.filter(Notif.new_status == new_status)
    if booking_id:
        query = query.filter(Notif.booking_id == booking_id)
    if task_code:
        query = query.filter(Notif.task_code == task_code)
    if not booking_id and not task_code and room_number:
        query = query.filter(Notif.room_number == room_number)
    return query.first()


def create_hotel_admin_notification(db: Session, **fields) -> models.HotelAdminNotification:
    notif = models.HotelAdminNotification(**fields)
    db.add(notif)
    db.commit()
    db.refresh(notif)
    return notif


def list_hotel_admin_notifications(db: Session, limit: int = 25) -> List[models.HotelAdminNotification]:
    return (
        db.query(models.HotelAdminNotification)
        .order_by(models.HotelAdminNotification.timestamp.desc())
        .limit(limit)
        .all()
    )


def get_hotel_admin_notification(db: Session, notif_id: uuid.UUID) -> Optional[models.HotelAdminNotification]:
    return db.get(models.HotelAdminNotification, notif_id)
