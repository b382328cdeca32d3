"""
Attendance repository functions.
"""
from __future__ import annotations

import uuid
from typing import Optional, List
from sqlalchemy.orm import Session

from innkeeper.db import models


def get_open_session(db: Session, employee_id: uuid.UUID) -> Optional[models.Attendance]:
    return (
        db.query(models.Attendance)
        .filter(models.Attendance.employee_id == employee_id)
        .filter(models.Attendance.clock_out.is_(None))
        .order_by(models.Attendance.clock_in.desc())
        .first()
    )


def create_attendance(db: Session, **fields) -> models.Attendance:
    record = models.Attendance(**fields)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def list_attendance(db: Session, employee_id: Optional[uuid.UUID] = None, date: Optional[str] = None) -> List[models.Attendance]:
    query = db.query(models.Attendance)
    if employee_id:
        query = query.filter(models.Attendance.employee_id == employee_id)
    if date:
        query = query.filter(models.Attendance.date == date)
    return query.order_by(models.Attendance.clock_in.desc()).all()


def list_completed(db: Session) -> List[models.Attendance]:
    return (
        db.query(models.Attendance)
        .filter(models.Attendance.total_hours.isnot(None))
        .order_by(models.Attendance.clock_in.asc())
        .all()
    )
