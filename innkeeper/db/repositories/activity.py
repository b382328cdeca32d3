"""
Activity log repository functions.
"""
from __future__ import annotations

import uuid
from typing import List
from sqlalchemy.orm import Session

from innkeeper.db import schemas, models


def create_activity_log(db: Session, entry: schemas.ActivityLogCreate) -> models.ActivityLog:
    db_entry = models.ActivityLog(**entry.model_dump())
    db.add(db_entry)
    db.commit()
    db.refresh(db_entry)
    return db_entry


def get_activity_logs(db: Session, limit: int = 100) -> List[models.ActivityLog]:
    return (
        db.query(models.ActivityLog)
        .order_by(models.ActivityLog.timestamp.desc())
        .limit(limit)
        .all()
    )


def get_logs_for_document(db: Session, collection: str, document_id: uuid.UUID) -> List[models.ActivityLog]:
    return (
        db.query(models.ActivityLog)
        .filter(models.ActivityLog.collection == collection)
        .filter(models.ActivityLog.document_id == document_id)
        .order_by(models.ActivityLog.timestamp.desc())
        .all()
    )
