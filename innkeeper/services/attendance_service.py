"""
Badge tap attendance: one tap clocks in, the next tap clocks out.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from innkeeper.db import models
from innkeeper.db.models import as_utc, now_utc
from innkeeper.db.repositories import attendance as attendance_repo
from innkeeper.db.repositories import users as user_repo
from innkeeper.utils.ids import pad_employee_number, parse_employee_number

logger = logging.getLogger(__name__)


def find_employee(db: Session, identifier: str) -> Optional[models.Employee]:
    """Resolve a tapped identifier: card id first, then employee number."""
    identifier = (identifier or "").strip()
    if not identifier:
        return None
    employee = user_repo.get_employee_by_card(db, identifier)
    if employee is None:
        number = parse_employee_number(identifier)
        if number is not None:
            employee = user_repo.get_employee_by_number(db, number)
    return employee


def hours_between(start: datetime, end: datetime) -> float:
    return (as_utc(end) - as_utc(start)).total_seconds() / 3600


def tap(db: Session, employee: models.Employee, at: Optional[datetime] = None) -> Tuple[str, models.Attendance]:
    """Toggle the employee's session; returns ("Clocked in"|"Clocked out", record)."""
    at = at or now_utc()
    session = attendance_repo.get_open_session(db, employee.id)
    if session is None:
        record = attendance_repo.create_attendance(
            db,
            employee_id=employee.id,
            card_id=employee.card_id or pad_employee_number(employee.employee_number),
            name=employee.name,
            clock_in=at,
            date=as_utc(at).date().isoformat(),
        )
        logger.info("%s clocked in", employee.name)
        return "Clocked in", record

    session.clock_out = at
    session.total_hours = hours_between(session.clock_in, at)
    db.commit()
    db.refresh(session)
    logger.info("%s clocked out after %.2f h", employee.name, session.total_hours)
    return "Clocked out", session
