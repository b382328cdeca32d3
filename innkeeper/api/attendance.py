"""
Attendance kiosk and payroll endpoints.
"""
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import schemas
from innkeeper.db.repositories import attendance as attendance_repo
from innkeeper.api.deps import require_roles, STAFF_ADMIN_ROLES
from innkeeper.services import attendance_service, payroll_service

router = APIRouter(tags=["attendance"])
payroll_router = APIRouter(tags=["payroll"])


@router.post("/tap", response_model=schemas.AttendanceTapResult)
def tap(payload: schemas.AttendanceTap, db: Session = Depends(get_db)):
    employee = attendance_service.find_employee(db, payload.employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    message, record = attendance_service.tap(db, employee)
    return schemas.AttendanceTapResult(message=message, employee=employee.name, data=record)


@router.get("/", response_model=List[schemas.Attendance])
def list_attendance(
    employee_id: Optional[uuid.UUID] = None,
    date: Optional[str] = None,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    return attendance_repo.list_attendance(db, employee_id=employee_id, date=date)


@payroll_router.get("/", response_model=schemas.PayrollResponse)
def payroll(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    return payroll_service.build_payroll(db)


@payroll_router.get("/export", response_class=PlainTextResponse)
def export_payroll(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    report = payroll_service.build_payroll(db)
    return PlainTextResponse(
        payroll_service.payroll_csv(report["entries"]),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="payroll.csv"'},
    )
