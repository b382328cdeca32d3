"""
Employee endpoints: staff login and self-service profile, plus the employee
admin's directory management (numbering, creation with credential email,
deletion).
"""
import logging
import uuid
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from innkeeper.db.database import get_db
from innkeeper.db import models, schemas
from innkeeper.db.repositories import users as user_repo
from innkeeper.api.deps import get_current_employee, require_roles, ADMIN_ROLES, STAFF_ADMIN_ROLES
from innkeeper.services import email_service
from innkeeper.utils.ids import pad_employee_number, parse_employee_number
from innkeeper.utils.passwords import hash_password, verify_password
from innkeeper.utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])

MIN_PASSWORD_LENGTH = 6
EMPLOYEE_TOKEN_MINUTES = 7 * 24 * 60


def _next_number(db: Session) -> int:
    current = user_repo.max_employee_number(db)
    return (current or 0) + 1


@router.post("/login", response_model=schemas.EmployeeLoginResponse)
def login(payload: schemas.LoginRequest, db: Session = Depends(get_db)):
    """Log in by email or username; inactive employees are rejected."""
    employee = user_repo.get_active_employee_for_login(db, payload.email.strip())
    if employee is None or not verify_password(payload.password, employee.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token(
        subject=str(employee.id),
        role=employee.role or "employee",
        kind="employee",
        expires_minutes=EMPLOYEE_TOKEN_MINUTES,
        extra={"username": employee.username, "name": employee.name},
    )
    return schemas.EmployeeLoginResponse(token=token, employee=employee)


@router.get("/profile", response_model=schemas.Employee)
def get_profile(employee: models.Employee = Depends(get_current_employee)):
    return employee


@router.put("/profile", response_model=schemas.Employee)
def update_profile(
    payload: schemas.EmployeeProfileUpdate,
    db: Session = Depends(get_db),
    employee: models.Employee = Depends(get_current_employee),
):
    # Blank values leave the field unchanged
    changes = {k: v for k, v in payload.model_dump().items() if v}
    return user_repo.update_employee(db, employee, **changes)


@router.put("/change-password", response_model=schemas.MessageResponse)
def change_password(
    payload: schemas.PasswordChange,
    db: Session = Depends(get_db),
    employee: models.Employee = Depends(get_current_employee),
):
    if len(payload.new_password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"New password must be at least {MIN_PASSWORD_LENGTH} characters long",
        )
    if not verify_password(payload.current_password, employee.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Current password is incorrect")
    user_repo.update_employee(db, employee, password_hash=hash_password(payload.new_password))
    return schemas.MessageResponse(message="Password changed successfully")


@router.get("/dashboard")
def dashboard(employee: models.Employee = Depends(get_current_employee)):
    return {
        "message": "Welcome to your dashboard",
        "employee": schemas.Employee.model_validate(employee),
        "dashboard_data": {
            "upcoming_shifts": [],
            "recent_activities": [],
            "announcements": [],
        },
    }


@router.get("/", response_model=List[schemas.Employee])
def list_employees(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*ADMIN_ROLES)),
):
    return user_repo.list_employees(db)


@router.get("/next-employee-id", response_model=schemas.NextEmployeeNumber)
def next_employee_id(
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    number = _next_number(db)
    return schemas.NextEmployeeNumber(number=number, padded=pad_employee_number(number), raw=str(number))


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=schemas.EmployeeCreated)
def create_employee(
    payload: schemas.EmployeeCreate,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    name = payload.resolved_name()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name is required")

    number = payload.employee_number if payload.employee_number is not None else _next_number(db)
    if user_repo.get_employee_by_number(db, number):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Employee number {number} already exists.")
    if payload.card_id and user_repo.get_employee_by_card(db, payload.card_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="An employee with that card_id already exists.")

    department = (payload.department or "").strip() or "General"
    try:
        employee = user_repo.create_employee(
            db,
            employee_number=number,
            employee_code=payload.employee_code,
            username=payload.username,
            name=name,
            email=payload.email,
            password_hash=hash_password(payload.password) if payload.password else None,
            role=payload.role or "employee",
            department=department,
            job_title=payload.job_title,
            contact_number=payload.contact_number,
            status=payload.status or "active",
            date_hired=payload.date_hired,
            shift=payload.shift,
            notes=payload.notes,
            card_id=payload.card_id,
        )
    except IntegrityError:
        # Another request claimed the number or card between the checks and the insert
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Employee number {number} or card_id is already in use.",
        )
    logger.info("Created employee %s (%s)", employee.employee_number, employee.name)

    email_sent = False
    email_error = None
    if payload.email:
        try:
            result = email_service.send_employee_credentials_sync(
                email=payload.email,
                name=name,
                username=payload.username or name,
                password=payload.password,
                employee_id=payload.employee_code or pad_employee_number(number),
            )
            email_sent = bool(result.get("success"))
            email_error = result.get("error") if not email_sent else None
        except Exception as e:
            email_error = str(e)
        if not email_sent:
            logger.warning("Employee %s created but credentials email failed: %s", number, email_error)

    return schemas.EmployeeCreated(
        id=employee.id,
        employee_number=employee.employee_number,
        email_sent=email_sent,
        email_error=email_error,
    )


@router.delete("/{identifier}", response_model=schemas.MessageResponse)
def delete_employee(
    identifier: str,
    db: Session = Depends(get_db),
    user_context=Depends(require_roles(*STAFF_ADMIN_ROLES)),
):
    """Delete by record id, employee code or employee number."""
    employee = None
    try:
        employee = user_repo.get_employee(db, uuid.UUID(identifier))
    except ValueError:
        pass
    if employee is None:
        employee = user_repo.get_employee_by_code(db, identifier)
    if employee is None:
        number = parse_employee_number(identifier)
        if number is not None:
            employee = user_repo.get_employee_by_number(db, number)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    user_repo.delete_employee(db, employee)
    return schemas.MessageResponse(message="Employee deleted")
