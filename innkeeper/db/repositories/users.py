"""
User and employee repository functions.
"""
from __future__ import annotations

import uuid
from typing import Optional, List
from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from innkeeper.db import models


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def find_user_conflict(db: Session, *, username: str, email: str, employee_number: Optional[int] = None, card_id: Optional[str] = None) -> Optional[str]:
    """Return the name of the first unique field already taken, if any."""
    if db.query(models.User.id).filter(models.User.username == username).first():
        return "username"
    if db.query(models.User.id).filter(models.User.email == email).first():
        return "email"
    if employee_number is not None and db.query(models.User.id).filter(models.User.employee_number == employee_number).first():
        return "employee_number"
    if card_id and db.query(models.User.id).filter(models.User.card_id == card_id).first():
        return "card_id"
    return None


def create_user(db: Session, *, password_hash: str, **fields) -> models.User:
    user = models.User(password_hash=password_hash, **fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def list_users(db: Session) -> List[models.User]:
    return db.query(models.User).order_by(models.User.created_at.asc()).all()


def list_users_by_role(db: Session, role: str) -> List[models.User]:
    return db.query(models.User).filter(models.User.role == role).all()


def get_user(db: Session, user_id: uuid.UUID) -> Optional[models.User]:
    return db.get(models.User, user_id)


def get_employee(db: Session, employee_id: uuid.UUID) -> Optional[models.Employee]:
    return db.get(models.Employee, employee_id)


def get_active_employee_for_login(db: Session, login: str) -> Optional[models.Employee]:
    return (
        db.query(models.Employee)
        .filter(or_(models.Employee.email == login, models.Employee.username == login))
        .filter(models.Employee.status == 'active')
        .first()
    )


def get_employee_by_name(db: Session, name: str) -> Optional[models.Employee]:
    return (
        db.query(models.Employee)
        .filter(func.lower(models.Employee.name) == name.strip().lower())
        .first()
    )


def get_employee_by_number(db: Session, number: int) -> Optional[models.Employee]:
    return db.query(models.Employee).filter(models.Employee.employee_number == number).first()


def get_employee_by_card(db: Session, card_id: str) -> Optional[models.Employee]:
    return db.query(models.Employee).filter(models.Employee.card_id == card_id).first()


def get_employee_by_code(db: Session, code: str) -> Optional[models.Employee]:
    return db.query(models.Employee).filter(models.Employee.employee_code == code).first()


def list_employees(db: Session) -> List[models.Employee]:
    return (
        db.query(models.Employee)
        .order_by(models.Employee.employee_number.asc(), models.Employee.created_at.desc())
        .all()
    )


def max_employee_number(db: Session) -> Optional[int]:
    return db.query(func.max(models.Employee.employee_number)).scalar()


def create_employee(db: Session, **fields) -> models.Employee:
    employee = models.Employee(**fields)
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


def update_employee(db: Session, employee: models.Employee, **fields) -> models.Employee:
    for key, value in fields.items():
        setattr(employee, key, value)
    db.commit()
    db.refresh(employee)
    return employee


def delete_employee(db: Session, employee: models.Employee) -> None:
    db.delete(employee)
    db.commit()
