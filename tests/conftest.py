import os
import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

os.environ.setdefault("PYTEST_RUNNING", "1")

from innkeeper.db import models
from innkeeper.db.database import get_db
from innkeeper.api.main import app
from innkeeper.utils.passwords import hash_password
from innkeeper.utils.security import create_access_token


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # Admin routes must require a token unless a test opts into DEV_MODE
    monkeypatch.delenv("DEV_MODE", raising=False)
    monkeypatch.delenv("SMTP_HOST", raising=False)
    monkeypatch.delenv("PAYROLL_HOURLY_RATE", raising=False)
    yield


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        models.Base.metadata.drop_all(bind=eng)
        eng.dispose()


@pytest.fixture
def db_session(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Backwards-friendly alias
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def make_user(db_session):
    def _make(role="hotelAdmin", password="secret123", **fields):
        suffix = uuid.uuid4().hex[:8]
        user = models.User(
            username=fields.pop("username", f"{role}-{suffix}"),
            email=fields.pop("email", f"{role}-{suffix}@example.com"),
            password_hash=hash_password(password),
            role=role,
            **fields,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_employee(db_session):
    def _make(name=None, password="staffpass", **fields):
        current = db_session.query(models.Employee.employee_number).order_by(models.Employee.employee_number.desc()).first()
        number = fields.pop("employee_number", (current[0] if current else 0) + 1)
        employee = models.Employee(
            employee_number=number,
            name=name or f"Employee {number}",
            password_hash=hash_password(password) if password else None,
            **fields,
        )
        db_session.add(employee)
        db_session.commit()
        db_session.refresh(employee)
        return employee

    return _make


@pytest.fixture
def auth_headers(make_user):
    """Bearer headers for a freshly created admin account with ``role``."""

    def _headers(role="hotelAdmin"):
        user = make_user(role=role)
        token = create_access_token(subject=str(user.id), role=user.role, kind="user")
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def employee_headers():
    """Bearer headers for an employee session."""

    def _headers(employee):
        token = create_access_token(subject=str(employee.id), role=employee.role, kind="employee")
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def make_room(db_session):
    def _make(room_number="101", room_type="Standard", status="available", **fields):
        room = models.Room(room_number=room_number, room_type=room_type, status=status, **fields)
        db_session.add(room)
        db_session.commit()
        db_session.refresh(room)
        return room

    return _make
