import uuid
from sqlalchemy import Column, String, Integer, Text, DateTime
from sqlalchemy.dialects.postgresql import UUID
from .base import Base, now_utc


USER_ROLES = ('restaurantAdmin', 'hotelAdmin', 'employeeAdmin', 'employee')
JOB_TITLES = ('Cleaner', 'Clerk', 'Maintenance', 'Manager', 'Staff')


class User(Base):
    __tablename__ = 'users'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    username = Column(String(100), nullable=False, unique=True)
    name = Column(String(200), nullable=True)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    role = Column(String(30), nullable=False, default='restaurantAdmin')
    employee_number = Column(Integer, nullable=True, unique=True)
    # Sub-role for employees; one of JOB_TITLES
    job_title = Column(String(30), nullable=False, default='Staff')
    contact_number = Column(String(50), nullable=False, default='')
    card_id = Column(String(100), nullable=True, unique=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)


class Employee(Base):
    __tablename__ = 'employees'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    employee_number = Column(Integer, nullable=False, unique=True, index=True)
    employee_code = Column(String(50), nullable=True, index=True)
    username = Column(String(100), nullable=True, index=True)
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=True, index=True)
    password_hash = Column(Text, nullable=True)
    role = Column(String(30), nullable=False, default='employee')
    department = Column(String(100), nullable=False, default='General')
    job_title = Column(String(30), nullable=True)
    contact_number = Column(String(50), nullable=False, default='')
    status = Column(String(20), nullable=False, default='active')
    date_hired = Column(DateTime(timezone=True), nullable=True)
    shift = Column(String(50), nullable=True)
    notes = Column(Text, nullable=False, default='')
    card_id = Column(String(100), nullable=True, unique=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)

    @property
    def padded_number(self) -> str:
        return str(self.employee_number).zfill(4)
