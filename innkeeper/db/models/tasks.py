import uuid
from datetime import timedelta
from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship
from .base import Base, now_utc


TASK_TYPES = ('CLEANING', 'MAINTENANCE', 'INSPECTION', 'MISC')
TASK_STATUSES = ('UNASSIGNED', 'NOT_STARTED', 'IN_PROGRESS', 'COMPLETED')
TASK_PRIORITIES = ('LOW', 'MEDIUM', 'HIGH')


def _default_due_date():
    return now_utc() + timedelta(hours=24)


class Task(Base):
    __tablename__ = 'tasks'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    task_code = Column(String(20), nullable=False, unique=True, index=True)
    assigned_to = Column(UUID(as_uuid=True), ForeignKey('employees.id', ondelete='SET NULL'), nullable=True)
    employee_code = Column(String(50), nullable=False, default='N/A')
    room = Column(String(50), nullable=False)
    type = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default='NOT_STARTED')
    priority = Column(String(10), nullable=False)
    description = Column(Text, nullable=False, default='')
    job_title = Column(String(30), nullable=False, default='Staff')
    estimated_duration = Column(Integer, nullable=False, default=30)
    due_date = Column(DateTime(timezone=True), default=_default_due_date, nullable=False)
    created_by = Column(String(100), nullable=False, default='system')
    # [{note, added_at, added_by}]
    notes = Column(JSONB, nullable=False, default=list)
    # Room status before the task started; restored on completion
    prior_status = Column(String(30), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    assignee = relationship("Employee")

    __table_args__ = (
        Index('ix_tasks_type_status', 'type', 'status'),
    )


class TaskRequest(Base):
    __tablename__ = 'task_requests'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    task_code = Column(String(20), nullable=False, unique=True)
    room_number = Column(String(50), nullable=False)
    job_type = Column(String(30), nullable=False)
    date = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    priority = Column(String(10), nullable=False)
