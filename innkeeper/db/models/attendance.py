import uuid
from sqlalchemy import Column, String, DateTime, Float, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from .base import Base


class Attendance(Base):
    __tablename__ = 'attendances'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    employee_id = Column(UUID(as_uuid=True), ForeignKey('employees.id', ondelete='CASCADE'), nullable=False)
    card_id = Column(String(100), nullable=False)
    name = Column(String(200), nullable=False)
    clock_in = Column(DateTime(timezone=True), nullable=False)
    clock_out = Column(DateTime(timezone=True), nullable=True)
    total_hours = Column(Float, nullable=True)
    # Local calendar date of the clock-in (YYYY-MM-DD)
    date = Column(String(10), nullable=False)

    __table_args__ = (
        Index('ix_attendances_employee_id_clock_out', 'employee_id', 'clock_out'),
    )
