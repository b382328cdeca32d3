import uuid
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field


class AttendanceTap(BaseModel):
    # Employee number (e.g. "0007") or badge card id
    employee_id: str = Field(min_length=1)


class Attendance(BaseModel):
    id: uuid.UUID
    employee_id: uuid.UUID
    card_id: str
    name: str
    clock_in: datetime
    clock_out: Optional[datetime] = None
    total_hours: Optional[float] = None
    date: str
    model_config = ConfigDict(from_attributes=True)


class AttendanceTapResult(BaseModel):
    message: str
    employee: str
    data: Attendance


class PayrollEntry(BaseModel):
    employee_id: uuid.UUID
    employee_number: int
    card_id: str
    name: str
    total_hours: float
    rate: float
    total_pay: float
    status: str = 'Unpaid'


class PayrollResponse(BaseModel):
    rate: float
    entries: List[PayrollEntry]
    total_payout: float
