import uuid
from datetime import datetime
from typing import Optional, List, Literal
from pydantic import BaseModel, ConfigDict, Field


TaskType = Literal['CLEANING', 'MAINTENANCE', 'INSPECTION', 'MISC']
TaskStatus = Literal['UNASSIGNED', 'NOT_STARTED', 'IN_PROGRESS', 'COMPLETED']
TaskPriority = Literal['LOW', 'MEDIUM', 'HIGH']


class TaskNote(BaseModel):
    note: str
    added_at: Optional[datetime] = None
    added_by: Optional[str] = None


class TaskCreate(BaseModel):
    room: str = Field(min_length=1)
    type: TaskType
    priority: TaskPriority
    # Employee id or display name; omitted for unassigned tasks
    assigned_to: Optional[str] = None
    description: str = ''
    job_title: Optional[str] = None
    estimated_duration: int = Field(default=30, ge=1)
    due_date: Optional[datetime] = None
    created_by: str = 'system'


class TaskStatusUpdate(BaseModel):
    status: TaskStatus
    updated_by: Optional[str] = None


class TaskNoteCreate(BaseModel):
    note: str = Field(min_length=1)
    added_by: Optional[str] = None


class Task(BaseModel):
    id: uuid.UUID
    task_code: str
    assigned_to: Optional[uuid.UUID] = None
    employee_code: str
    room: str
    type: str
    status: str
    priority: str
    description: str
    job_title: str
    estimated_duration: int
    due_date: datetime
    created_by: str
    notes: List[TaskNote]
    prior_status: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class TaskStatusResult(BaseModel):
    task: Task
    room_status_change: Optional[dict] = None


class TaskRequestCreate(BaseModel):
    room_number: str = Field(min_length=1)
    job_type: str = Field(min_length=1)
    priority: TaskPriority = 'MEDIUM'
    date: Optional[datetime] = None


class TaskRequest(BaseModel):
    id: uuid.UUID
    task_code: str
    room_number: str
    job_type: str
    date: datetime
    priority: str
    model_config = ConfigDict(from_attributes=True)
