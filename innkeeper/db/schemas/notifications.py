import uuid
from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict


class Notification(BaseModel):
    id: uuid.UUID
    recipient_id: uuid.UUID
    recipient_model: str
    type: str
    title: str
    message: str
    related_id: uuid.UUID
    related_model: str
    is_read: bool
    priority: str
    action: Optional[str] = None
    task_code: Optional[str] = None
    room: Optional[str] = None
    task_type: Optional[str] = None
    status: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class UnreadCount(BaseModel):
    count: int


class HotelAdminNotificationCreate(BaseModel):
    booking_id: Optional[str] = None
    task_code: Optional[str] = None
    room_number: Optional[str] = None
    room_type: Optional[str] = None
    employee_code: Optional[str] = None
    task_type: Optional[str] = None
    old_status: Optional[str] = None
    new_status: Optional[str] = None
    is_room_notification: bool = False
    is_task_notification: bool = False
    timestamp: Optional[datetime] = None
    read: bool = False


class HotelAdminNotification(BaseModel):
    id: uuid.UUID
    booking_id: Optional[str] = None
    task_code: Optional[str] = None
    room_number: Optional[str] = None
    room_type: Optional[str] = None
    employee_code: Optional[str] = None
    task_type: Optional[str] = None
    old_status: Optional[str] = None
    new_status: Optional[str] = None
    is_room_notification: bool
    is_task_notification: bool
    raw: Optional[Dict[str, Any]] = None
    timestamp: datetime
    read: bool
    model_config = ConfigDict(from_attributes=True)


class HotelAdminNotificationSaved(BaseModel):
    success: bool = True
    id: uuid.UUID
    skipped_duplicate: bool = False
