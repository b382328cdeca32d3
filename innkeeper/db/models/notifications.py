import uuid
from sqlalchemy import Column, String, Text, DateTime, Boolean, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


RECIPIENT_MODELS = ('User', 'Employee', 'Customer')
NOTIFICATION_TYPES = ('task_request', 'task_update', 'request_update')
RELATED_MODELS = ('Task', 'Request')
NOTIFICATION_PRIORITIES = ('low', 'medium', 'high')
NOTIFICATION_ACTIONS = ('created', 'updated', 'assigned', 'status_changed', 'deleted')


class Notification(Base):
    __tablename__ = 'notifications'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    recipient_id = Column(UUID(as_uuid=True), nullable=False)
    recipient_model = Column(String(20), nullable=False)
    type = Column(String(30), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    related_id = Column(UUID(as_uuid=True), nullable=False)
    related_model = Column(String(20), nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    priority = Column(String(10), nullable=False, default='medium')
    action = Column(String(20), nullable=True)
    task_code = Column(String(20), nullable=True)
    room = Column(String(50), nullable=True)
    task_type = Column(String(30), nullable=True)
    status = Column(String(30), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc, nullable=False)

    __table_args__ = (
        Index('idx_notifications_recipient_is_read_created_at', 'recipient_id', 'is_read', 'created_at'),
        Index('idx_notifications_related', 'related_id', 'related_model'),
    )


class HotelAdminNotification(Base):
    __tablename__ = 'hotel_admin_notifications'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    booking_id = Column(String(100), nullable=True, index=True)
    task_code = Column(String(20), nullable=True, index=True)
    room_number = Column(String(50), nullable=True)
    room_type = Column(String(30), nullable=True)
    employee_code = Column(String(50), nullable=True)
    task_type = Column(String(30), nullable=True)
    old_status = Column(String(30), nullable=True)
    new_status = Column(String(30), nullable=True)
    is_room_notification = Column(Boolean, nullable=False, default=False)
    is_task_notification = Column(Boolean, nullable=False, default=False)
    raw = Column(JSONB, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    read = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index('idx_hotel_admin_notifications_timestamp', 'timestamp'),
    )
