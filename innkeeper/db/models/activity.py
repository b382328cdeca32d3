import uuid
from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.dialects.postgresql import UUID, JSONB
from .base import Base, now_utc


class ActivityLog(Base):
    __tablename__ = 'activity_logs'
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    action_type = Column(String(30), nullable=False)
    # Logical collection of the target document, e.g. 'rooms' or 'bookings'
    collection = Column(String(50), nullable=False)
    document_id = Column(UUID(as_uuid=True), nullable=False)
    user = Column(String(200), nullable=True)
    timestamp = Column(DateTime(timezone=True), default=now_utc, nullable=False)
    details = Column(JSONB, nullable=True)
    change = Column(JSONB, nullable=True)

    __table_args__ = (
        Index('ix_activity_logs_collection_document_id', 'collection', 'document_id'),
        Index('ix_activity_logs_timestamp', 'timestamp'),
    )
