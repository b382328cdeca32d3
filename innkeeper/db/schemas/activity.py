import uuid
from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict


class ActivityLogBase(BaseModel):
    action_type: str
    collection: str
    document_id: uuid.UUID
    user: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    change: Optional[Dict[str, Any]] = None


class ActivityLogCreate(ActivityLogBase):
    pass


class ActivityLog(ActivityLogBase):
    id: uuid.UUID
    timestamp: datetime
    model_config = ConfigDict(from_attributes=True)
