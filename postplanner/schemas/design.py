from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class DesignCreate(BaseModel):
    user_id: int
    name: str
    created_at: Optional[datetime] = None


class DesignResponse(BaseModel):
    id: int
    user_id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True
