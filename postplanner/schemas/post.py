from pydantic import BaseModel
from datetime import datetime


class PostBase(BaseModel):
    design_id: int
    user_id: int
    platform_id: int
    content: str
    scheduled_at: datetime


class PostCreate(PostBase):
    pass


class PostResponse(PostBase):
    id: int

    class Config:
        from_attributes = True


class PostReportResponse(BaseModel):
    """One line of the posts-by-user report."""
    content: str
    design_name: str
    platform_name: str
    scheduled_at: datetime
