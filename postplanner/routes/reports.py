"""
Report routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from ..database import get_db
from ..queries import list_posts_by_user_name
from ..schemas.post import PostReportResponse

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/posts", response_model=List[PostReportResponse])
def posts_by_user(user_name: str = Query(...), db: Session = Depends(get_db)):
    """Scheduled posts of the named user; empty for an unknown user."""
    return [row._asdict() for row in list_posts_by_user_name(db, user_name)]
