"""
Platform routes.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from .. import crud
from ..database import get_db
from ..responses import deleted
from ..schemas.platform import PlatformCreate, PlatformResponse

router = APIRouter(prefix="/api/platforms", tags=["platforms"])


@router.post("", response_model=PlatformResponse)
def create_platform(platform: PlatformCreate, db: Session = Depends(get_db)):
    return crud.create_platform(db, platform.name, platform.image_size_constraint)


@router.get("", response_model=List[PlatformResponse])
def list_platforms(db: Session = Depends(get_db)):
    return crud.list_platforms(db)


@router.delete("/{platform_id}")
def delete_platform(platform_id: int, db: Session = Depends(get_db)):
    """Delete a platform and every post scheduled on it."""
    if not crud.delete_platform(db, platform_id):
        raise HTTPException(status_code=404, detail="Platform not found")
    return deleted()
