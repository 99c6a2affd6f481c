"""
Design routes.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import crud
from ..database import get_db
from ..responses import deleted
from ..schemas.design import DesignCreate, DesignResponse

router = APIRouter(prefix="/api/designs", tags=["designs"])


@router.post("", response_model=DesignResponse)
def create_design(design: DesignCreate, db: Session = Depends(get_db)):
    """Create a design for an existing user."""
    return crud.create_design(db, design.user_id, design.name, design.created_at)


@router.delete("/{design_id}")
def delete_design(design_id: int, db: Session = Depends(get_db)):
    if not crud.delete_design(db, design_id):
        raise HTTPException(status_code=404, detail="Design not found")
    return deleted()
