"""
User routes: registration, lookup by email and deletion.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List

from .. import crud
from ..database import get_db
from ..responses import deleted
from ..schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a user. A duplicate email is rejected with 409."""
    return crud.create_user(db, user_data.name, user_data.email, user_data.password)


@router.get("", response_model=List[UserResponse])
def find_users(email: str = Query(...), db: Session = Depends(get_db)):
    """Look up users by email (at most one, emails are unique)."""
    return crud.get_users_by_email(db, email)


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    """Delete a user along with their designs and posts."""
    if not crud.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return deleted()
