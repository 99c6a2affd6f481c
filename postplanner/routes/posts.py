"""
Post routes. Creating a post also records its scheduler row.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import crud
from ..database import get_db
from ..responses import deleted
from ..schemas.post import PostCreate, PostResponse

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.post("", response_model=PostResponse)
def create_post(post: PostCreate, db: Session = Depends(get_db)):
    return crud.create_post(db, **post.model_dump())


@router.delete("/{post_id}")
def delete_post(post_id: int, db: Session = Depends(get_db)):
    if not crud.delete_post(db, post_id):
        raise HTTPException(status_code=404, detail="Post not found")
    return deleted()
