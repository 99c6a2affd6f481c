"""
Data access for users, designs, platforms, posts and their scheduler rows.

Every write commits its own transaction. Constraint failures roll the
session back and surface as ``ConstraintViolation``.
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import FOREIGN_KEY, ConstraintViolation, translate_integrity_error
from .logging_config import db_logger
from .models import Design, Platform, Post, Scheduler, User
from .security import get_password_hash


def _commit_or_raise(db: Session, instance):
    """Commit, turning an ``IntegrityError`` into a ``ConstraintViolation``."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        violation = translate_integrity_error(e, db=db, instance=instance)
        db_logger.warning(
            "Write rejected by constraint",
            kind=violation.kind,
            table=violation.table,
            column=violation.column,
        )
        raise violation from e


def _commit(db: Session, instance, *related):
    db.add(instance)
    db.add_all(related)
    _commit_or_raise(db, instance)
    db.refresh(instance)
    return instance


def _delete(db: Session, model, object_id: int) -> bool:
    obj = db.query(model).filter(model.id == object_id).first()
    if not obj:
        return False
    db.delete(obj)
    _commit_or_raise(db, obj)
    db_logger.info(f"{model.__name__} deleted", id=object_id)
    return True


# ============================================================
# USERS
# ============================================================

def create_user(db: Session, name: str, email: str, password: str) -> User:
    """Create a user, storing only the bcrypt hash of ``password``."""
    user = User(
        name=name,
        email=email,
        password=get_password_hash(password) if password is not None else None,
    )
    _commit(db, user)
    db_logger.info("User created", user_id=user.id)
    return user


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_users_by_email(db: Session, email: str) -> List[User]:
    return db.query(User).filter(User.email == email).all()


def delete_user(db: Session, user_id: int) -> bool:
    """Delete a user together with their designs, posts and scheduler rows."""
    return _delete(db, User, user_id)


# ============================================================
# PLATFORMS
# ============================================================

def create_platform(db: Session, name: str, image_size_constraint: str) -> Platform:
    platform = Platform(name=name, image_size_constraint=image_size_constraint)
    _commit(db, platform)
    db_logger.info("Platform created", platform_id=platform.id, name=name)
    return platform


def list_platforms(db: Session) -> List[Platform]:
    return db.query(Platform).order_by(Platform.id).all()


def delete_platform(db: Session, platform_id: int) -> bool:
    """Delete a platform; posts targeting it go with it."""
    return _delete(db, Platform, platform_id)


# ============================================================
# DESIGNS
# ============================================================

def create_design(db: Session, user_id: int, name: str, created_at: Optional[datetime] = None) -> Design:
    design = Design(user_id=user_id, name=name)
    # Left unset the database fills in the current time
    if created_at is not None:
        design.created_at = created_at
    _commit(db, design)
    db_logger.info("Design created", design_id=design.id, user_id=user_id)
    return design


def delete_design(db: Session, design_id: int) -> bool:
    return _delete(db, Design, design_id)


# ============================================================
# POSTS & SCHEDULER ROWS
# ============================================================

def create_post(
    db: Session,
    design_id: int,
    user_id: int,
    platform_id: int,
    content: str,
    scheduled_at: datetime,
) -> Post:
    """
    Create a post and its scheduler row in one transaction.

    The scheduler row copies the post's ``scheduled_at``.
    """
    post = Post(
        design_id=design_id,
        user_id=user_id,
        platform_id=platform_id,
        content=content,
        scheduled_at=scheduled_at,
    )
    scheduler = Scheduler(post=post, scheduled_at=post.scheduled_at)
    _commit(db, post, scheduler)
    db_logger.info(
        "Post scheduled",
        post_id=post.id,
        user_id=user_id,
        platform_id=platform_id,
        scheduled_at=scheduled_at,
    )
    return post


def record_schedule(db: Session, post_id: int) -> Scheduler:
    """
    Write a scheduler row for an existing post.

    The timestamp is always copied from the post. A missing post is reported
    as a foreign-key violation on ``post_id``; a second row for the same post
    as a unique violation.
    """
    post = db.query(Post).filter(Post.id == post_id).first()
    if post is None:
        db_logger.warning("Schedule rejected, post not found", post_id=post_id)
        raise ConstraintViolation(FOREIGN_KEY, Scheduler.__tablename__, "post_id")
    scheduler = Scheduler(post_id=post.id, scheduled_at=post.scheduled_at)
    return _commit(db, scheduler)


def delete_post(db: Session, post_id: int) -> bool:
    return _delete(db, Post, post_id)


__all__ = [
    "ConstraintViolation",
    "create_user",
    "get_user_by_email",
    "get_users_by_email",
    "delete_user",
    "create_platform",
    "list_platforms",
    "delete_platform",
    "create_design",
    "delete_design",
    "create_post",
    "record_schedule",
    "delete_post",
]
