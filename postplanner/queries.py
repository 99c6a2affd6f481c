"""
Read-only report queries.
"""
from datetime import datetime
from typing import List, NamedTuple

from sqlalchemy.orm import Session

from .models import Design, Platform, Post, User


class PostReportRow(NamedTuple):
    content: str
    design_name: str
    platform_name: str
    scheduled_at: datetime


def list_posts_by_user_name(db: Session, user_name: str) -> List[PostReportRow]:
    """
    List every post created by the user called ``user_name``.

    Returns an empty list when no such user exists or the user has no posts.
    Rows come back in scheduled order.
    """
    rows = (
        db.query(Post.content, Design.name, Platform.name, Post.scheduled_at)
        .join(Design, Post.design_id == Design.id)
        .join(Platform, Post.platform_id == Platform.id)
        .join(User, Post.user_id == User.id)
        .filter(User.name == user_name)
        .order_by(Post.scheduled_at, Post.id)
        .all()
    )
    return [PostReportRow(*row) for row in rows]
