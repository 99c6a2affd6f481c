"""
Scheduler model: one audit row per post recording its intended publish time.

Nothing executes these rows. ``scheduled_at`` is copied from the post when
the row is written; the post's own timestamp is the source of truth.
"""
from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class Scheduler(Base):
    __tablename__ = "schedulers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, unique=True)
    scheduled_at = Column(DateTime, nullable=False)

    # Relationships
    post = relationship("Post", back_populates="scheduler")
