"""
Post model for scheduled social media content.
"""
from sqlalchemy import Column, Integer, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    design_id = Column(Integer, ForeignKey("designs.id", ondelete="CASCADE"), nullable=False, index=True)
    # Cascades with the user; a post never outlives its owner
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    platform_id = Column(Integer, ForeignKey("platforms.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    scheduled_at = Column(DateTime, nullable=False)

    # Relationships
    design = relationship("Design", back_populates="posts")
    user = relationship("User", back_populates="posts")
    platform = relationship("Platform", back_populates="posts")
    scheduler = relationship(
        "Scheduler",
        back_populates="post",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
